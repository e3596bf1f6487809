"""
GCJ-02 <-> BD-09 转换
百度公开的闭式偏移, 不判断国内范围
非有限输入 (NaN/Inf) 经numpy传播为NaN, 不抛异常
"""

import numpy as np
from typing import Tuple

from .constants import X_PI, BD_LAT_OFFSET, BD_LON_OFFSET, BD_Z_FACTOR, BD_THETA_FACTOR


def gcj_to_bd(lat: float, lon: float) -> Tuple[float, float]:
    """GCJ-02 转 BD-09, 返回 (纬度, 经度)"""
    z = np.sqrt(lon * lon + lat * lat) + BD_Z_FACTOR * np.sin(lat * X_PI)
    theta = np.arctan2(lat, lon) + BD_THETA_FACTOR * np.cos(lon * X_PI)
    return float(z * np.sin(theta) + BD_LAT_OFFSET), float(z * np.cos(theta) + BD_LON_OFFSET)


def bd_to_gcj(lat: float, lon: float) -> Tuple[float, float]:
    """BD-09 转 GCJ-02, 返回 (纬度, 经度)"""
    x = lon - BD_LON_OFFSET
    y = lat - BD_LAT_OFFSET
    z = np.sqrt(x * x + y * y) - BD_Z_FACTOR * np.sin(y * X_PI)
    theta = np.arctan2(y, x) - BD_THETA_FACTOR * np.cos(x * X_PI)
    return float(z * np.sin(theta)), float(z * np.cos(theta))
