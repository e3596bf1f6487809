"""
GCJ-02 偏移模型
用经验级数近似国测局加偏算法, 输出以度为单位的纬度/经度偏移量

注意: 系数、求和顺序、弧度/角度的使用都必须和通行实现保持一致,
任何改动都会让结果悄悄偏离几米到几公里
"""

import numpy as np
from typing import Tuple

from .constants import (
    A,
    EE,
    ORIGIN_LAT,
    ORIGIN_LON,
    LAT_POLY,
    LON_POLY,
    SHARED_HARMONICS,
    LAT_HARMONICS,
    LAT_LONG_WAVES,
    LON_HARMONICS,
    LON_LONG_WAVES,
)


def transform_lat(x: float, y: float) -> float:
    """
    纬度方向的偏移级数

    Args:
        x: 经度 - 105.0
        y: 纬度 - 35.0
    """
    c0, c1, c2, c3, c4, c5 = LAT_POLY
    ret = c0 + c1 * x + c2 * y + c3 * y * y + c4 * x * y + c5 * np.sqrt(np.abs(x))
    ret += (SHARED_HARMONICS[0] * np.sin(6.0 * x * np.pi) +
            SHARED_HARMONICS[1] * np.sin(2.0 * x * np.pi)) * 2.0 / 3.0
    ret += (LAT_HARMONICS[0] * np.sin(y * np.pi) +
            LAT_HARMONICS[1] * np.sin(y / 3.0 * np.pi)) * 2.0 / 3.0
    ret += (LAT_LONG_WAVES[0] * np.sin(y / 12.0 * np.pi) +
            LAT_LONG_WAVES[1] * np.sin(y * np.pi / 30.0)) * 2.0 / 3.0
    return ret


def transform_lon(x: float, y: float) -> float:
    """
    经度方向的偏移级数

    Args:
        x: 经度 - 105.0
        y: 纬度 - 35.0
    """
    c0, c1, c2, c3, c4, c5 = LON_POLY
    ret = c0 + c1 * x + c2 * y + c3 * x * x + c4 * x * y + c5 * np.sqrt(np.abs(x))
    ret += (SHARED_HARMONICS[0] * np.sin(6.0 * x * np.pi) +
            SHARED_HARMONICS[1] * np.sin(2.0 * x * np.pi)) * 2.0 / 3.0
    ret += (LON_HARMONICS[0] * np.sin(x * np.pi) +
            LON_HARMONICS[1] * np.sin(x / 3.0 * np.pi)) * 2.0 / 3.0
    ret += (LON_LONG_WAVES[0] * np.sin(x / 12.0 * np.pi) +
            LON_LONG_WAVES[1] * np.sin(x / 30.0 * np.pi)) * 2.0 / 3.0
    return ret


def delta(lat: float, lon: float) -> Tuple[float, float]:
    """
    计算某点 WGS-84 -> GCJ-02 的偏移量

    级数结果是无量纲的, 这里按该纬度处椭球的子午圈/卯酉圈曲率半径
    换算成角度偏移

    Args:
        lat: 纬度
        lon: 经度

    Returns:
        (dlat, dlon) 单位: 度
    """
    dlat = transform_lat(lon - ORIGIN_LON, lat - ORIGIN_LAT)
    dlon = transform_lon(lon - ORIGIN_LON, lat - ORIGIN_LAT)

    rad_lat = lat * np.pi / 180.0
    magic = 1.0 - EE * np.sin(rad_lat) ** 2
    sqrt_magic = np.sqrt(magic)

    dlat = (dlat * 180.0) / ((A * (1.0 - EE)) / (magic * sqrt_magic) * np.pi)
    dlon = (dlon * 180.0) / (A / sqrt_magic * np.cos(rad_lat) * np.pi)

    return float(dlat), float(dlon)
