"""
WGS-84 <-> GCJ-02 转换

输入/输出均为 (纬度, 经度)
国外坐标两个坐标系重合, 原样返回
"""

from typing import Tuple
from loguru import logger

from .bounds import is_outside_china
from .constants import EXACT_EPSILON, EXACT_MAX_ROUNDS
from .distortion import delta


def wgs_to_gcj(lat: float, lon: float) -> Tuple[float, float]:
    """
    WGS-84 转 GCJ-02

    Args:
        lat: WGS-84 纬度
        lon: WGS-84 经度

    Returns:
        GCJ-02 (纬度, 经度)
    """
    if is_outside_china(lat, lon):
        return lat, lon

    dlat, dlon = delta(lat, lon)
    return lat + dlat, lon + dlon


def gcj_to_wgs(lat: float, lon: float) -> Tuple[float, float]:
    """
    GCJ-02 转 WGS-84 (一阶近似)

    偏移量在GCJ-02点上计算, 不是真实WGS-84点, 往返误差在几米以内。
    需要更高精度时使用 gcj_to_wgs_exact

    Args:
        lat: GCJ-02 纬度
        lon: GCJ-02 经度

    Returns:
        WGS-84 (纬度, 经度)
    """
    if is_outside_china(lat, lon):
        return lat, lon

    dlat, dlon = delta(lat, lon)
    return lat - dlat, lon - dlon


def gcj_to_wgs_exact(
    lat: float,
    lon: float,
    epsilon: float = EXACT_EPSILON,
    max_rounds: int = EXACT_MAX_ROUNDS
) -> Tuple[float, float]:
    """
    GCJ-02 转 WGS-84 (迭代反算)

    从GCJ-02点出发, 每轮正算一次并用残差修正, 直到残差小于epsilon
    或达到max_rounds

    Args:
        lat: GCJ-02 纬度
        lon: GCJ-02 经度
        epsilon: 收敛阈值 (度)
        max_rounds: 最大迭代次数

    Returns:
        WGS-84 (纬度, 经度)
    """
    if is_outside_china(lat, lon):
        return lat, lon

    wgs_lat, wgs_lon = lat, lon

    for round_idx in range(max_rounds):
        cur_lat, cur_lon = wgs_to_gcj(wgs_lat, wgs_lon)
        dlat = lat - cur_lat
        dlon = lon - cur_lon

        if abs(dlat) < epsilon and abs(dlon) < epsilon:
            logger.debug(f"迭代反算收敛: 第{round_idx + 1}轮, 残差=({dlat:.2e}, {dlon:.2e})")
            return wgs_lat, wgs_lon

        wgs_lat += dlat
        wgs_lon += dlon

    logger.warning(f"迭代反算未收敛: ({lat}, {lon}) 已达最大轮数 {max_rounds}")
    return wgs_lat, wgs_lon
