"""
国内范围判断
只有国内坐标需要做 WGS-84 <-> GCJ-02 偏移
"""

from .constants import CHINA_MIN_LON, CHINA_MAX_LON, CHINA_MIN_LAT, CHINA_MAX_LAT


def is_outside_china(lat: float, lon: float) -> bool:
    """
    判断坐标是否在国内矩形范围之外

    边界附近允许误判, 这里不是精确国界

    Args:
        lat: 纬度
        lon: 经度

    Returns:
        在范围外返回True
    """
    return (
        lon < CHINA_MIN_LON
        or lon > CHINA_MAX_LON
        or lat < CHINA_MIN_LAT
        or lat > CHINA_MAX_LAT
    )
