"""
坐标系转换入口

六个转换函数 (WGS-84 / GCJ-02 / BD-09 两两互转) 以及按坐标系名称分发的
GeodeticSystem 枚举。所有函数输入输出均为 (纬度, 经度), 不做范围校验
"""

from enum import Enum
from typing import Callable, Dict, Tuple, Union

from .transform.wgs_gcj import wgs_to_gcj, gcj_to_wgs
from .transform.gcj_bd import gcj_to_bd, bd_to_gcj


def wgs_to_bd(lat: float, lon: float) -> Tuple[float, float]:
    """WGS-84 转 BD-09 (经由GCJ-02)"""
    return gcj_to_bd(*wgs_to_gcj(lat, lon))


def bd_to_wgs(lat: float, lon: float) -> Tuple[float, float]:
    """BD-09 转 WGS-84 (经由GCJ-02)"""
    return gcj_to_wgs(*bd_to_gcj(lat, lon))


class GeodeticSystem(Enum):
    """坐标系"""

    WGS84 = 'WGS84'
    GCJ02 = 'GCJ02'
    BD09 = 'BD09'

    @classmethod
    def from_name(cls, name: Union[str, 'GeodeticSystem']) -> 'GeodeticSystem':
        """
        按名称查找坐标系 (不区分大小写, 支持常用别名)

        Args:
            name: 坐标系名称, 例如 "wgs84", "GCJ-02", "baidu"

        Returns:
            GeodeticSystem 成员

        Raises:
            ValueError: 未知的坐标系名称
        """
        if isinstance(name, cls):
            return name

        key = str(name).strip().lower()
        if key not in _ALIASES:
            raise ValueError(f"不支持的坐标系: {name}")
        return _ALIASES[key]

    def convert_to(
        self,
        target: 'GeodeticSystem',
        lat: float,
        lon: float
    ) -> Tuple[float, float]:
        """
        将本坐标系下的坐标转换到目标坐标系

        Args:
            target: 目标坐标系
            lat: 纬度
            lon: 经度

        Returns:
            目标坐标系下的 (纬度, 经度)
        """
        if self is target:
            return lat, lon
        return _CONVERSIONS[(self, target)](lat, lon)


_ALIASES: Dict[str, GeodeticSystem] = {
    'wgs84': GeodeticSystem.WGS84,
    'wgs-84': GeodeticSystem.WGS84,
    'gps': GeodeticSystem.WGS84,
    'gcj02': GeodeticSystem.GCJ02,
    'gcj-02': GeodeticSystem.GCJ02,
    'mars': GeodeticSystem.GCJ02,
    'bd09': GeodeticSystem.BD09,
    'bd-09': GeodeticSystem.BD09,
    'baidu': GeodeticSystem.BD09,
}

_CONVERSIONS: Dict[Tuple[GeodeticSystem, GeodeticSystem], Callable[[float, float], Tuple[float, float]]] = {
    (GeodeticSystem.WGS84, GeodeticSystem.GCJ02): wgs_to_gcj,
    (GeodeticSystem.WGS84, GeodeticSystem.BD09): wgs_to_bd,
    (GeodeticSystem.GCJ02, GeodeticSystem.WGS84): gcj_to_wgs,
    (GeodeticSystem.GCJ02, GeodeticSystem.BD09): gcj_to_bd,
    (GeodeticSystem.BD09, GeodeticSystem.WGS84): bd_to_wgs,
    (GeodeticSystem.BD09, GeodeticSystem.GCJ02): bd_to_gcj,
}


def convert(
    lat: float,
    lon: float,
    source: Union[str, GeodeticSystem],
    target: Union[str, GeodeticSystem]
) -> Tuple[float, float]:
    """
    坐标系转换快捷函数

    Args:
        lat: 纬度
        lon: 经度
        source: 源坐标系 (枚举或名称)
        target: 目标坐标系 (枚举或名称)

    Returns:
        目标坐标系下的 (纬度, 经度)

    Example:
        >>> convert(39.9087, 116.3975, 'wgs84', 'bd09')
    """
    src = GeodeticSystem.from_name(source)
    dst = GeodeticSystem.from_name(target)
    return src.convert_to(dst, lat, lon)
