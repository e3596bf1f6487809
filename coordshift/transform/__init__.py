"""
坐标转换模块
包括GCJ-02偏移模型、WGS-84/GCJ-02互转和GCJ-02/BD-09互转
"""

from .bounds import is_outside_china
from .distortion import delta
from .wgs_gcj import wgs_to_gcj, gcj_to_wgs, gcj_to_wgs_exact
from .gcj_bd import gcj_to_bd, bd_to_gcj

__all__ = [
    'is_outside_china', 'delta',
    'wgs_to_gcj', 'gcj_to_wgs', 'gcj_to_wgs_exact',
    'gcj_to_bd', 'bd_to_gcj',
]
