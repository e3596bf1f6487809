"""
coordshift
WGS-84 / GCJ-02 / BD-09 坐标系互转
"""

from .transform import is_outside_china, wgs_to_gcj, gcj_to_wgs, gcj_to_wgs_exact, gcj_to_bd, bd_to_gcj
from .converter import wgs_to_bd, bd_to_wgs, GeodeticSystem, convert

__version__ = '1.0.0'

__all__ = [
    'wgs_to_gcj', 'gcj_to_wgs', 'gcj_to_bd', 'bd_to_gcj', 'wgs_to_bd', 'bd_to_wgs',
    'gcj_to_wgs_exact', 'is_outside_china', 'GeodeticSystem', 'convert',
]
