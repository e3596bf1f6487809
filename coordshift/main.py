"""
命令行入口
转换单个坐标并打印 "纬度,经度"
"""

import argparse
from typing import List, Optional, Tuple

from loguru import logger

from coordshift.converter import GeodeticSystem
from coordshift.transform import bd_to_gcj, gcj_to_wgs_exact
from coordshift.utils.config_loader import ConfigLoader, DEFAULT_CONVERT_CONFIG
from coordshift.utils.logger import setup_logger, setup_logger_from_config


CONFIG_NAME = 'convert_config'
LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']


def non_negative_int(value) -> int:
    """输出小数位数: 非负整数"""
    number = int(value)
    if number < 0:
        raise ValueError(f"小数位数不能为负: {value}")
    return number


def run_conversion(
    lat: float,
    lon: float,
    source: GeodeticSystem,
    target: GeodeticSystem,
    exact_inverse: bool = False,
    epsilon: float = 1e-7,
    max_rounds: int = 10
) -> Tuple[float, float]:
    """
    执行一次坐标转换

    exact_inverse 为True且目标为WGS-84时, GCJ-02 -> WGS-84 一步改用迭代反算

    Args:
        lat: 纬度
        lon: 经度
        source: 源坐标系
        target: 目标坐标系
        exact_inverse: 是否使用迭代反算
        epsilon: 迭代收敛阈值
        max_rounds: 最大迭代次数

    Returns:
        (纬度, 经度)
    """
    if exact_inverse and target is GeodeticSystem.WGS84 and source is not GeodeticSystem.WGS84:
        if source is GeodeticSystem.BD09:
            lat, lon = bd_to_gcj(lat, lon)
        return gcj_to_wgs_exact(lat, lon, epsilon=epsilon, max_rounds=max_rounds)

    return source.convert_to(target, lat, lon)


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog='coordshift',
        description='WGS-84 / GCJ-02 / BD-09 坐标转换',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
使用示例:
  # WGS84 -> GCJ02 (默认)
  coordshift 39.9087 116.3975

  # 百度坐标 -> GPS坐标, 使用迭代反算
  coordshift 39.915 116.404 --from bd09 --to wgs84 --exact

  # 指定配置目录
  coordshift 39.9087 116.3975 --config ./config
        '''
    )

    parser.add_argument('lat', type=float, help='纬度 (十进制度)')
    parser.add_argument('lon', type=float, help='经度 (十进制度)')

    parser.add_argument(
        '--from',
        dest='source',
        type=GeodeticSystem.from_name,
        default=None,
        help='源坐标系: wgs84 / gcj02 / bd09 (默认取配置)'
    )

    parser.add_argument(
        '--to',
        dest='target',
        type=GeodeticSystem.from_name,
        default=None,
        help='目标坐标系: wgs84 / gcj02 / bd09 (默认取配置)'
    )

    parser.add_argument(
        '--exact',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='GCJ02 -> WGS84 是否使用迭代反算 (默认取配置)'
    )

    parser.add_argument(
        '--precision',
        type=non_negative_int,
        default=None,
        help='输出小数位数 (默认取配置)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default='./config',
        help='配置文件目录路径 (默认: ./config)'
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help='日志级别 (默认取配置)'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # 先按命令行级别初始化日志, 读取配置后再按配置重新设置
    setup_logger(args.log_level or DEFAULT_CONVERT_CONFIG['logging']['level'])
    loader = ConfigLoader(config_dir=args.config)
    config = loader.load_with_defaults(CONFIG_NAME, DEFAULT_CONVERT_CONFIG)
    try:
        setup_logger_from_config(config.get('logging'), level_override=args.log_level)
    except ValueError as e:
        parser.error(f"配置文件错误: {e}")

    conversion = config['conversion']
    try:
        source = args.source or GeodeticSystem.from_name(conversion['source'])
        target = args.target or GeodeticSystem.from_name(conversion['target'])
        precision = args.precision if args.precision is not None else non_negative_int(conversion.get('precision', 6))
    except ValueError as e:
        parser.error(f"配置文件错误: {e}")

    exact_inverse = args.exact if args.exact is not None else bool(conversion.get('exact_inverse', False))
    exact_params = conversion.get('exact', {})

    logger.debug(f"转换: {source.value} -> {target.value}, 迭代反算: {exact_inverse}")

    lat, lon = run_conversion(
        args.lat,
        args.lon,
        source,
        target,
        exact_inverse=exact_inverse,
        epsilon=float(exact_params.get('epsilon', 1e-7)),
        max_rounds=int(exact_params.get('max_rounds', 10))
    )

    print(f"{lat:.{precision}f},{lon:.{precision}f}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
