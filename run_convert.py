"""
坐标转换快捷启动脚本
"""

import sys
from coordshift.main import main


if __name__ == '__main__':
    if len(sys.argv) < 3:
        print("用法: python run_convert.py <纬度> <经度> [--from 坐标系] [--to 坐标系] [--exact]")
        print("示例: python run_convert.py 39.9087 116.3975 --from wgs84 --to bd09")
        sys.exit(1)

    sys.exit(main(sys.argv[1:]))
