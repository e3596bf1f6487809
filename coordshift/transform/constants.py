"""
坐标转换常量
克拉索夫斯基椭球参数、国内范围边界以及百度偏移参数
"""

import math

# Krasovsky 1940 椭球: a = 6378245.0, 1/f = 298.3
# ee = (a^2 - b^2) / a^2
A = 6378245.0
EE = 0.00669342162296594323

# GCJ-02 -> BD-09 使用的缩放常量
X_PI = math.pi * 3000.0 / 180.0

# 国内范围 (粗略矩形, 非精确国界)
CHINA_MIN_LON = 72.004
CHINA_MAX_LON = 137.8347
CHINA_MIN_LAT = 0.8293
CHINA_MAX_LAT = 55.8271

# 偏移级数的中心点
ORIGIN_LON = 105.0
ORIGIN_LAT = 35.0

# 偏移级数多项式部分系数: 常数项, x, y, 二次项, xy, sqrt(|x|)
LAT_POLY = (-100.0, 2.0, 3.0, 0.2, 0.1, 0.2)
LON_POLY = (300.0, 1.0, 2.0, 0.1, 0.1, 0.1)

# 三角级数振幅
SHARED_HARMONICS = (20.0, 20.0)   # sin(6πx), sin(2πx)
LAT_HARMONICS = (20.0, 40.0)      # sin(πy), sin(πy/3)
LAT_LONG_WAVES = (160.0, 320.0)   # sin(πy/12), sin(πy/30)
LON_HARMONICS = (20.0, 40.0)      # sin(πx), sin(πx/3)
LON_LONG_WAVES = (150.0, 300.0)   # sin(πx/12), sin(πx/30)

# BD-09 偏移
BD_LAT_OFFSET = 0.006
BD_LON_OFFSET = 0.0065
BD_Z_FACTOR = 0.00002
BD_THETA_FACTOR = 0.000003

# GCJ-02 -> WGS-84 迭代反算默认参数
EXACT_EPSILON = 1e-7
EXACT_MAX_ROUNDS = 10
