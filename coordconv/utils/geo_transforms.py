import logging
import math

from ..exceptions import UnknownCoordinateSystemError

logger = logging.getLogger(__name__)

X_PI = math.pi * 3000.0 / 180.0
A = 6378245.0  # 长半轴
EE = 0.00669342162296594323  # 偏心率平方
BD_LON_OFFSET = 0.0065  # 百度坐标系经度偏移常量
BD_LAT_OFFSET = 0.0060  # 百度坐标系纬度偏移常量

# 反解 GCJ02 -> WGS84 的二分搜索参数
THRESHOLD = 1e-10
MAX_ITERATIONS = 10000
SEARCH_RADIUS = 0.01


def in_china(lng, lat):
    """
    中国范围：lng 73.66~135.05, lat 3.86~53.55（开区间，边界不算在内）
    """
    return 73.66 < lng < 135.05 and 3.86 < lat < 53.55


def out_of_china(lng, lat):
    """
    判断是否在国内，不在国内不做偏移
    """
    return not in_china(lng, lat)


def raw_offset(lng, lat):
    """
    GCJ02 偏移模型，返回 (x, y)：x 为纬度分量，y 为经度分量。
    入参是相对 (105, 35) 的经纬度差，结果尚未换算为度。
    """
    lnglat = lng * lat
    abs_x = math.sqrt(abs(lng))
    lng_pi, lat_pi = lng * math.pi, lat * math.pi
    d = 20.0 * math.sin(6.0 * lng_pi) + 20.0 * math.sin(2.0 * lng_pi)
    x, y = d, d
    x += 20.0 * math.sin(lat_pi) + 40.0 * math.sin(lat_pi / 3.0)
    y += 20.0 * math.sin(lng_pi) + 40.0 * math.sin(lng_pi / 3.0)
    x += 160.0 * math.sin(lat_pi / 12.0) + 320 * math.sin(lat_pi / 30.0)
    y += 150.0 * math.sin(lng_pi / 12.0) + 300.0 * math.sin(lng_pi / 30.0)
    x *= 2.0 / 3.0
    y *= 2.0 / 3.0
    x += 2.0 * lng + 3.0 * lat + 0.2 * lat * lat + 0.1 * lnglat + 0.2 * abs_x - 100.0
    y += lng + 2.0 * lat + 0.1 * lng * lng + 0.1 * lnglat + 0.1 * abs_x + 300.0
    return x, y


def apply_china_offset(lng, lat):
    """
    计算偏移量并叠加到 WGS84 坐标上（不做国内范围判断）
    """
    dlat, dlng = raw_offset(lng - 105.0, lat - 35.0)
    radlat = lat / 180.0 * math.pi
    magic = math.sin(radlat)
    magic = 1 - EE * magic * magic
    sqrtmagic = math.sqrt(magic)
    dlat = (dlat * 180.0) / ((A * (1 - EE)) / (magic * sqrtmagic) * math.pi)
    dlng = (dlng * 180.0) / (A / sqrtmagic * math.cos(radlat) * math.pi)
    return lng + dlng, lat + dlat


def wgs84_to_gcj02(lng, lat):
    """
    WGS84转GCJ02(火星坐标系)
    """
    if out_of_china(lng, lat):
        return lng, lat
    return apply_china_offset(lng, lat)


def gcj02_to_wgs84(lng, lat):
    """
    GCJ02(火星坐标系)转GPS84，二分逼近。

    正向偏移没有解析逆，这里在 (lng, lat) 周围 ±0.01 度的范围内按经纬度
    分别二分，直到正向结果与输入的差小于 THRESHOLD。达到 MAX_ITERATIONS
    仍未收敛时直接返回最后一次的中点，不抛异常。
    两个轴分开二分，少数点（如 WGS84 (77.33, 52.05)）会在早期选错半区，
    结果误差可达 1e-5 量级。
    """
    min_lng, max_lng = lng - SEARCH_RADIUS, lng + SEARCH_RADIUS
    min_lat, max_lat = lat - SEARCH_RADIUS, lat + SEARCH_RADIUS
    wgs_lng, wgs_lat = lng, lat
    for _ in range(MAX_ITERATIONS):
        wgs_lat = (min_lat + max_lat) / 2
        wgs_lng = (min_lng + max_lng) / 2
        tmp_lng, tmp_lat = apply_china_offset(wgs_lng, wgs_lat)
        dlng = tmp_lng - lng
        dlat = tmp_lat - lat
        if abs(dlat) < THRESHOLD and abs(dlng) < THRESHOLD:
            break

        if dlat > 0:
            max_lat = wgs_lat
        else:
            min_lat = wgs_lat

        if dlng > 0:
            max_lng = wgs_lng
        else:
            min_lng = wgs_lng
    else:
        logger.debug(f"GCJ02->WGS84 未在 {MAX_ITERATIONS} 次内收敛: ({lng}, {lat})")
    return wgs_lng, wgs_lat


def gcj02_to_bd09(lng, lat):
    """
    火星坐标系(GCJ-02)转百度坐标系(BD-09)
    """
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    return z * math.cos(theta) + BD_LON_OFFSET, z * math.sin(theta) + BD_LAT_OFFSET


def bd09_to_gcj02(lng, lat):
    """
    百度坐标系(BD-09)转火星坐标系(GCJ-02)
    """
    x = lng - BD_LON_OFFSET
    y = lat - BD_LAT_OFFSET
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return z * math.cos(theta), z * math.sin(theta)


def wgs84_to_bd09(lng, lat):
    """
    WGS84转百度坐标系(BD-09)
    """
    return gcj02_to_bd09(*wgs84_to_gcj02(lng, lat))


def bd09_to_wgs84(lng, lat):
    """
    百度坐标系(BD-09)转WGS84
    """
    return gcj02_to_wgs84(*bd09_to_gcj02(lng, lat))


_TRANSFORMS = {
    ('WGS84', 'GCJ02'): wgs84_to_gcj02,
    ('GCJ02', 'WGS84'): gcj02_to_wgs84,
    ('GCJ02', 'BD09'): gcj02_to_bd09,
    ('BD09', 'GCJ02'): bd09_to_gcj02,
    ('WGS84', 'BD09'): wgs84_to_bd09,
    ('BD09', 'WGS84'): bd09_to_wgs84,
}


def coordinate_transform(lng, lat, from_sys, to_sys):
    """坐标系统转换
    支持的坐标系统：
    - WGS84: 世界大地测量系统
    - GCJ02: 国测局坐标系
    - BD09: 百度坐标系
    """
    if from_sys == to_sys and from_sys in ('WGS84', 'GCJ02', 'BD09'):
        return lng, lat

    transform = _TRANSFORMS.get((from_sys, to_sys))
    if transform is None:
        raise UnknownCoordinateSystemError(f'不支持的坐标系统转换: {from_sys} -> {to_sys}')
    return transform(lng, lat)
