import logging

from ..models import Coordinate, CoordinateSystem
from ..utils import coord_parsing, geo_transforms

logger = logging.getLogger(__name__)


def _as_coordinate(coordinate_or_system, lng=None, lat=None):
    if isinstance(coordinate_or_system, Coordinate):
        system = CoordinateSystem.parse(coordinate_or_system.system)
        if system is coordinate_or_system.system:
            return coordinate_or_system
        return Coordinate(system, coordinate_or_system.longitude, coordinate_or_system.latitude)
    if lng is None or lat is None:
        raise TypeError('必须同时提供经度和纬度')
    system = CoordinateSystem.parse(coordinate_or_system)
    if isinstance(lng, str) or isinstance(lat, str):
        lng, lat = coord_parsing.double_string_to_coord(str(lng), str(lat))
    return Coordinate(system, float(lng), float(lat))


def expand_all_systems(coordinate_or_system, lng=None, lat=None):
    """
    将一个坐标同时表示为 WGS84、GCJ02、BD09 三种坐标。

    可以传入 Coordinate，也可以传入 (system, lng, lat)；坐标系无法识别时
    抛出 UnknownCoordinateSystemError。返回的列表第一项
    总是原坐标，其余两项的顺序：
        - GCJ02 -> [GCJ02, BD09, WGS84]
        - BD09  -> [BD09, GCJ02, WGS84]
        - WGS84 -> [WGS84, GCJ02, BD09]
    """
    coord = _as_coordinate(coordinate_or_system, lng, lat)
    lng, lat = coord.longitude, coord.latitude
    coords = [coord]

    if coord.system is CoordinateSystem.GCJ02:
        coords.append(Coordinate(CoordinateSystem.BD09, *geo_transforms.gcj02_to_bd09(lng, lat)))
        coords.append(Coordinate(CoordinateSystem.WGS84, *geo_transforms.gcj02_to_wgs84(lng, lat)))
    elif coord.system is CoordinateSystem.BD09:
        lng, lat = geo_transforms.bd09_to_gcj02(lng, lat)
        coords.append(Coordinate(CoordinateSystem.GCJ02, lng, lat))
        coords.append(Coordinate(CoordinateSystem.WGS84, *geo_transforms.gcj02_to_wgs84(lng, lat)))
    else:
        lng, lat = geo_transforms.wgs84_to_gcj02(lng, lat)
        coords.append(Coordinate(CoordinateSystem.GCJ02, lng, lat))
        coords.append(Coordinate(CoordinateSystem.BD09, *geo_transforms.gcj02_to_bd09(lng, lat)))

    logger.debug(f"expanded {coord.system.value} ({coord.longitude}, {coord.latitude}) into {len(coords)} systems")
    return coords


def convert(coordinate, target):
    """将坐标转换到目标坐标系，返回新的 Coordinate。"""
    if not isinstance(coordinate, Coordinate):
        raise TypeError(f'需要 Coordinate，得到 {type(coordinate).__name__}')
    coord = _as_coordinate(coordinate)
    target = CoordinateSystem.parse(target)
    lng, lat = geo_transforms.coordinate_transform(
        coord.longitude, coord.latitude, coord.system.value, target.value)
    return Coordinate(target, lng, lat)
