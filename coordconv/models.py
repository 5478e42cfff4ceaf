from dataclasses import dataclass
from enum import Enum

from .exceptions import UnknownCoordinateSystemError


class CoordinateSystem(str, Enum):
    """支持的坐标系"""
    WGS84 = 'WGS84'  # 地球坐标系 (GPS)
    GCJ02 = 'GCJ02'  # 火星坐标系 (高德、腾讯)
    BD09 = 'BD09'    # 百度坐标系

    @classmethod
    def parse(cls, value):
        """
        将 'gcj02'、' BD09 ' 之类的输入规范为枚举成员，无法识别时抛出
        UnknownCoordinateSystemError。
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        raise UnknownCoordinateSystemError(f'未知的坐标系: {value!r}')


@dataclass(frozen=True)
class Coordinate:
    """某一坐标系下的经纬度，不可变。"""
    system: CoordinateSystem
    longitude: float
    latitude: float

    def to_dict(self) -> dict:
        return {
            'system': self.system.value,
            'longitude': self.longitude,
            'latitude': self.latitude,
        }
