import math

from ..exceptions import MalformedCoordinateStringError


def _parse_float(text):
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        raise MalformedCoordinateStringError(f'不是有效的经纬度数值: {text!r}') from None
    if not math.isfinite(value):
        raise MalformedCoordinateStringError(f'经纬度必须是有限数值: {text!r}')
    return value


def double_string_to_coord(lng, lat):
    """
    分割后的字符串转浮点数经纬度: ("115.668055", "34.449162") => (115.668055, 34.449162)
    """
    return _parse_float(lng), _parse_float(lat)


def location_to_coord(location):
    """
    location字符串转浮点数经纬度: "115.668055,34.449162" => (115.668055, 34.449162)

    逗号后多余的字段会被忽略；少于两个字段时抛出 MalformedCoordinateStringError。
    """
    if not isinstance(location, str):
        raise MalformedCoordinateStringError(f'不是有效的Location字符串: {location!r}')
    records = location.split(',')
    if len(records) < 2:
        raise MalformedCoordinateStringError(f'不是有效的Location字符串: {location!r}')
    return double_string_to_coord(records[0], records[1])
