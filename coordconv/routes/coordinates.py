from flask import Blueprint, request, jsonify, current_app

from ..exceptions import BaseCustomException, InvalidRequestError
from ..models import Coordinate, CoordinateSystem
from ..services import coordinate_service
from ..utils import coord_parsing
from ..utils.log_context import request_context_var, format_context

coordinates_bp = Blueprint('coordinates', __name__, url_prefix='/coord')


def _request_data():
    """POST 读取 JSON 请求体，GET 读取查询参数。"""
    if request.method == 'POST':
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            raise InvalidRequestError('请求体必须是 JSON 对象')
        return data
    return request.args


def _field(data, name):
    value = data.get(name)
    if value is None:
        return None
    # JSON 请求体中的经纬度可能直接是数字
    return str(value)


def _read_coordinate(data):
    """
    从请求中读取坐标，支持两种写法：
        - system=GCJ02&location=116.404,39.915
        - system=GCJ02&lng=116.404&lat=39.915
    """
    system = _field(data, 'system')
    if not system:
        raise InvalidRequestError("缺少 'system' 字段")
    system = CoordinateSystem.parse(system)

    location = _field(data, 'location')
    if location is not None:
        lng, lat = coord_parsing.location_to_coord(location)
    else:
        lng_str, lat_str = _field(data, 'lng'), _field(data, 'lat')
        if lng_str is None or lat_str is None:
            raise InvalidRequestError("缺少 'location' 或 'lng'/'lat' 字段")
        lng, lat = coord_parsing.double_string_to_coord(lng_str, lat_str)
    return Coordinate(system, lng, lat)


@coordinates_bp.errorhandler(BaseCustomException)
def handle_coordinate_error(e):
    current_app.logger.warning(f"坐标请求无效: {e}")
    return jsonify({'success': False, 'message': str(e)}), 400


@coordinates_bp.route('/expand', methods=['GET', 'POST'])
def expand():
    """
    将一个坐标同时转换为 WGS84、GCJ02、BD09。
    返回: {"success": true, "results": [{"system": ..., "longitude": ..., "latitude": ...}, ...]}
    """
    data = _request_data()
    token = request_context_var.set(format_context(data.get('system'), data.get('location'), data.get('lng'), data.get('lat')))
    try:
        coord = _read_coordinate(data)
        coords = coordinate_service.expand_all_systems(coord)
        current_app.logger.info(f"坐标展开完成: {', '.join(c.system.value for c in coords)}")
        return jsonify({'success': True, 'results': [c.to_dict() for c in coords]})
    except BaseCustomException:
        raise
    except Exception as e:
        current_app.logger.error(f"坐标展开发生异常: {e}", exc_info=True)
        return jsonify({'success': False, 'message': f'服务器内部错误: {str(e)}'}), 500
    finally:
        request_context_var.reset(token)


@coordinates_bp.route('/convert', methods=['GET', 'POST'])
def convert():
    """
    将坐标转换到 'to' 指定的坐标系。
    返回: {"success": true, "result": {"system": ..., "longitude": ..., "latitude": ...}}
    """
    data = _request_data()
    token = request_context_var.set(format_context(data.get('system'), data.get('location'), data.get('lng'), data.get('lat')))
    try:
        coord = _read_coordinate(data)
        target = _field(data, 'to')
        if not target:
            raise InvalidRequestError("缺少 'to' 字段")
        result = coordinate_service.convert(coord, target)
        current_app.logger.info(f"坐标转换完成: {coord.system.value} -> {result.system.value}")
        return jsonify({'success': True, 'result': result.to_dict()})
    except BaseCustomException:
        raise
    except Exception as e:
        current_app.logger.error(f"坐标转换发生异常: {e}", exc_info=True)
        return jsonify({'success': False, 'message': f'服务器内部错误: {str(e)}'}), 500
    finally:
        request_context_var.reset(token)
