from flask import Blueprint, jsonify

from ..models import CoordinateSystem

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    """服务说明：支持的坐标系与接口"""
    return jsonify({
        'success': True,
        'systems': [system.value for system in CoordinateSystem],
        'endpoints': ['/coord/expand', '/coord/convert'],
    })

@main_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})
