import json

import click
from flask import current_app
from flask.cli import AppGroup

from .exceptions import BaseCustomException
from .models import Coordinate, CoordinateSystem
from .services import coordinate_service
from .utils import coord_parsing

coord_cli = AppGroup('coord', help='坐标系转换命令 (WGS84 / GCJ02 / BD09)')


def _parse(system, location):
    try:
        lng, lat = coord_parsing.location_to_coord(location)
        return Coordinate(CoordinateSystem.parse(system), lng, lat)
    except BaseCustomException as e:
        raise click.BadParameter(str(e))


def _echo(coords, as_json):
    if as_json:
        click.echo(json.dumps([c.to_dict() for c in coords], ensure_ascii=False))
        return
    decimals = current_app.config['COORD_DECIMALS']
    for c in coords:
        click.echo(f"{c.system.value} {c.longitude:.{decimals}f},{c.latitude:.{decimals}f}")


@coord_cli.command('expand')
@click.argument('system')
@click.argument('location')
@click.option('--json', 'as_json', is_flag=True, help='以 JSON 输出')
def expand_command(system, location, as_json):
    """输出 LOCATION ("lng,lat") 在三种坐标系下的表示。"""
    coord = _parse(system, location)
    _echo(coordinate_service.expand_all_systems(coord), as_json)


@coord_cli.command('convert')
@click.argument('source')
@click.argument('target')
@click.argument('location')
@click.option('--json', 'as_json', is_flag=True, help='以 JSON 输出')
def convert_command(source, target, location, as_json):
    """将 LOCATION 从 SOURCE 坐标系转换到 TARGET 坐标系。"""
    coord = _parse(source, location)
    try:
        result = coordinate_service.convert(coord, target)
    except BaseCustomException as e:
        raise click.BadParameter(str(e), param_hint='TARGET')
    _echo([result], as_json)
