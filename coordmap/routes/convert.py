from flask import Blueprint, request, jsonify, current_app

from ..exceptions import UnsupportedConversion, InvalidCoordinateError, UnknownProviderError
from ..services import map_providers
from ..utils import geo_transforms
from ..utils.coord_format import format_coordinate, parse_coordinate
from ..utils.log_context import request_context_var

convert_bp = Blueprint('convert', __name__, url_prefix='/api')

_CLIENT_ERRORS = (UnsupportedConversion, InvalidCoordinateError, UnknownProviderError)


def _fail(message, status):
    return jsonify({'success': False, 'message': message}), status


def _request_data():
    """Return the JSON body as a dict, {} when absent, or None when it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _count_points(coordinates):
    return sum(len(entry) if geo_transforms.is_ring(entry) else 1 for entry in coordinates)


@convert_bp.route('/convert', methods=['POST'])
def convert_point():
    """单点坐标转换"""
    data = _request_data()
    if data is None:
        current_app.logger.warning("请求体不是 JSON 对象")
        return _fail('无效的请求数据', 400)
    from_sys, to_sys = data.get('from'), data.get('to')
    token = request_context_var.set(f"[convert {from_sys}->{to_sys}] ")
    try:
        lng, lat = parse_coordinate(data.get('lng'), data.get('lat'))
        result_lng, result_lat = geo_transforms.coordinate_transform(lng, lat, from_sys, to_sys)
        current_app.logger.info(f"({lng}, {lat}) -> ({result_lng}, {result_lat})")
        return jsonify({'success': True, 'lng': result_lng, 'lat': result_lat})
    except _CLIENT_ERRORS as e:
        current_app.logger.warning(f"拒绝转换请求: {e}")
        return _fail(str(e), 400)
    except Exception as e:
        current_app.logger.error(f"坐标转换时发生异常: {e}", exc_info=True)
        return _fail(f'服务器内部错误: {str(e)}', 500)
    finally:
        request_context_var.reset(token)


@convert_bp.route('/convert/batch', methods=['POST'])
def convert_batch():
    """批量转换坐标点或多边形"""
    data = _request_data()
    if data is None:
        current_app.logger.warning("请求体不是 JSON 对象")
        return _fail('无效的请求数据', 400)
    from_sys, to_sys = data.get('from'), data.get('to')
    coordinates = data.get('coordinates')
    token = request_context_var.set(f"[batch {from_sys}->{to_sys}] ")
    try:
        if not isinstance(coordinates, list):
            return _fail('coordinates 必须是坐标数组', 400)
        if not all(isinstance(entry, (list, tuple)) for entry in coordinates):
            return _fail('坐标数组格式无效', 400)

        total = _count_points(coordinates)
        limit = current_app.config['MAX_BATCH_POINTS']
        if total > limit:
            current_app.logger.warning(f"批量请求包含 {total} 个坐标点，超过上限 {limit}")
            return _fail(f'坐标点数量超过上限 {limit}', 413)

        converted = geo_transforms.batch_convert(coordinates, from_sys, to_sys)
        current_app.logger.info(f"已转换 {len(coordinates)} 个条目, 共 {total} 个坐标点")
        return jsonify({'success': True, 'coordinates': converted})
    except _CLIENT_ERRORS as e:
        current_app.logger.warning(f"拒绝批量转换请求: {e}")
        return _fail(str(e), 400)
    except (TypeError, IndexError, KeyError) as e:
        current_app.logger.warning(f"坐标数组格式无效: {e}")
        return _fail('坐标数组格式无效', 400)
    except Exception as e:
        current_app.logger.error(f"批量坐标转换时发生异常: {e}", exc_info=True)
        return _fail(f'服务器内部错误: {str(e)}', 500)
    finally:
        request_context_var.reset(token)


@convert_bp.route('/display', methods=['POST'])
def display_coordinates():
    """将地图原生坐标转换为 WGS84 并格式化用于显示"""
    data = _request_data()
    if data is None:
        current_app.logger.warning("请求体不是 JSON 对象")
        return _fail('无效的请求数据', 400)
    provider = data.get('provider') or current_app.config['DEFAULT_MAP_PROVIDER']
    fmt = data.get('format') or current_app.config['DEFAULT_COORD_FORMAT']
    token = request_context_var.set(f"[display {provider}] ")
    try:
        lng, lat = parse_coordinate(data.get('lng'), data.get('lat'))
        display_lng, display_lat = map_providers.to_display(lng, lat, provider)
        return jsonify({
            'success': True,
            'lng': display_lng,
            'lat': display_lat,
            'formatted': format_coordinate(display_lng, display_lat, fmt)
        })
    except _CLIENT_ERRORS as e:
        current_app.logger.warning(f"拒绝显示请求: {e}")
        return _fail(str(e), 400)
    except Exception as e:
        current_app.logger.error(f"坐标显示转换时发生异常: {e}", exc_info=True)
        return _fail(f'服务器内部错误: {str(e)}', 500)
    finally:
        request_context_var.reset(token)


@convert_bp.route('/locate', methods=['POST'])
def locate():
    """根据输入的 WGS84 坐标计算地图定位点"""
    data = _request_data()
    if data is None:
        current_app.logger.warning("请求体不是 JSON 对象")
        return _fail('无效的请求数据', 400)
    provider = data.get('provider') or current_app.config['DEFAULT_MAP_PROVIDER']
    token = request_context_var.set(f"[locate {provider}] ")
    try:
        result = map_providers.locate(data.get('lng'), data.get('lat'), provider)
        current_app.logger.info(f"已定位到坐标: {result['input'][0]:.6f}, {result['input'][1]:.6f}")
        return jsonify({'success': True, **result})
    except _CLIENT_ERRORS as e:
        current_app.logger.warning(f"拒绝定位请求: {e}")
        return _fail(str(e), 400)
    except Exception as e:
        current_app.logger.error(f"定位时发生异常: {e}", exc_info=True)
        return _fail(f'服务器内部错误: {str(e)}', 500)
    finally:
        request_context_var.reset(token)


@convert_bp.route('/providers', methods=['GET'])
def list_providers():
    providers = [provider._asdict() for provider in map_providers.PROVIDERS.values()]
    return jsonify({
        'success': True,
        'providers': providers,
        'default': current_app.config['DEFAULT_MAP_PROVIDER']
    })
