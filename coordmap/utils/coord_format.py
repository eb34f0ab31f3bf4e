import math

from ..exceptions import InvalidCoordinateError

DECIMAL = 'decimal'
DMS = 'dms'
COORD_FORMATS = (DECIMAL, DMS)


def decimal_to_dms(value, is_longitude=True):
    """将小数点坐标转换为度分秒格式, 例如 116°24'26.64"E"""
    abs_value = abs(value)
    degrees = math.floor(abs_value)
    minutes = math.floor((abs_value - degrees) * 60)
    seconds = ((abs_value - degrees) * 60 - minutes) * 60

    if is_longitude:
        direction = 'E' if value >= 0 else 'W'
    else:
        direction = 'N' if value >= 0 else 'S'

    return f"{degrees}°{minutes}'{seconds:.2f}\"{direction}"


def format_coordinate(lng, lat, fmt=DECIMAL):
    """格式化坐标显示"""
    if fmt == DMS:
        return {'lng': decimal_to_dms(lng, True), 'lat': decimal_to_dms(lat, False)}
    if fmt == DECIMAL:
        return {'lng': f'{lng:.6f}', 'lat': f'{lat:.6f}'}
    raise InvalidCoordinateError(f'不支持的坐标格式: {fmt}')


def parse_coordinate(lng_text, lat_text):
    """Parse user-entered longitude/latitude into floats."""
    try:
        lng = float(lng_text)
        lat = float(lat_text)
    except (TypeError, ValueError):
        raise InvalidCoordinateError('请输入有效的经纬度数值')
    if not (math.isfinite(lng) and math.isfinite(lat)):
        raise InvalidCoordinateError('请输入有效的经纬度数值')
    return lng, lat


def validate_coordinate(lng, lat):
    if lng < -180 or lng > 180:
        raise InvalidCoordinateError('经度范围应在 -180 到 180 之间')
    if lat < -90 or lat > 90:
        raise InvalidCoordinateError('纬度范围应在 -90 到 90 之间')
