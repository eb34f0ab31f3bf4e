import copy
import math

from shapely.ops import transform as shapely_transform

from ..exceptions import UnsupportedConversion

PI = 3.1415926535897932384626
X_PI = PI * 3000.0 / 180.0
A = 6378245.0  # 长半轴
EE = 0.00669342162296594323  # 偏心率平方

WGS84 = 'WGS84'
GCJ02 = 'GCJ02'
BD09 = 'BD09'
SUPPORTED_SYSTEMS = (WGS84, GCJ02, BD09)


def out_of_china(lng, lat):
    """
    判断是否在国内，不在国内不做偏移
    """
    return not (lng > 73.66 and lng < 135.05 and lat > 3.86 and lat < 53.55)


def transform_lat(lng, lat):
    """
    GCJ02 纬度转换
    """
    ret = -100.0 + 2.0 * lng + 3.0 * lat + 0.2 * lat * lat + \
          0.1 * lng * lat + 0.2 * math.sqrt(abs(lng))
    ret += (20.0 * math.sin(6.0 * lng * PI) + 20.0 * \
            math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lat * PI) + 40.0 * \
            math.sin(lat / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(lat / 12.0 * PI) + 320 * \
            math.sin(lat * PI / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(lng, lat):
    """
    GCJ02 经度转换
    """
    ret = 300.0 + lng + 2.0 * lat + 0.1 * lng * lng + \
          0.1 * lng * lat + 0.1 * math.sqrt(abs(lng))
    ret += (20.0 * math.sin(6.0 * lng * PI) + 20.0 * \
            math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lng * PI) + 40.0 * \
            math.sin(lng / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(lng / 12.0 * PI) + 300.0 * \
            math.sin(lng / 30.0 * PI)) * 2.0 / 3.0
    return ret


def _gcj02_offset(lng, lat):
    """Return the GCJ02 shifted point [mglng, mglat] for an anchor point."""
    dlat = transform_lat(lng - 105.0, lat - 35.0)
    dlng = transform_lng(lng - 105.0, lat - 35.0)
    radlat = lat / 180.0 * PI
    magic = math.sin(radlat)
    magic = 1 - EE * magic * magic
    sqrtmagic = math.sqrt(magic)
    dlat = (dlat * 180.0) / ((A * (1 - EE)) / (magic * sqrtmagic) * PI)
    dlng = (dlng * 180.0) / (A / sqrtmagic * math.cos(radlat) * PI)
    return [lng + dlng, lat + dlat]


def wgs84_to_gcj02(lng, lat):
    """
    WGS84转GCJ02(火星坐标系)
    """
    if out_of_china(lng, lat):
        return [lng, lat]
    return _gcj02_offset(lng, lat)


def gcj02_to_wgs84(lng, lat):
    """
    GCJ02(火星坐标系)转GPS84

    The offset is evaluated at the GCJ02 point itself and reflected back,
    so the result is an approximation with metre-level residual.
    """
    if out_of_china(lng, lat):
        return [lng, lat]
    mglng, mglat = _gcj02_offset(lng, lat)
    return [lng * 2 - mglng, lat * 2 - mglat]


def gcj02_to_bd09(lng, lat):
    """
    火星坐标系(GCJ-02)转百度坐标系(BD-09)
    """
    # No out_of_china check: the BD09 offset applies everywhere.
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    bd_lng = z * math.cos(theta) + 0.0065
    bd_lat = z * math.sin(theta) + 0.006
    return [bd_lng, bd_lat]


def bd09_to_gcj02(lng, lat):
    """
    百度坐标系(BD-09)转火星坐标系(GCJ-02)
    """
    x = lng - 0.0065
    y = lat - 0.006
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    gg_lng = z * math.cos(theta)
    gg_lat = z * math.sin(theta)
    return [gg_lng, gg_lat]


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


_CONVERTERS = {
    (WGS84, GCJ02): wgs84_to_gcj02,
    (GCJ02, WGS84): gcj02_to_wgs84,
    (GCJ02, BD09): gcj02_to_bd09,
    (BD09, GCJ02): bd09_to_gcj02,
    (WGS84, BD09): wgs84_to_bd09,
    (BD09, WGS84): bd09_to_wgs84,
}


def _identity(lng, lat):
    return [lng, lat]


def normalize_system(name):
    """Return the canonical identifier for a coordinate system name, or None."""
    if not isinstance(name, str):
        return None
    name = name.strip().upper()
    return name if name in SUPPORTED_SYSTEMS else None


def get_converter(from_sys, to_sys):
    """
    Look up the point converter for a (from, to) route.

    Identifiers are case-insensitive. Equal systems yield an identity
    converter; any pair outside the six supported routes raises
    UnsupportedConversion.
    """
    source = normalize_system(from_sys)
    target = normalize_system(to_sys)
    if source is not None and source == target:
        return _identity
    converter = _CONVERTERS.get((source, target))
    if converter is None:
        raise UnsupportedConversion(from_sys, to_sys)
    return converter


def coordinate_transform(lng, lat, from_sys, to_sys):
    """坐标系统转换
    支持的坐标系统：
    - WGS84: 世界大地测量系统
    - GCJ02: 国测局坐标系
    - BD09: 百度坐标系
    """
    return get_converter(from_sys, to_sys)(lng, lat)


def is_ring(entry):
    # An empty entry is an empty ring.
    return not entry or isinstance(entry[0], (list, tuple))


def batch_convert(coordinates, from_sys, to_sys):
    """
    批量转换坐标数组

    ``coordinates`` is either a list of [lng, lat] points or a list of
    polygon rings (lists of points); entries may be mixed. The result has
    the same shape. When both systems are the same a deep copy of the input
    is returned.
    """
    convert = get_converter(from_sys, to_sys)
    if convert is _identity:
        return copy.deepcopy(coordinates)

    converted = []
    for entry in coordinates:
        if is_ring(entry):
            converted.append([convert(point[0], point[1]) for point in entry])
        else:
            converted.append(convert(entry[0], entry[1]))
    return converted


def transform_geometry(geometry, from_sys, to_sys):
    """Convert every vertex of a shapely geometry, keeping its type."""
    convert = get_converter(from_sys, to_sys)

    def _point(x, y, z=None):
        lng, lat = convert(x, y)
        return (lng, lat) if z is None else (lng, lat, z)

    return shapely_transform(_point, geometry)
