"""
Tile map providers and the coordinate system each one emits natively.

Pointer and click positions arrive in the provider's native system and are
shown to the user as WGS84; user-entered WGS84 positions go the other way
before the map is panned.
"""
from collections import namedtuple

from ..exceptions import UnknownProviderError
from ..utils import geo_transforms
from ..utils.coord_format import parse_coordinate, validate_coordinate

MapProvider = namedtuple('MapProvider', ['name', 'label', 'native_system'])

PROVIDERS = {
    'gaode': MapProvider('gaode', '高德地图', geo_transforms.GCJ02),
    'osm': MapProvider('osm', 'OpenStreetMap', geo_transforms.WGS84),
}

DEFAULT_LOCATE_ZOOM = 15


def get_provider(name):
    provider = PROVIDERS.get(name.strip().lower()) if isinstance(name, str) else None
    if provider is None:
        raise UnknownProviderError(name)
    return provider


def to_display(lng, lat, provider):
    """地图原生坐标 -> WGS84 显示坐标"""
    native = get_provider(provider).native_system
    return geo_transforms.coordinate_transform(lng, lat, native, geo_transforms.WGS84)


def to_native(lng, lat, provider):
    """WGS84 输入坐标 -> 地图原生坐标"""
    native = get_provider(provider).native_system
    return geo_transforms.coordinate_transform(lng, lat, geo_transforms.WGS84, native)


def locate(lng, lat, provider):
    """
    根据输入的坐标进行定位

    Validates user input (WGS84, range-checked) and returns where the
    provider's map should be centred.
    """
    lng, lat = parse_coordinate(lng, lat)
    validate_coordinate(lng, lat)
    entry = get_provider(provider)
    map_lng, map_lat = to_native(lng, lat, entry.name)
    return {
        'provider': entry.name,
        'input': [lng, lat],
        'map': [map_lng, map_lat],
        'zoom': DEFAULT_LOCATE_ZOOM,
    }
