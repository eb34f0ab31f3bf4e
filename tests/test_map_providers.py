import pytest

from coordmap.exceptions import InvalidCoordinateError, UnknownProviderError
from coordmap.services import map_providers
from coordmap.utils import geo_transforms


def test_get_provider_is_case_insensitive():
    provider = map_providers.get_provider(' GaoDe ')
    assert provider.name == 'gaode'
    assert provider.native_system == geo_transforms.GCJ02


@pytest.mark.parametrize('name', ['baidu', '', None])
def test_unknown_provider(name):
    with pytest.raises(UnknownProviderError) as excinfo:
        map_providers.get_provider(name)
    assert excinfo.value.provider == name


def test_to_display_converts_gaode_pointer_to_wgs84():
    assert map_providers.to_display(116.4074, 39.9042, 'gaode') == geo_transforms.gcj02_to_wgs84(116.4074, 39.9042)


def test_to_display_leaves_osm_unchanged():
    assert map_providers.to_display(116.4074, 39.9042, 'osm') == [116.4074, 39.9042]


def test_to_native_for_gaode():
    assert map_providers.to_native(116.4074, 39.9042, 'gaode') == geo_transforms.wgs84_to_gcj02(116.4074, 39.9042)


def test_locate_gaode():
    result = map_providers.locate('116.4074', '39.9042', 'gaode')
    assert result['provider'] == 'gaode'
    assert result['input'] == [116.4074, 39.9042]
    assert result['map'][0] == pytest.approx(116.4136422538, abs=1e-9)
    assert result['map'][1] == pytest.approx(39.9056033432, abs=1e-9)
    assert result['zoom'] == map_providers.DEFAULT_LOCATE_ZOOM


def test_locate_osm_is_identity():
    result = map_providers.locate(2.3522, 48.8566, 'osm')
    assert result['map'] == [2.3522, 48.8566]


@pytest.mark.parametrize('lng,lat', [(181, 0), (0, 91), ('x', 0)])
def test_locate_rejects_bad_input(lng, lat):
    with pytest.raises(InvalidCoordinateError):
        map_providers.locate(lng, lat, 'gaode')
