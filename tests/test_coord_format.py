import math

import pytest

from coordmap.exceptions import InvalidCoordinateError
from coordmap.utils.coord_format import (
    decimal_to_dms, format_coordinate, parse_coordinate, validate_coordinate
)


@pytest.mark.parametrize('value,is_longitude,expected', [
    (116.4074, True, '116°24\'26.64"E'),
    (39.9042, False, '39°54\'15.12"N'),
    (-0.1278, True, '0°7\'40.08"W'),
    (-33.8688, False, '33°52\'7.68"S'),
    (0, True, '0°0\'0.00"E'),
])
def test_decimal_to_dms(value, is_longitude, expected):
    assert decimal_to_dms(value, is_longitude) == expected


def test_format_decimal_uses_six_places():
    assert format_coordinate(116.4011577462, 39.9027966568) == {'lng': '116.401158', 'lat': '39.902797'}


def test_format_dms():
    assert format_coordinate(116.4074, 39.9042, 'dms') == {
        'lng': '116°24\'26.64"E',
        'lat': '39°54\'15.12"N',
    }


def test_format_unknown():
    with pytest.raises(InvalidCoordinateError):
        format_coordinate(1.0, 2.0, 'utm')


class TestParseCoordinate:
    def test_strings_and_numbers(self):
        assert parse_coordinate('116.4074', 39.9042) == (116.4074, 39.9042)

    @pytest.mark.parametrize('lng,lat', [('abc', '1'), (None, 1), ('1', ''), ('nan', '1'), ('1', 'inf')])
    def test_rejects_invalid(self, lng, lat):
        with pytest.raises(InvalidCoordinateError):
            parse_coordinate(lng, lat)


class TestValidateCoordinate:
    def test_limits_are_inclusive(self):
        validate_coordinate(-180, -90)
        validate_coordinate(180, 90)

    def test_longitude_out_of_range(self):
        with pytest.raises(InvalidCoordinateError, match='经度'):
            validate_coordinate(180.0001, 0)

    def test_latitude_out_of_range(self):
        with pytest.raises(InvalidCoordinateError, match='纬度'):
            validate_coordinate(0, -90.5)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_coordinate(math.inf, 0)
