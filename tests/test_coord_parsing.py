import pytest

from coordconv.exceptions import MalformedCoordinateStringError
from coordconv.utils import coord_parsing


def test_location_to_coord():
    assert coord_parsing.location_to_coord('115.668055,34.449162') == (115.668055, 34.449162)

def test_location_to_coord_trims_whitespace():
    assert coord_parsing.location_to_coord(' 115.668055 , 34.449162 ') == (115.668055, 34.449162)

def test_location_to_coord_ignores_extra_fields():
    assert coord_parsing.location_to_coord('115.5,34.5,120') == (115.5, 34.5)

def test_location_to_coord_accepts_negative_values():
    assert coord_parsing.location_to_coord('-74.005974,40.712776') == (-74.005974, 40.712776)

@pytest.mark.parametrize('location', [
    '',
    '115.668055',
    '115.668055;34.449162',
    'abc,34.449162',
    '115.668055,',
    'nan,34.5',
    '115.5,inf',
    None,
])
def test_location_to_coord_rejects_malformed(location):
    with pytest.raises(MalformedCoordinateStringError):
        coord_parsing.location_to_coord(location)

def test_malformed_error_is_value_error():
    with pytest.raises(ValueError):
        coord_parsing.location_to_coord('115.668055')

def test_double_string_to_coord():
    assert coord_parsing.double_string_to_coord('115.668055', ' 34.449162') == (115.668055, 34.449162)

def test_double_string_to_coord_rejects_bad_latitude():
    with pytest.raises(MalformedCoordinateStringError):
        coord_parsing.double_string_to_coord('115.668055', 'north')
