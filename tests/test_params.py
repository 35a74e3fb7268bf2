from static_map.schemas.common import Location
from static_map.services.params import format_coordinate, lat_lng_to_str, map_size_to_str, object_to_url_param


def test_format_coordinate_integral_floats():
    assert format_coordinate(1.0) == "1"
    assert format_coordinate(-120.0) == "-120"


def test_format_coordinate_zero():
    assert format_coordinate(0.0) == "0"
    assert format_coordinate(-0.0) == "0"


def test_format_coordinate_fractions():
    assert format_coordinate(10.5) == "10.5"
    assert format_coordinate(-120.95) == "-120.95"
    assert format_coordinate(52.520008) == "52.520008"


def test_lat_lng_to_str():
    assert lat_lng_to_str(Location(lat=10.0, lng=20.0)) == "10,20"


def test_object_to_url_param_keeps_order():
    params = {"size": "300x300", "zoom": 12, "maptype": "roadmap", "center": "10,20"}
    assert object_to_url_param(params) == "&size=300x300&zoom=12&maptype=roadmap&center=10,20"


def test_object_to_url_param_omits_absent_values():
    params = {"size": "300x300", "zoom": 12, "maptype": None, "center": "10,20"}
    result = object_to_url_param(params)
    assert "&maptype=" not in result
    assert result == "&size=300x300&zoom=12&center=10,20"


def test_object_to_url_param_keeps_falsy_values():
    assert object_to_url_param({"zoom": 0, "label": ""}) == "&zoom=0&label="


def test_map_size_clamped():
    assert map_size_to_str(300, 200) == "300x200"
    assert map_size_to_str(1000, 700) == "640x640"


def test_map_size_clamped_premium():
    assert map_size_to_str(3000, 1000, premium=True) == "2048x1000"


def test_format_coordinate_small_values_stay_positional():
    assert format_coordinate(0.00005) == "0.00005"
    assert format_coordinate(-0.0001) == "-0.0001"
    assert format_coordinate(-0.000015) == "-0.000015"
    assert format_coordinate(0.000001) == "0.000001"


def test_format_coordinate_below_one_millionth():
    assert format_coordinate(1e-7) == "1e-7"
    assert format_coordinate(-2.5e-8) == "-2.5e-8"


def test_lat_lng_to_str_near_origin():
    assert lat_lng_to_str(Location(lat=0.00005, lng=-0.0001)) == "0.00005,-0.0001"
