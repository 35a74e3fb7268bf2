import pytest
from static_map.schemas.common import Location
from static_map.utils.polyline import decode, encode, encode_lat_lng, encode_value


def test_encode_value_zero():
    assert encode_value(0) == "?"


def test_encode_value_smallest_step():
    assert encode_value(0.00001) == "A"
    assert encode_value(-0.00001) == "@"


def test_encode_value_reference_example():
    # Worked example from the polyline algorithm documentation
    assert encode_value(-179.9832104) == "`~oia@"


def test_encode_value_one_degree():
    assert encode_value(1) == "_ibE"


def test_encoded_length_grows_with_magnitude():
    lengths = [len(encode_value(d)) for d in (0, 0.00001, 1, 180)]
    assert lengths == sorted(lengths)
    assert lengths[0] == 1
    assert lengths[-1] == 6


@pytest.mark.parametrize("value", [0.00001, 0.5, 12.34567, 179.99999])
def test_sign_only_changes_zigzag_bit(value):
    # Longitude slot, so the full +-180 range decodes
    (positive,) = decode("enc:" + encode_lat_lng(0, value))
    (negative,) = decode("enc:" + encode_lat_lng(0, -value))
    rounded = round(value * 1e5) / 1e5
    assert positive.lng == pytest.approx(rounded)
    assert negative.lng == pytest.approx(-rounded)
    # Zig-zag maps x and -x to adjacent unsigned codes
    assert len(encode_value(value)) == len(encode_value(-value))


def test_encode_empty_sequence():
    assert encode([]) == "enc:"


def test_encode_single_point_is_relative_to_origin():
    assert encode([Location(lat=38.5, lng=-120.2)]) == "enc:_p~iF~ps|U"


def test_encode_reference_path():
    points = [
        Location(lat=38.5, lng=-120.2),
        Location(lat=40.7, lng=-120.95),
        Location(lat=43.252, lng=-126.453),
    ]
    assert encode(points) == "enc:_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_decode_inverts_encode():
    points = [
        Location(lat=52.52003, lng=13.40495),
        Location(lat=52.51631, lng=13.37770),
        Location(lat=-33.86882, lng=151.20929),
    ]
    decoded = decode(encode(points))
    assert len(decoded) == len(points)
    for expected, result in zip(points, decoded):
        assert result.lat == pytest.approx(expected.lat, abs=1e-5)
        assert result.lng == pytest.approx(expected.lng, abs=1e-5)


def test_decode_without_prefix():
    assert decode("_p~iF~ps|U") == [Location(lat=38.5, lng=-120.2)]


def test_decode_truncated_polyline():
    with pytest.raises(ValueError):
        decode("_p~iF~ps|")


def test_decode_matches_encoded_precision():
    (point,) = decode(encode([Location(lat=0.00005, lng=-179.99999)]))
    assert point == Location(lat=0.00005, lng=-179.99999)
