import math

import numpy as np
import pytest
from loguru import logger

import spchart as sc


def test_three_four_five():
    comps = sc.get_s_components([sc.ComplexSample(3, 4)])
    assert comps.mag[0] == 5
    assert comps.db[0] == pytest.approx(13.9794, abs=1e-4)
    assert comps.deg[0] == pytest.approx(53.13, abs=1e-2)
    assert comps.angle[0] == pytest.approx(math.atan2(4, 3))


def test_zero_sample_gives_minus_infinity():
    comps = sc.get_s_components([{"re": 0, "im": 0}])
    assert comps.mag[0] == 0
    assert comps.db[0] == -np.inf


def test_accepted_sample_shapes():
    comps = sc.get_s_components([sc.ComplexSample(1, -1), {"re": 0.5, "im": 0}, (0, 2), -1j, 0.25])
    np.testing.assert_array_equal(comps.re, [1, 0.5, 0, 0, 0.25])
    np.testing.assert_array_equal(comps.im, [-1, 0, 2, -1, 0])
    assert len(comps) == 5


def test_numpy_input_keeps_order():
    s = np.array([0.1 + 0.1j, -0.5j, 1 + 0j])
    comps = sc.get_s_components(s)
    np.testing.assert_allclose(comps.mag, np.abs(s))
    np.testing.assert_allclose(comps.deg, np.angle(s, deg=True))


def test_bad_sample():
    with pytest.raises(sc.MalformedSeries):
        sc.get_s_components([{"re": 1.0}])
    with pytest.raises(sc.MalformedSeries):
        sc.get_s_components(["abc"])


@pytest.mark.parametrize("key, expected", [
    ("db", sc.Quantity.DB),
    ("DEG", sc.Quantity.DEG),
    ("sDb", sc.Quantity.DB),
    ("sAngle", sc.Quantity.ANGLE),
    (sc.Quantity.MAG, sc.Quantity.MAG),
])
def test_quantity_lookup(key, expected):
    assert sc.Quantity.parse(key) is expected


@pytest.mark.parametrize("key", ["phase", "s", "", 3])
def test_unknown_quantity(key):
    with pytest.raises(sc.UnknownQuantity):
        sc.Quantity.parse(key)


def test_series_length_mismatch():
    with pytest.raises(sc.MalformedSeries):
        sc.Series([1, 2, 3], [1 + 1j, 2 + 2j])


def test_series_from_dict_and_decorate():
    series = sc.Series.from_dict({"freq": [1000, 2000], "s": [{"re": 1, "im": 0}, {"re": 0, "im": 1}], "unit": "MHZ"})
    decorated = series.decorate("GHz")
    np.testing.assert_allclose(decorated.freq, [1, 2])
    np.testing.assert_allclose(decorated.get("deg"), [0, 90])
    assert decorated.unit is sc.FrequencyUnit.GHZ


def test_series_from_dict_missing_field():
    with pytest.raises(sc.MalformedSeries):
        sc.Series.from_dict({"freq": [1]})


def test_series_invalid_unit():
    with pytest.raises(sc.InvalidUnit):
        sc.Series([1], [0j], "furlongs")


def test_non_numeric_sample_values():
    with pytest.raises(sc.MalformedSeries):
        sc.get_s_components([{"re": "abc", "im": 0}])
    with pytest.raises(sc.MalformedSeries):
        sc.get_s_components([sc.ComplexSample("abc", 0)])
    with pytest.raises(sc.MalformedSeries):
        sc.Series(["x"], [0j])


def test_malformed_series_is_logged():
    messages = []
    handler = logger.add(messages.append, level="ERROR")
    try:
        with pytest.raises(sc.MalformedSeries):
            sc.Series([1, 2], [0j])
    finally:
        logger.remove(handler)
    assert len(messages) == 1
    assert "2 frequencies but 1 samples" in messages[0]
