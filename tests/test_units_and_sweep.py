# tests/test_units_and_sweep.py
import numpy as np
import pytest

from fasthenry_builder import FrequencySweep, SUPPORTED_LENGTH_UNITS, ureg, pint
from fasthenry_builder.units import LENGTH_UNITS, to_hertz


# --- Units ---

def test_supported_length_units():
    assert SUPPORTED_LENGTH_UNITS == ("km", "m", "cm", "mm", "um", "in", "mils")


@pytest.mark.parametrize("symbol, millimeters", [
    ("km", 1e6),
    ("m", 1e3),
    ("cm", 10),
    ("mm", 1),
    ("um", 1e-3),
    ("in", 25.4),
    ("mils", 0.0254),
])
def test_length_unit_symbols_map_to_lengths(symbol, millimeters):
    assert (1 * ureg.Unit(LENGTH_UNITS[symbol])).to("mm").magnitude == pytest.approx(millimeters)


@pytest.mark.parametrize("value, hertz", [
    ("10 MHz", 1e7),
    ("2.5 GHz", 2.5e9),
    ("100", 100),
    (ureg.Quantity(3, "kHz"), 3e3),
])
def test_to_hertz(value, hertz):
    assert to_hertz(value) == pytest.approx(hertz)


def test_to_hertz_rejects_non_frequencies():
    with pytest.raises(pint.DimensionalityError):
        to_hertz("5 meter")


# --- Frequency sweep ---

def test_sweep_steps_by_decade_fraction():
    sweep = FrequencySweep(10, 1e8, 0.5)
    np.testing.assert_allclose(sweep.frequencies(), [10, 1e3, 1e5, 1e7])


def test_sweep_includes_fmax_when_it_falls_on_a_step():
    sweep = FrequencySweep(1, 1000, 1)
    np.testing.assert_allclose(sweep.frequencies(), [1, 10, 100, 1000])


def test_sweep_without_points_per_decade_uses_end_points():
    np.testing.assert_allclose(FrequencySweep(1, 100).frequencies(), [1, 100])


def test_sweep_with_equal_bounds_has_one_point():
    np.testing.assert_allclose(FrequencySweep(5, 5, 2).frequencies(), [5])


def test_logarithmic_sweep_from_zero_is_rejected():
    with pytest.raises(ValueError):
        FrequencySweep(0, 100, 2).frequencies()
