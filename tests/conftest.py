# tests/conftest.py
import pytest

from fasthenry_builder import InputModel


def make_segment(**overrides) -> dict:
    """
    Returns a valid flat segment configuration from (0,0,0)/"A" to (0,1000,0)/"B".
    Keyword arguments replace or add fields; a value of None removes the field.
    """
    config = {
        "sn1": {"x": 0, "y": 0, "z": 0},
        "sn2": {"x": 0, "y": 1000, "z": 0},
        "en1": "A",
        "en2": "B",
        "w": 1,
        "h": 1,
        "rho": 1.68e-8,
    }
    config.update(overrides)
    return {k: v for k, v in config.items() if v is not None}


@pytest.fixture
def mm_model() -> InputModel:
    return InputModel("mm")


@pytest.fixture
def wire_model() -> InputModel:
    """A single straight wire with one port between its two ends."""
    model = InputModel("mm")
    model.add_segment(make_segment())
    model.set_ports([["A", "B"]])
    model.set_frequency(10, 1e8, 0.5)
    return model


WIRE_MODEL_TEXT = """\
* Set the units
.units mm
N1 x=0 y=0 z=0
N2 x=0 y=1000 z=0

E1 N1 N2 w=1 h=1 rho=1.68e-8

.Equiv N1
.Equiv N2

* Define the ports of the network
.external N1 N2

.freq fmin=10 fmax=1e8 ndec=0.5
* Mark end of file
.end
"""
