# src/fasthenry_builder/units.py
import logging
from typing import Dict, Union

import pint

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

#: Length-unit symbols accepted by the FastHenry `.units` directive, mapped to
#: the pint unit they denote. The symbol is written to the file verbatim.
LENGTH_UNITS: Dict[str, str] = {
    "km": "kilometer",
    "m": "meter",
    "cm": "centimeter",
    "mm": "millimeter",
    "um": "micrometer",
    "in": "inch",
    "mils": "thou",
}

SUPPORTED_LENGTH_UNITS = tuple(LENGTH_UNITS)

LENGTH_DIMENSIONALITY = ureg.meter.dimensionality

for _symbol, _unit_name in LENGTH_UNITS.items():
    if ureg.Unit(_unit_name).dimensionality != LENGTH_DIMENSIONALITY:
        raise RuntimeError(f"Unit '{_unit_name}' registered for symbol '{_symbol}' is not a length.")


def to_hertz(value: Union[str, pint.Quantity]) -> float:
    """
    Converts a frequency given as a pint Quantity or a string such as "10 MHz"
    into a float in Hz. Dimensionless values are taken to be in Hz already.

    Raises:
        pint.DimensionalityError, pint.UndefinedUnitError, ValueError
    """
    qty = ureg.Quantity(value) if isinstance(value, str) else value
    if qty.dimensionless:
        return float(qty.to("dimensionless").magnitude)
    return float(qty.to("Hz").magnitude)
