"""Build unit quantities from a value and a combined prefix+unit string."""

from __future__ import annotations

from typing import Tuple, Type, Union

from reda.number import Number, Suffix
from reda.units import (
    Accel,
    Angle,
    Area,
    Capacitance,
    Charge,
    Conductance,
    Current,
    Energy,
    FluxDensity,
    Force,
    Frequency,
    Inductance,
    Length,
    MagneticFlux,
    Power,
    Pressure,
    Resistance,
    Temperature,
    Time,
    UnitNumber,
    Velocity,
    Voltage,
)

__all__ = ["quantity"]

_SUFFIXES = {
    "m": Suffix.MILLI,
    "k": Suffix.KILO,
    "K": Suffix.KILO,
    "M": Suffix.MEGA,
    "G": Suffix.GIGA,
    "u": Suffix.MICRO,
    "n": Suffix.NANO,
    "p": Suffix.PICO,
    "": Suffix.NONE,
}

# Checked in order: the first unit symbol that ends the text decides the unit.
_UNITS: Tuple[Tuple[str, Type[UnitNumber]], ...] = (
    ("m", Length),
    ("m²", Area),
    ("N", Force),
    ("Pa", Pressure),
    ("Wb", MagneticFlux),
    ("T", FluxDensity),
    ("S", Conductance),
    ("m/s", Velocity),
    ("m/s²", Accel),
    ("K", Temperature),
    ("rad", Angle),
    ("V", Voltage),
    ("v", Voltage),
    ("A", Current),
    ("Ω", Resistance),
    ("F", Capacitance),
    ("H", Inductance),
    ("Q", Charge),
    ("W", Power),
    ("J", Energy),
    ("s", Time),
    ("Hz", Frequency),
    ("HZ", Frequency),
    ("hz", Frequency),
)


def quantity(value: Union[int, float], suffix_unit: str) -> UnitNumber:
    """Return e.g. ``quantity(2.2, "kΩ")`` as a 2.2 kilo-ohm :class:`Resistance`."""
    text = suffix_unit.strip()
    for symbol, unit in _UNITS:
        if text.endswith(symbol):
            prefix = text[: len(text) - len(symbol)]
            suffix = _SUFFIXES.get(prefix)
            if suffix is None:
                raise ValueError(f"Invalid suffix {prefix!r}")
            return unit(Number(float(value), suffix))
    raise ValueError(f"Invalid suffix+unit {text!r}")