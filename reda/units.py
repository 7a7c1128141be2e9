"""Physical quantities: suffixed numbers tagged with an SI unit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Optional, Tuple, Type, Union

from reda.number import Number

__all__ = [
    "UnitNumber",
    "UnitComplex",
    "Voltage",
    "Current",
    "Resistance",
    "Capacitance",
    "Inductance",
    "Charge",
    "Power",
    "Energy",
    "Time",
    "Frequency",
    "Length",
    "Area",
    "Force",
    "Pressure",
    "MagneticFlux",
    "FluxDensity",
    "Conductance",
    "Velocity",
    "Accel",
    "Temperature",
    "Angle",
]

_Scalar = Union[Number, int, float]


def _to_number(value: object) -> Number:
    if isinstance(value, Number):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Number(float(value))
    raise TypeError(f"cannot build a quantity from {type(value).__name__}")


def _scalar(value: object) -> Optional[_Scalar]:
    if isinstance(value, Number):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return None


@dataclass(frozen=True, eq=False)
class UnitNumber:
    """A :class:`Number` measured in the unit given by the subclass."""

    SYMBOL: ClassVar[str] = ""

    number: Number

    def __post_init__(self) -> None:
        if type(self) is UnitNumber:
            raise TypeError("UnitNumber needs a concrete unit subclass")
        object.__setattr__(self, "number", _to_number(self.number))

    @classmethod
    def parse(cls, text: str) -> "UnitNumber":
        """Parse text such as ``"3.3mV"``; the unit symbol must end the text."""
        text = text.strip()
        if not text.endswith(cls.SYMBOL):
            raise ValueError(f"Expect end with '{cls.SYMBOL}'")
        return cls(Number.parse(text[: len(text) - len(cls.SYMBOL)]))

    def to_float(self) -> float:
        """Value in base units."""
        return self.number.to_float()

    def value(self) -> Number:
        return self.number

    def is_nan(self) -> bool:
        return self.number.is_nan()

    def is_finite(self) -> bool:
        return self.number.is_finite()

    def powf(self, exp: float) -> "UnitNumber":
        return type(self)(self.number.powf(exp))

    def atan2(self, other: "UnitNumber") -> Number:
        return self.number.atan2(other.number)

    def _map(self, fn: Callable[[Number], Number]) -> "UnitNumber":
        return type(self)(fn(self.number))

    def abs(self) -> "UnitNumber":
        return self._map(Number.abs)

    def ceil(self) -> "UnitNumber":
        return self._map(Number.ceil)

    def floor(self) -> "UnitNumber":
        return self._map(Number.floor)

    def round(self) -> "UnitNumber":
        return self._map(Number.round)

    def trunc(self) -> "UnitNumber":
        return self._map(Number.trunc)

    def fract(self) -> "UnitNumber":
        return self._map(Number.fract)

    def sqrt(self) -> "UnitNumber":
        return self._map(Number.sqrt)

    def exp(self) -> "UnitNumber":
        return self._map(Number.exp)

    def ln(self) -> "UnitNumber":
        return self._map(Number.ln)

    def log10(self) -> "UnitNumber":
        return self._map(Number.log10)

    def log2(self) -> "UnitNumber":
        return self._map(Number.log2)

    def recip(self) -> "UnitNumber":
        return self._map(Number.recip)

    def sin(self) -> "UnitNumber":
        return self._map(Number.sin)

    def cos(self) -> "UnitNumber":
        return self._map(Number.cos)

    def tan(self) -> "UnitNumber":
        return self._map(Number.tan)

    def asin(self) -> "UnitNumber":
        return self._map(Number.asin)

    def acos(self) -> "UnitNumber":
        return self._map(Number.acos)

    def atan(self) -> "UnitNumber":
        return self._map(Number.atan)

    def sinh(self) -> "UnitNumber":
        return self._map(Number.sinh)

    def cosh(self) -> "UnitNumber":
        return self._map(Number.cosh)

    def tanh(self) -> "UnitNumber":
        return self._map(Number.tanh)

    def to_degrees(self) -> "UnitNumber":
        return self._map(Number.to_degrees)

    def to_radians(self) -> "UnitNumber":
        return self._map(Number.to_radians)

    def __str__(self) -> str:
        return str(self.number) + self.SYMBOL

    def __format__(self, spec: str) -> str:
        return format(self.number, spec) + self.SYMBOL

    def __float__(self) -> float:
        return self.to_float()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitNumber):
            return NotImplemented
        return type(self) is type(other) and self.number == other.number

    def __hash__(self) -> int:
        return hash((type(self), self.number))

    def _same_unit(self, other: object) -> bool:
        return isinstance(other, UnitNumber) and type(other) is type(self)

    def __lt__(self, other: object):
        if not self._same_unit(other):
            return NotImplemented
        return self.number < other.number

    def __le__(self, other: object):
        if not self._same_unit(other):
            return NotImplemented
        return self.number <= other.number

    def __gt__(self, other: object):
        if not self._same_unit(other):
            return NotImplemented
        return self.number > other.number

    def __ge__(self, other: object):
        if not self._same_unit(other):
            return NotImplemented
        return self.number >= other.number

    def __add__(self, other: object):
        if not self._same_unit(other):
            return NotImplemented
        return type(self)(self.number + other.number)

    def __sub__(self, other: object):
        if not self._same_unit(other):
            return NotImplemented
        return type(self)(self.number - other.number)

    def __neg__(self) -> "UnitNumber":
        return type(self)(-self.number)

    def __abs__(self) -> "UnitNumber":
        return self.abs()

    def __mul__(self, other: object):
        if isinstance(other, UnitNumber):
            key = (type(self), type(other))
            if key in _DIMENSIONLESS_PRODUCTS:
                return self.number * other.number
            result = _PRODUCTS.get(key)
            if result is None:
                return NotImplemented
            return result(self.number * other.number)
        scalar = _scalar(other)
        if scalar is None:
            return NotImplemented
        return type(self)(self.number * scalar)

    def __rmul__(self, other: object):
        scalar = _scalar(other)
        if scalar is None:
            return NotImplemented
        return type(self)(self.number * scalar)

    def __truediv__(self, other: object):
        if isinstance(other, UnitNumber):
            if type(other) is type(self):
                return self.number / other.number
            result = _QUOTIENTS.get((type(self), type(other)))
            if result is None:
                return NotImplemented
            return result(self.number / other.number)
        scalar = _scalar(other)
        if scalar is None:
            return NotImplemented
        return type(self)(self.number / scalar)

    def __mod__(self, other: object):
        if not self._same_unit(other):
            return NotImplemented
        return type(self)(self.number % other.number)


@dataclass(frozen=True, eq=False)
class UnitComplex:
    """A phasor: real and imaginary parts sharing one unit."""

    re: UnitNumber
    im: UnitNumber
    unit: Optional[Type[UnitNumber]] = None

    def __post_init__(self) -> None:
        unit = self.unit
        if unit is None:
            for part in (self.re, self.im):
                if isinstance(part, UnitNumber):
                    unit = type(part)
                    break
        if unit is None:
            raise TypeError("UnitComplex needs a unit")
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "re", self._coerce(self.re, unit))
        object.__setattr__(self, "im", self._coerce(self.im, unit))

    @staticmethod
    def _coerce(part: object, unit: Type[UnitNumber]) -> UnitNumber:
        if isinstance(part, UnitNumber):
            if type(part) is not unit:
                raise TypeError(
                    f"expected {unit.__name__}, got {type(part).__name__}"
                )
            return part
        return unit(_to_number(part))

    def parts(self) -> Tuple[UnitNumber, UnitNumber]:
        return self.re, self.im

    def conjugate(self) -> "UnitComplex":
        return UnitComplex(self.re, -self.im, self.unit)

    def abs(self) -> UnitNumber:
        magnitude = (self.re.number.powf(2.0) + self.im.number.powf(2.0)).sqrt()
        return self.unit(magnitude)

    def arg(self) -> Number:
        return self.im.atan2(self.re)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitComplex):
            return NotImplemented
        return self.unit is other.unit and self.re == other.re and self.im == other.im

    def __hash__(self) -> int:
        return hash((self.unit, self.re, self.im))

    def __str__(self) -> str:
        return f"{self.re} + {self.im}j"

    def __format__(self, spec: str) -> str:
        return f"{format(self.re, spec)} + {format(self.im, spec)}j"


class Voltage(UnitNumber):
    """Electric potential in volts."""

    SYMBOL = "V"


class Current(UnitNumber):
    """Electric current in amperes."""

    SYMBOL = "A"


class Resistance(UnitNumber):
    """Resistance in ohms."""

    SYMBOL = "Ω"


class Capacitance(UnitNumber):
    """Capacitance in farads."""

    SYMBOL = "F"


class Inductance(UnitNumber):
    """Inductance in henries."""

    SYMBOL = "H"


class Charge(UnitNumber):
    """Electric charge."""

    SYMBOL = "Q"


class Power(UnitNumber):
    """Power in watts."""

    SYMBOL = "W"


class Energy(UnitNumber):
    """Energy in joules."""

    SYMBOL = "J"


class Time(UnitNumber):
    """Time in seconds."""

    SYMBOL = "s"

    def to_frequency(self) -> "Frequency":
        return Frequency(1.0 / self.number)


class Frequency(UnitNumber):
    """Frequency in hertz."""

    SYMBOL = "Hz"

    def to_period(self) -> Time:
        return Time(1.0 / self.number)


class Length(UnitNumber):
    """Length in metres."""

    SYMBOL = "m"


class Area(UnitNumber):
    """Area in square metres."""

    SYMBOL = "m²"


class Force(UnitNumber):
    """Force in newtons."""

    SYMBOL = "N"


class Pressure(UnitNumber):
    """Pressure in pascals."""

    SYMBOL = "Pa"


class MagneticFlux(UnitNumber):
    """Magnetic flux in webers."""

    SYMBOL = "Wb"


class FluxDensity(UnitNumber):
    """Magnetic flux density in teslas."""

    SYMBOL = "T"


class Conductance(UnitNumber):
    """Conductance in siemens."""

    SYMBOL = "S"


class Velocity(UnitNumber):
    """Velocity in metres per second."""

    SYMBOL = "m/s"


class Accel(UnitNumber):
    """Acceleration in metres per second squared."""

    SYMBOL = "m/s²"


class Temperature(UnitNumber):
    """Temperature in kelvin."""

    SYMBOL = "K"


class Angle(UnitNumber):
    """Angle in radians."""

    SYMBOL = "rad"


_UnitPair = Tuple[Type[UnitNumber], Type[UnitNumber]]

# (output, lhs, rhs): output = lhs * rhs, lhs = output / rhs, rhs = output / lhs
_RULES = (
    (Voltage, Resistance, Current),
    (Power, Voltage, Current),
    (Energy, Power, Time),
    (Charge, Capacitance, Voltage),
    (Charge, Current, Time),
    (Current, Charge, Time),
    (Length, Velocity, Time),
    (Power, Force, Velocity),
    (Energy, Force, Length),
    (Force, Pressure, Area),
    (MagneticFlux, FluxDensity, Area),
    (MagneticFlux, Voltage, Time),
)

_PRODUCTS: Dict[_UnitPair, Type[UnitNumber]] = {(Length, Length): Area}
_QUOTIENTS: Dict[_UnitPair, Type[UnitNumber]] = {(Area, Length): Length}
for _output, _lhs, _rhs in _RULES:
    _PRODUCTS[(_lhs, _rhs)] = _output
    _QUOTIENTS[(_output, _rhs)] = _lhs
    _QUOTIENTS[(_output, _lhs)] = _rhs

_DIMENSIONLESS_PRODUCTS = {(Frequency, Time), (Time, Frequency)}