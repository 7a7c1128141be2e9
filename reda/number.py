"""Numbers carrying an engineering (SI prefix) suffix."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Union

__all__ = ["Suffix", "Number", "num"]


class Suffix(Enum):
    """Metric prefix attached to a number; the value is its printed symbol."""

    GIGA = "G"
    MEGA = "M"
    KILO = "K"
    NONE = ""
    MILLI = "m"
    MICRO = "u"
    NANO = "n"
    PICO = "p"

    def factor(self) -> float:
        """Multiplier this prefix stands for."""
        return _FACTORS[self]

    def symbol(self) -> str:
        """Symbol used when printing a number with this prefix."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Suffix":
        """Return the suffix whose symbol is exactly ``text``."""
        for suffix in cls:
            if suffix.value == text:
                return suffix
        raise ValueError(f"unknown suffix {text!r}")


_FACTORS = {
    Suffix.GIGA: 1e9,
    Suffix.MEGA: 1e6,
    Suffix.KILO: 1e3,
    Suffix.NONE: 1.0,
    Suffix.MILLI: 1e-3,
    Suffix.MICRO: 1e-6,
    Suffix.NANO: 1e-9,
    Suffix.PICO: 1e-12,
}

# Order matters: the first prefix whose factor fits the magnitude wins.
_SCALE_ORDER = (
    Suffix.GIGA,
    Suffix.MEGA,
    Suffix.KILO,
    Suffix.NONE,
    Suffix.MILLI,
    Suffix.MICRO,
    Suffix.NANO,
    Suffix.PICO,
)

# Suffixes recognised when parsing text, checked in this order.
_PARSE_TABLE = (
    (Suffix.GIGA, "G"),
    (Suffix.MEGA, "M"),
    (Suffix.KILO, "K"),
    (Suffix.KILO, "k"),
    (Suffix.MILLI, "m"),
    (Suffix.MICRO, "u"),
    (Suffix.NANO, "n"),
    (Suffix.PICO, "p"),
)

# Suffix names accepted by the ``num`` shorthand.
_SHORTHAND = {
    "k": Suffix.KILO,
    "K": Suffix.KILO,
    "M": Suffix.MEGA,
    "G": Suffix.GIGA,
    "m": Suffix.MILLI,
    "u": Suffix.MICRO,
    "n": Suffix.NANO,
    "p": Suffix.PICO,
    "": Suffix.NONE,
}

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_FORMAT_RE = re.compile(r"\.(\d+)f?")


def _parse_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"Parse number '{text}' error for 'invalid float literal'")
    return float(text)


def _format_float(value: float, precision: int | None = None) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if precision is not None:
        return f"{value:.{precision}f}"
    return format(Decimal(repr(value)).normalize(), "f")


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _rem(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _log(fn: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        if math.isnan(x) or x < 0:
            return math.nan
        if x == 0:
            return -math.inf
        return fn(x)

    return apply


def _checked(fn: Callable[[float], float], overflow: Callable[[float], float]):
    def apply(x: float) -> float:
        try:
            return fn(x)
        except OverflowError:
            return overflow(x)
        except ValueError:
            return math.nan

    return apply


def _finite_only(fn: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        if not math.isfinite(x):
            return x
        return float(fn(x))

    return apply


def _round_half_away(x: float) -> float:
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), x)


def _fract(x: float) -> float:
    if math.isinf(x):
        return math.nan
    return x - math.trunc(x) if math.isfinite(x) else x


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    return math.sqrt(x)


def _recip(x: float) -> float:
    return _div(1.0, x)


def _unit_range(fn: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        if math.isnan(x) or abs(x) > 1:
            return math.nan
        return fn(x)

    return apply


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.floor(x) and int(x) % 2 == 1


def _powf(x: float, exp: float) -> float:
    try:
        return math.pow(x, exp)
    except OverflowError:
        if x < 0 and _is_odd_integer(exp):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0 and exp < 0:
            if _is_odd_integer(exp):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan


_sin = _checked(math.sin, lambda x: math.nan)
_cos = _checked(math.cos, lambda x: math.nan)
_tan = _checked(math.tan, lambda x: math.nan)
_exp = _checked(math.exp, lambda x: math.inf)
_sinh = _checked(math.sinh, lambda x: math.copysign(math.inf, x))
_cosh = _checked(math.cosh, lambda x: math.inf)


Real = Union[int, float]


def _as_float(other: object) -> float | None:
    if isinstance(other, Number):
        return other.to_float()
    if isinstance(other, (int, float)):
        return float(other)
    return None


@dataclass(frozen=True, eq=False)
class Number:
    """A floating-point value together with a metric prefix."""

    value: float
    suffix: Suffix = Suffix.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls, text: str) -> "Number":
        """Parse text such as ``"3.3K"``, ``"2.2u"`` or ``"100"``."""
        text = text.strip()
        for suffix, symbol in _PARSE_TABLE:
            if text.endswith(symbol):
                number_text = text[: len(text) - len(symbol)]
                return cls(_parse_float(number_text.strip()), suffix)
        return cls(_parse_float(text), Suffix.NONE)

    @classmethod
    def from_float(cls, value: Real) -> "Number":
        """Pick the largest prefix not exceeding ``abs(value)``."""
        value = float(value)
        magnitude = abs(value)
        for suffix in _SCALE_ORDER:
            factor = suffix.factor()
            if magnitude >= factor:
                return cls(value / factor, suffix)
        return cls(value, Suffix.NONE)

    @classmethod
    def zero(cls) -> "Number":
        return cls(0.0, Suffix.NONE)

    def to_float(self) -> float:
        """Value in base units."""
        return self.value * self.suffix.factor()

    def is_zero(self) -> bool:
        return self.value == 0.0

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def is_finite(self) -> bool:
        return math.isfinite(self.value)

    def powf(self, exp: float) -> "Number":
        return Number(_powf(self.value, float(exp)), self.suffix)

    def atan2(self, other: Union["Number", Real]) -> "Number":
        other_value = _as_float(other)
        if other_value is None:
            raise TypeError(f"cannot take atan2 with {type(other).__name__}")
        return Number(math.atan2(self.to_float(), other_value), self.suffix)

    def _map(self, fn: Callable[[float], float]) -> "Number":
        return Number(fn(self.value), self.suffix)

    def abs(self) -> "Number":
        return self._map(math.fabs)

    def ceil(self) -> "Number":
        return self._map(_finite_only(math.ceil))

    def floor(self) -> "Number":
        return self._map(_finite_only(math.floor))

    def round(self) -> "Number":
        return self._map(_finite_only(_round_half_away))

    def trunc(self) -> "Number":
        return self._map(_finite_only(math.trunc))

    def fract(self) -> "Number":
        return self._map(_fract)

    def sqrt(self) -> "Number":
        return self._map(_sqrt)

    def exp(self) -> "Number":
        return self._map(_exp)

    def ln(self) -> "Number":
        return self._map(_log(math.log))

    def log10(self) -> "Number":
        return self._map(_log(math.log10))

    def log2(self) -> "Number":
        return self._map(_log(math.log2))

    def recip(self) -> "Number":
        return self._map(_recip)

    def sin(self) -> "Number":
        return self._map(_sin)

    def cos(self) -> "Number":
        return self._map(_cos)

    def tan(self) -> "Number":
        return self._map(_tan)

    def asin(self) -> "Number":
        return self._map(_unit_range(math.asin))

    def acos(self) -> "Number":
        return self._map(_unit_range(math.acos))

    def atan(self) -> "Number":
        return self._map(math.atan)

    def sinh(self) -> "Number":
        return self._map(_sinh)

    def cosh(self) -> "Number":
        return self._map(_cosh)

    def tanh(self) -> "Number":
        return self._map(math.tanh)

    def to_degrees(self) -> "Number":
        return self._map(math.degrees)

    def to_radians(self) -> "Number":
        return self._map(math.radians)

    def __str__(self) -> str:
        return _format_float(self.value) + self.suffix.symbol()

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        match = _FORMAT_RE.fullmatch(spec)
        if match is None:
            raise ValueError(f"unsupported format specification {spec!r}")
        return _format_float(self.value, int(match.group(1))) + self.suffix.symbol()

    def __float__(self) -> float:
        return self.to_float()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self.value == other.value and self.suffix is other.suffix
        if isinstance(other, (int, float)):
            return self.to_float() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_float())

    def _compare(self, other: object, op: Callable[[float, float], bool]):
        other_value = _as_float(other)
        if other_value is None:
            return NotImplemented
        return op(self.to_float(), other_value)

    def __lt__(self, other: object):
        return self._compare(other, lambda a, b: a < b)

    def __le__(self, other: object):
        return self._compare(other, lambda a, b: a <= b)

    def __gt__(self, other: object):
        return self._compare(other, lambda a, b: a > b)

    def __ge__(self, other: object):
        return self._compare(other, lambda a, b: a >= b)

    def _binary(self, other: object, op: Callable[[float, float], float], reverse=False):
        other_value = _as_float(other)
        if other_value is None:
            return NotImplemented
        a, b = self.to_float(), other_value
        if reverse:
            a, b = b, a
        return Number.from_float(op(a, b))

    def __add__(self, other):
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._binary(other, lambda a, b: a + b, reverse=True)

    def __sub__(self, other):
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._binary(other, lambda a, b: a - b, reverse=True)

    def __mul__(self, other):
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._binary(other, lambda a, b: a * b, reverse=True)

    def __truediv__(self, other):
        return self._binary(other, _div)

    def __rtruediv__(self, other):
        return self._binary(other, _div, reverse=True)

    def __mod__(self, other):
        return self._binary(other, _rem)

    def __rmod__(self, other):
        return self._binary(other, _rem, reverse=True)

    def __neg__(self) -> "Number":
        return Number(-self.value, self.suffix)

    def __abs__(self) -> "Number":
        return self.abs()


def num(value: Real, suffix: Union[Suffix, str] = Suffix.NONE) -> Number:
    """Shorthand constructor: ``num(3.3, "k")`` is 3.3 kilo."""
    if isinstance(suffix, str):
        try:
            suffix = _SHORTHAND[suffix]
        except KeyError:
            raise ValueError(f"unknown suffix {suffix!r}") from None
    return Number(float(value), suffix)