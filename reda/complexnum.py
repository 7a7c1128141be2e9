"""Complex numbers whose parts carry engineering suffixes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from reda.number import Number

__all__ = ["Complex"]

_Part = Union[Number, int, float]


def _to_number(value: _Part) -> Number:
    if isinstance(value, Number):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Number(float(value))
    raise TypeError(f"cannot use {type(value).__name__} as a complex part")


def _find_separator(text: str) -> Optional[int]:
    """Index of the sign that splits the real part from the imaginary one."""
    for index, char in enumerate(text):
        if index == 0:
            continue
        if char in "+-" and "j" in text[index + 1:]:
            return index
    return None


@dataclass(frozen=True, eq=False)
class Complex:
    """A complex value made of two suffixed numbers."""

    re: Number
    im: Number

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", _to_number(self.re))
        object.__setattr__(self, "im", _to_number(self.im))

    @classmethod
    def parse(cls, text: str) -> "Complex":
        """Parse text such as ``"1.5"``, ``"-5.5mj"`` or ``"1.1+2.2uj"``."""
        text = text.strip()

        index = _find_separator(text)
        if index is not None:
            real_text, imag_text = text[:index], text[index:]
            try:
                real = Number.parse(real_text.strip())
            except ValueError as exc:
                raise ValueError(f"Parse real part error: {exc}") from None
            try:
                imag = Number.parse(imag_text.rstrip("j"))
            except ValueError as exc:
                raise ValueError(f"Parse imaginary part error: {exc}") from None
            return cls(real, imag)

        if text.endswith("j"):
            try:
                imag = Number.parse(text[:-1])
            except ValueError as exc:
                raise ValueError(f"Parse imaginary part error: {exc}") from None
            return cls(Number.zero(), imag)

        try:
            real = Number.parse(text)
        except ValueError as exc:
            raise ValueError(f"Parse real number error: {exc}") from None
        return cls(real, Number.zero())

    def parts(self) -> Tuple[Number, Number]:
        return self.re, self.im

    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    def norm_sqr(self) -> Number:
        return self.re * self.re + self.im * self.im

    def abs(self) -> Number:
        return (self.re.powf(2.0) + self.im.powf(2.0)).sqrt()

    def arg(self) -> Number:
        return self.im.atan2(self.re)

    def __add__(self, other: object):
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other: object):
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other: object):
        if not isinstance(other, Complex):
            return NotImplemented
        a, b = self.parts()
        c, d = other.parts()
        return Complex(a * c - b * d, a * d + b * c)

    def __truediv__(self, other: object):
        if not isinstance(other, Complex):
            return NotImplemented
        a, b = self.parts()
        c, d = other.parts()
        denom = c * c + d * d
        if denom.is_zero():
            raise ZeroDivisionError("Divide by zero in complex division")
        return Complex((a * c + b * d) / denom, (b * c - a * d) / denom)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self) -> int:
        return hash((self.re, self.im))

    def _render(self, spec: str) -> str:
        re_zero = self.re.to_float() == 0.0
        im_zero = self.im.to_float() == 0.0
        im_non_negative = self.im.to_float() >= 0.0

        if re_zero and im_zero:
            return "0"
        if im_zero:
            return format(self.re, spec)
        if re_zero:
            if im_non_negative:
                return format(self.im, spec) + "j"
            return "-" + format(-self.im, spec) + "j"

        re_text = format(self.re, spec)
        im_text = format(self.im, spec)
        if im_non_negative:
            return f"{re_text}+{im_text}j"
        return f"{re_text}-{im_text.lstrip('-')}j"

    def __str__(self) -> str:
        return self._render("")

    def __format__(self, spec: str) -> str:
        return self._render(spec)