"""Reader for the binary raw files a SPICE simulator writes."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union

from reda.complexnum import Complex
from reda.errors import NgSpiceError, UnexpectedComplexValueError
from reda.number import Number
from reda.units import Frequency, Time, Voltage

__all__ = [
    "VarType",
    "Flags",
    "Variable",
    "RawFileError",
    "RawFile",
    "clean_name",
]

Value = Union[Number, Complex]

_BINARY_MARKER = b"Binary:\n"
_UINT_RE = re.compile(r"\+?\d+")


class VarType(Enum):
    """Kind of quantity a raw-file variable holds."""

    VOLTAGE = "voltage"
    CURRENT = "current"
    TIME = "time"


class Flags(Enum):
    """Whether the data points are real or complex."""

    REAL = "real"
    COMPLEX = "complex"


@dataclass
class Variable:
    """One named data vector of a raw file."""

    name: str
    vartype: VarType
    data: List[Value] = field(default_factory=list)

    def is_voltage(self) -> bool:
        return self.vartype is VarType.VOLTAGE

    def is_current(self) -> bool:
        return self.vartype is VarType.CURRENT


class RawFileError(ValueError):
    """The raw file is malformed."""


def _invalid_field(name: str, detail: str) -> RawFileError:
    return RawFileError(f"Invalid header field '{name}' for '{detail}'")


def _terminated() -> RawFileError:
    return RawFileError("Unexpected end of header")


def _parse_count(text: str) -> int:
    if not text:
        raise _invalid_field("No. Variables", "cannot parse integer from empty string")
    if not _UINT_RE.fullmatch(text):
        raise _invalid_field("No. Variables", "invalid digit found in string")
    return int(text)


def _header_lines(text: str) -> Iterator[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return iter(line[:-1] if line.endswith("\r") else line for line in lines)


def _parse_variable(line: str) -> Variable:
    parts = line.split()
    if len(parts) != 3:
        raise _invalid_field("Variables", f"Bad var line: {line}")
    try:
        vartype = VarType(parts[2])
    except ValueError:
        raise _invalid_field("Variables", f"Unknown var type {parts[2]}") from None
    return Variable(parts[1], vartype)


@dataclass
class RawFile:
    """Header fields and data vectors of one simulation plot."""

    date: str
    plotname: str
    flags: Flags
    num_vars: int
    num_points: int
    variables: List[Variable]
    circuit: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def parse(cls, buf: bytes, num_points: int) -> "RawFile":
        """Parse raw-file bytes holding ``num_points`` data points."""
        buf = bytes(buf)
        marker = buf.find(_BINARY_MARKER)
        if marker < 0:
            raise RawFileError("Missing Binary line")
        header_end = marker + len(_BINARY_MARKER)
        header, raw = buf[:header_end], buf[header_end:]

        try:
            text = header.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RawFileError(f"Invalid header: {exc}") from None

        title = date = plotname = None
        flags: Optional[Flags] = None
        num_vars: Optional[int] = None
        variables: List[Variable] = []

        lines = _header_lines(text)
        for line in lines:
            if line.startswith("Title:"):
                title = line[6:].strip()
            elif line.startswith("Date:"):
                date = line[5:].strip()
            elif line.startswith("Plotname:"):
                plotname = line[9:].strip()
            elif line.startswith("Flags:"):
                flag_text = line[6:].strip()
                try:
                    flags = Flags(flag_text)
                except ValueError:
                    raise _invalid_field("Flags", f"Unknown flag {flag_text}") from None
            elif line.startswith("No. Variables:"):
                num_vars = _parse_count(line[14:].strip())
            elif line.startswith("No. Points:"):
                continue
            elif line.startswith("Variables:"):
                # The line right after holds the column count.
                if next(lines, None) is None:
                    raise _terminated()
                first = next(lines, None)
                while first is not None and not first.startswith("\t"):
                    first = next(lines, None)
                if first is None:
                    raise _terminated()
                if num_vars is None:
                    raise RawFileError(
                        "Invalid header: Variables come before No. Variables"
                    )
                for index in range(num_vars):
                    vline = first if index == 0 else next(lines, None)
                    if vline is None:
                        raise _terminated()
                    variables.append(_parse_variable(vline))

        if num_vars is None:
            raise RawFileError("Invalid header: No exit 'No. Variables'")
        if flags is None:
            raise RawFileError("Invalid header: No exit 'Flags'")

        cls._read_data(raw, flags, num_vars, num_points, variables)

        for name, given in (("date", date), ("plotname", plotname)):
            if given is None:
                raise RawFileError(f"Build raw file error: `{name}` must be initialized")

        return cls(
            date=date,
            plotname=plotname,
            flags=flags,
            num_vars=num_vars,
            num_points=num_points,
            variables=variables,
            title=title,
        )

    @staticmethod
    def _read_data(
        raw: bytes,
        flags: Flags,
        num_vars: int,
        num_points: int,
        variables: List[Variable],
    ) -> None:
        width = 2 if flags is Flags.COMPLEX else 1
        count = num_points * num_vars * width
        if len(raw) < count * 8:
            raise RawFileError("Invalid binary: failed to fill whole buffer")
        if count and len(variables) < num_vars:
            raise RawFileError("Invalid header: fewer variables than 'No. Variables'")
        values = struct.unpack_from(f"<{count}d", raw)
        stride = num_vars * width
        for index, variable in enumerate(variables[:num_vars]):
            if flags is Flags.REAL:
                variable.data.extend(Number(v) for v in values[index::stride])
            else:
                reals = values[2 * index::stride]
                imags = values[2 * index + 1::stride]
                variable.data.extend(
                    Complex(Number(re), Number(im)) for re, im in zip(reals, imags)
                )

    def find_variable(self, name: str) -> Optional[Variable]:
        """First variable called ``name``, or ``None``."""
        return next((var for var in self.variables if var.name == name), None)

    def time_vector(self) -> Optional[List[Time]]:
        """The ``time`` vector, or ``None`` if absent or not real."""
        variable = self.find_variable("time")
        if variable is None or not all(isinstance(v, Number) for v in variable.data):
            return None
        return [Time(v) for v in variable.data]

    def frequency_vector(self) -> Optional[List[Frequency]]:
        """Real parts of the ``frequency`` vector, or ``None`` if absent or real."""
        variable = self.find_variable("frequency")
        if variable is None or not all(isinstance(v, Complex) for v in variable.data):
            return None
        return [Frequency(v.re) for v in variable.data]

    def v_sweep(self) -> List[Voltage]:
        """Swept source voltages of a DC voltage analysis."""
        variable = self.find_variable("v(v-sweep)")
        if variable is None:
            raise NgSpiceError("no exit v-sweep in .dc voltage analysis")
        if any(isinstance(v, Complex) for v in variable.data):
            raise UnexpectedComplexValueError()
        return [Voltage(v) for v in variable.data]


def clean_name(name: str) -> str:
    """Strip a ``v(...)``/``i(...)`` wrapper from a variable name."""
    if "(" in name:
        return name[2:-1]
    return name