"""Errors raised while driving the simulator and reading its results."""

from __future__ import annotations

__all__ = [
    "NgSpiceError",
    "CommandError",
    "CircuitError",
    "ResultNotFoundError",
    "MissingPointsError",
    "ParseRawFileError",
    "UnexpectedComplexValueError",
]


class NgSpiceError(Exception):
    """Base class of every simulator error."""


class CommandError(NgSpiceError):
    """A simulator command failed."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"execute command '{command}' failed for '{reason}'")


class CircuitError(NgSpiceError):
    """A circuit could not be loaded."""

    def __init__(self, circuit: str, reason: str) -> None:
        self.circuit = circuit
        self.reason = reason
        super().__init__(f"load circuit '{circuit}' failed for '{reason}'")


class ResultNotFoundError(NgSpiceError):
    """A requested result vector does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"result '{name}' not found!")


class MissingPointsError(NgSpiceError):
    """The number of simulated points could not be determined."""

    def __init__(self) -> None:
        super().__init__("miss point")


class ParseRawFileError(NgSpiceError):
    """The simulator output could not be read as a raw file."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"parse .raw error: '{detail}'")


class UnexpectedComplexValueError(NgSpiceError):
    """A complex value appeared where a real one was required."""

    def __init__(self) -> None:
        super().__init__("unexpect complex value")