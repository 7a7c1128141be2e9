"""Engineering numbers, typed physical units and ngspice raw-file reading."""

__version__ = "0.1.0"

__all__ = ["number", "complexnum", "units", "quantity", "errors", "rawfile", "server"]