"""Run a simulator in batch mode and read the raw file it prints."""

from __future__ import annotations

import os
import re
import subprocess
from dataclasses import dataclass
from typing import Union

from reda.errors import MissingPointsError, NgSpiceError, ParseRawFileError
from reda.rawfile import RawFile, RawFileError

__all__ = ["NgSpiceServer", "parse_point_count"]

_POINTS_PREFIX = "@@@ "
_UINT_RE = re.compile(r"\+?\d+")


def parse_point_count(stderr: str) -> int:
    """Read the number of simulated points from the simulator's stderr.

    The count is the second field of the first line starting with ``"@@@ "``.
    """
    for line in stderr.splitlines():
        if not line.startswith(_POINTS_PREFIX):
            continue
        parts = line[len(_POINTS_PREFIX):].split()
        if len(parts) >= 2:
            if not _UINT_RE.fullmatch(parts[1]):
                raise MissingPointsError()
            return int(parts[1])
    raise MissingPointsError()


@dataclass
class NgSpiceServer:
    """A simulator executable driven through its standard streams."""

    ngspice_path: Union[str, os.PathLike]

    def run(self, netlist: str) -> RawFile:
        """Feed ``netlist`` to the simulator and parse the raw file it prints."""
        try:
            completed = subprocess.run(
                [os.fspath(self.ngspice_path), "-s"],
                input=netlist.encode("utf-8"),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise NgSpiceError(f"io error '{exc}'") from exc

        stderr = completed.stderr.decode("utf-8", errors="replace")
        num_points = parse_point_count(stderr)

        try:
            return RawFile.parse(completed.stdout, num_points)
        except RawFileError as exc:
            raise ParseRawFileError(str(exc)) from exc