# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Source positions recorded by code builders, printed as `/* [file.py:12] */`."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

UNKNOWN_LOCATION = "Unknown Location"


@dataclass(frozen=True)
class DebugOutput:
	location: str

	def as_comment(self) -> str:
		return f" /* [{self.location}] */ "


def _is_internal(module: str) -> bool:
	if module.startswith("jcomposer.tests"):
		return False
	return module == "jcomposer" or module.startswith("jcomposer.")


def find_caller() -> DebugOutput:
	"""Position of the innermost stack frame outside the library itself."""
	frame = sys._getframe(1)
	while frame is not None:
		if not _is_internal(frame.f_globals.get("__name__", "")):
			filename = os.path.basename(frame.f_code.co_filename)
			return DebugOutput(f"{filename}:{frame.f_lineno}")
		frame = frame.f_back
	return DebugOutput(UNKNOWN_LOCATION)


__all__ = ["DebugOutput", "UNKNOWN_LOCATION", "find_caller"]
