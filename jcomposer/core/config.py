# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Rendering configuration.

A `ComposerConfig` is an immutable value handed to every render call. It can
be built directly, from a mapping, or from a JSON file:

  {
    "column_limit": 100,
    "indent": "    ",
    "add_debug_output": false
  }
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from .errors import InvalidArgumentError

DEFAULT_COLUMN_LIMIT = 100
DEFAULT_INDENT = "  "


@dataclass(frozen=True)
class ComposerConfig:
	column_limit: int = DEFAULT_COLUMN_LIMIT
	indent: str = DEFAULT_INDENT
	add_debug_output: bool = False
	# `java.lang` types always render by simple name; this only controls
	# whether an explicit import line is printed for them.
	skip_default_imports: bool = True
	static_imports_first: bool = False
	case_sensitive_imports: bool = True

	def __post_init__(self) -> None:
		if isinstance(self.column_limit, bool) or not isinstance(self.column_limit, int):
			raise InvalidArgumentError(f"column_limit must be an int, got {self.column_limit!r}")
		if self.column_limit <= 0:
			raise InvalidArgumentError(f"column_limit is 0 or negative: {self.column_limit}")
		if not isinstance(self.indent, str) or not self.indent:
			raise InvalidArgumentError("indent must be a non-empty string")
		if self.indent.strip(" \t"):
			raise InvalidArgumentError(f"indent may only contain spaces and tabs: {self.indent!r}")

	def with_changes(self, **changes: Any) -> "ComposerConfig":
		"""Return a copy with the given fields replaced (validated again)."""
		return replace(self, **changes)

	def to_dict(self) -> dict[str, Any]:
		return asdict(self)

	@classmethod
	def from_mapping(cls, data: Mapping[str, Any]) -> "ComposerConfig":
		"""Build a config from a plain mapping; unknown keys are rejected."""
		known = {f.name for f in fields(cls)}
		unknown = sorted(k for k in data if k not in known)
		if unknown:
			raise InvalidArgumentError(f"unknown configuration key(s): {', '.join(unknown)}")
		return cls(**dict(data))

	@classmethod
	def load(cls, path: Path) -> "ComposerConfig":
		"""Load a config from a JSON object stored at `path`."""
		try:
			data = json.loads(Path(path).read_text(encoding="utf-8"))
		except json.JSONDecodeError as err:
			raise InvalidArgumentError(f"{path}: invalid JSON: {err}") from err
		if not isinstance(data, dict):
			raise InvalidArgumentError(f"{path}: expected a JSON object at top level")
		return cls.from_mapping(data)


DEFAULT_CONFIG = ComposerConfig()


__all__ = ["ComposerConfig", "DEFAULT_CONFIG", "DEFAULT_COLUMN_LIMIT", "DEFAULT_INDENT"]
