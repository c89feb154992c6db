# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error taxonomy shared by the type model, the interpolator and the writer.

Every failure is raised eagerly where the malformed input is detected. Each
class also derives from the closest builtin so callers that only know about
`ValueError`/`TypeError`/`RuntimeError` still catch them.
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class ComposerError(Exception):
	"""Base class for all errors raised by jcomposer."""


class NullArgumentError(ComposerError, ValueError):
	"""A required input was `None`."""

	def __init__(self, name: str) -> None:
		super().__init__(f"argument '{name}' is null")
		self.name = name


class EmptyArgumentError(ComposerError, ValueError):
	"""A required non-blank string (or sequence) was empty."""

	def __init__(self, name: str) -> None:
		super().__init__(f"argument '{name}' is empty")
		self.name = name


class InvalidArgumentError(ComposerError, ValueError):
	"""Malformed input: bad placeholder, bad bounds, zero-argument generic, ..."""


class UnsupportedOperationError(ComposerError, TypeError):
	"""The operation has no defined result for the given value (e.g. unboxing `String`)."""


class ComposerStateError(ComposerError, RuntimeError):
	"""A builder or writer was used in an invalid state."""


def require_non_null(value: T | None, name: str) -> T:
	"""Return `value`, raising `NullArgumentError` when it is None."""
	if value is None:
		raise NullArgumentError(name)
	return value


def require_not_empty(value: Any, name: str) -> Any:
	"""
	Return `value` after checking it is neither None nor empty.

	Strings consisting only of whitespace count as empty.
	"""
	if value is None:
		raise NullArgumentError(name)
	if isinstance(value, str):
		if not value.strip():
			raise EmptyArgumentError(name)
	elif len(value) == 0:
		raise EmptyArgumentError(name)
	return value


def check_argument(condition: bool, message: str) -> None:
	if not condition:
		raise InvalidArgumentError(message)


def check_state(condition: bool, message: str) -> None:
	if not condition:
		raise ComposerStateError(message)


__all__ = [
	"ComposerError",
	"NullArgumentError",
	"EmptyArgumentError",
	"InvalidArgumentError",
	"UnsupportedOperationError",
	"ComposerStateError",
	"require_non_null",
	"require_not_empty",
	"check_argument",
	"check_state",
]
