# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Java identifier helpers and the `NameAllocator`.

The allocator hands out collision-free identifiers: a suggestion that is a
reserved word, or that is already taken in the same scope, gets `_` appended
until it is unique. Names are looked up later by tag (any hashable object).
"""

from __future__ import annotations

import uuid
from typing import Dict, Hashable, Set

from .errors import InvalidArgumentError, require_non_null, require_not_empty

JAVA_KEYWORDS = frozenset(
	{
		"abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
		"class", "const", "continue", "default", "do", "double", "else", "enum",
		"extends", "final", "finally", "float", "for", "goto", "if", "implements",
		"import", "instanceof", "int", "interface", "long", "native", "new",
		"package", "private", "protected", "public", "return", "short", "static",
		"strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
		"transient", "try", "void", "volatile", "while", "true", "false", "null",
		"_",
	}
)


def _is_identifier_start(ch: str) -> bool:
	return ch.isalpha() or ch in "_$"


def _is_identifier_part(ch: str) -> bool:
	return ch.isalnum() or ch in "_$"


def is_keyword(name: str) -> bool:
	return name in JAVA_KEYWORDS


def is_identifier(name: str) -> bool:
	"""True if `name` is a syntactically valid, non-reserved Java identifier."""
	if not name or is_keyword(name):
		return False
	if not _is_identifier_start(name[0]):
		return False
	return all(_is_identifier_part(ch) for ch in name[1:])


def to_java_identifier(suggestion: str) -> str:
	"""Replace characters that cannot appear in an identifier with `_`."""
	require_not_empty(suggestion, "suggestion")
	first = suggestion[0]
	if _is_identifier_start(first):
		buf = [first]
	else:
		buf = ["_"]
		if _is_identifier_part(first):
			buf.append(first)
	buf.extend(ch if _is_identifier_part(ch) else "_" for ch in suggestion[1:])
	return "".join(buf)


class NameAllocator:
	"""Allocates unique identifiers within one scope."""

	def __init__(self) -> None:
		self._allocated: Set[str] = set()
		self._tag_to_name: Dict[Hashable, str] = {}

	def new_name(self, suggestion: str, tag: Hashable | None = None) -> str:
		"""
		Return a unique identifier derived from `suggestion` and bind it to `tag`.

		Without a tag the name is reserved but cannot be looked up again.
		"""
		if tag is None:
			tag = uuid.uuid4().hex
		name = to_java_identifier(suggestion)
		while is_keyword(name) or name in self._allocated:
			name += "_"
		if tag in self._tag_to_name:
			raise InvalidArgumentError(
				f"tag '{tag}' cannot be used for both '{self._tag_to_name[tag]}' and '{suggestion}'"
			)
		self._allocated.add(name)
		self._tag_to_name[tag] = name
		return name

	def get(self, tag: Hashable) -> str:
		require_non_null(tag, "tag")
		try:
			return self._tag_to_name[tag]
		except KeyError:
			raise InvalidArgumentError(f"unknown tag: {tag}") from None


__all__ = ["JAVA_KEYWORDS", "NameAllocator", "is_identifier", "is_keyword", "to_java_identifier"]
