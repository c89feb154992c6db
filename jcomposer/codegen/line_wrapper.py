# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Column-limited line wrapping.

Text is written through unchanged until a wrap opportunity is registered.
From then on the text up to the next opportunity (or newline) is held back
until it is known whether the pending opportunity renders as its flat form
(a space, or nothing) or as a newline plus continuation indent.

Use the wrapper as a context manager so the held-back text is flushed on
every exit path:

  with LineWrapper(out, "  ", 100) as wrapper:
    wrapper.append("int x =")
    wrapper.wrapping_space(2)
    wrapper.append("42;")
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol

from jcomposer.core.errors import ComposerStateError, check_argument, require_non_null


class TextSink(Protocol):
	def write(self, text: str) -> object:
		...


class FlushType(Enum):
	"""How the pending wrap opportunity is rendered when flushed."""

	EMPTY = auto()
	SPACE = auto()
	WRAP = auto()


class LineWrapper:
	def __init__(self, out: TextSink, indent: str, column_limit: int) -> None:
		self._out = require_non_null(out, "out")
		self._indent = require_non_null(indent, "indent")
		check_argument(column_limit > 0, f"column_limit is 0 or negative: {column_limit}")
		self._column_limit = column_limit
		# Text held back after a wrap opportunity.
		self._buffer: list[str] = []
		self._buffer_len = 0
		self._column = 0
		self._indent_level = -1
		self._next_flush: FlushType | None = None
		self._closed = False

	def __enter__(self) -> "LineWrapper":
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	def column(self) -> int:
		return self._column

	def append(self, text: str) -> None:
		"""Emit `text`, which may contain newlines but never wraps internally."""
		self._check_open()
		if not text:
			return
		if self._next_flush is not None:
			next_newline = text.find("\n")
			if next_newline == -1 and self._column + len(text) <= self._column_limit:
				self._buffer.append(text)
				self._buffer_len += len(text)
				self._column += len(text)
				return
			# Wrap if the first line of `text` would not fit; text without a
			# newline only gets here when it does not fit.
			wrap = next_newline == -1 or self._column + next_newline > self._column_limit
			self._flush(FlushType.WRAP if wrap else self._next_flush)

		self._out.write(text)
		last_newline = text.rfind("\n")
		if last_newline != -1:
			self._column = len(text) - last_newline - 1
		else:
			self._column += len(text)

	def wrapping_space(self, indent_level: int) -> None:
		"""A space, or a newline followed by `indent_level` indents."""
		self._check_open()
		if self._next_flush is not None:
			self._flush(self._next_flush)
		# Account for the space now; a wrap recomputes the column.
		self._column += 1
		self._next_flush = FlushType.SPACE
		self._indent_level = indent_level

	def zero_width_space(self, indent_level: int) -> None:
		"""Nothing, or a newline followed by `indent_level` indents."""
		self._check_open()
		if self._column == 0:
			return
		if self._next_flush is not None:
			self._flush(self._next_flush)
		self._next_flush = FlushType.EMPTY
		self._indent_level = indent_level

	def close(self) -> None:
		"""Flush any held-back text. Closing twice is a no-op."""
		if self._closed:
			return
		if self._next_flush is not None:
			self._flush(self._next_flush)
		self._closed = True

	def _check_open(self) -> None:
		if self._closed:
			raise ComposerStateError("line wrapper is closed")

	def _flush(self, flush_type: FlushType) -> None:
		if flush_type is FlushType.WRAP:
			self._out.write("\n")
			for _ in range(self._indent_level):
				self._out.write(self._indent)
			self._column = self._indent_level * len(self._indent) + self._buffer_len
		elif flush_type is FlushType.SPACE:
			self._out.write(" ")
		elif flush_type is not FlushType.EMPTY:
			raise AssertionError(f"unhandled flush type {flush_type}")
		self._out.write("".join(self._buffer))
		self._buffer.clear()
		self._buffer_len = 0
		self._indent_level = -1
		self._next_flush = None


__all__ = ["FlushType", "LineWrapper", "TextSink"]
