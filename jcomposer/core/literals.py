# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Java literal escaping for `$S` and `$C` placeholders.

One-line strings become `"..."`. Strings containing a newline become text
blocks so the generated source keeps the original line structure:

  \"\"\"
  first line
  second line\"\"\"
"""

from __future__ import annotations

_SIMPLE_ESCAPES = {
	"\b": "\\b",
	"\t": "\\t",
	"\n": "\\n",
	"\f": "\\f",
	"\r": "\\r",
	"\\": "\\\\",
}


def _is_iso_control(ch: str) -> bool:
	code = ord(ch)
	return code <= 0x1F or 0x7F <= code <= 0x9F


def character_literal_without_quotes(ch: str) -> str:
	"""Escape a single character for use inside a char or string literal."""
	if ch in _SIMPLE_ESCAPES:
		return _SIMPLE_ESCAPES[ch]
	if ch == "'":
		return "\\'"
	if _is_iso_control(ch):
		return f"\\u{ord(ch):04x}"
	return ch


def character_literal(ch: str) -> str:
	return f"'{character_literal_without_quotes(ch)}'"


def _escape_string_char(ch: str) -> str:
	if ch == "'":
		return "'"
	if ch == '"':
		return '\\"'
	return character_literal_without_quotes(ch)


def string_literal(value: str | None) -> str:
	"""
	Render `value` as a Java string literal (`null` for None).

	The caller-visible indentation of text block lines is applied later by the
	writer, which indents every physical line it emits.
	"""
	if value is None:
		return "null"
	if "\n" not in value:
		return '"' + "".join(_escape_string_char(ch) for ch in value) + '"'
	return _text_block(value)


def _text_block(value: str) -> str:
	lines = value.split("\n")
	out: list[str] = []
	for idx, line in enumerate(lines):
		escaped = "".join(_escape_text_block_char(ch) for ch in line)
		escaped = escaped.replace('"""', '""\\"')
		# Text blocks strip trailing blanks; keep the last one explicitly.
		if escaped.endswith(" "):
			escaped = escaped[:-1] + "\\s"
		if idx == len(lines) - 1 and escaped.endswith('"'):
			escaped = escaped[:-1] + '\\"'
		out.append(escaped)
	return '"""\n' + "\n".join(out) + '"""'


def _escape_text_block_char(ch: str) -> str:
	if ch in ('"', "'"):
		return ch
	return character_literal_without_quotes(ch)


__all__ = ["character_literal", "character_literal_without_quotes", "string_literal"]
