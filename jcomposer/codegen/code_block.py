# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Code fragments built from format strings.

A format string mixes literal text with placeholders, each consuming one
argument unless it is structural:

  $L  literal (nested code blocks and specs are emitted recursively)
  $S  string literal, `null` for None
  $T  type reference, imported by the writer when possible
  $N  identifier of a name or a named spec
  $C  character literal
  $$  a dollar sign
  $>  $<  indent, unindent
  $[  $]  statement start and end; continuation lines get two extra indents
  $W  $Z  wrapping space, zero-width wrap opportunity

Arguments are consumed positionally (`$L`), by 1-based index (`$2L`) or by
name through `add_named` (`$count:L`). The block keeps the parsed parts and
the converted arguments; nothing is rendered until a `CodeWriter` emits it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Iterable, List, Mapping, Tuple

from jcomposer.core.errors import (
	InvalidArgumentError,
	check_argument,
	require_non_null,
	require_not_empty,
)
from jcomposer.core.type_mirror import MirrorKind, type_name_from_mirror
from jcomposer.core.type_names import ClassName, TypeName
from jcomposer.parser.type_parser import parse_type_name

from .debug_output import find_caller

logger = logging.getLogger(__name__)

NO_ARG_PLACEHOLDERS = frozenset("$><[]WZ")
ARG_PLACEHOLDERS = frozenset("LSTNC")
# Internal part carrying a `DebugOutput`; never produced by format parsing.
DEBUG_PART = "$D"

_LOWERCASE = re.compile(r"[a-z]+[\w_]*")
_NAMED_ARGUMENT = re.compile(r"\$(?P<name>[\w_]+):(?P<type>\w)")


@dataclass(frozen=True, eq=False)
class CodeBlock:
	"""
	Immutable fragment of code: parsed format parts plus converted arguments.

	Two blocks are equal when they render to the same text.
	"""

	format_parts: Tuple[str, ...] = ()
	args: Tuple[Any, ...] = ()
	static_imports: FrozenSet[str] = field(default_factory=frozenset)

	@staticmethod
	def builder() -> "CodeBlockBuilder":
		return CodeBlockBuilder()

	@staticmethod
	def of(format: str, *args: Any) -> "CodeBlock":
		return CodeBlockBuilder().add(format, *args).build()

	@staticmethod
	def join(code_blocks: Iterable["CodeBlock"], separator: str, prefix: str = "", suffix: str = "") -> "CodeBlock":
		"""Join blocks with a literal separator; `prefix`/`suffix` wrap the result."""
		builder = CodeBlockBuilder()
		builder.add_format(prefix)
		first = True
		for block in code_blocks:
			if not first:
				builder.add_format(separator)
			builder.add_code(block)
			first = False
		builder.add_format(suffix)
		return builder.build()

	def is_empty(self) -> bool:
		return all(part == DEBUG_PART for part in self.format_parts)

	def to_builder(self) -> "CodeBlockBuilder":
		builder = CodeBlockBuilder()
		builder.format_parts.extend(self.format_parts)
		builder.args.extend(self.args)
		builder.static_imports.update(self.static_imports)
		return builder

	def referenced_types(self) -> List[TypeName]:
		"""Types referenced through `$T`, including those of nested blocks."""
		found: List[TypeName] = []
		idx = 0
		for part in self.format_parts:
			if not consumes_argument(part):
				continue
			arg = self.args[idx]
			idx += 1
			if part == "$T":
				found.append(arg)
			elif isinstance(arg, CodeBlock):
				found.extend(arg.referenced_types())
		return found

	def emit(self, writer) -> None:
		writer.emit_code(self)

	def __str__(self) -> str:
		from .render import render_standalone

		return render_standalone(self)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, CodeBlock):
			return NotImplemented
		return self is other or str(self) == str(other)

	def __hash__(self) -> int:
		return hash(str(self))


class CodeBlockBuilder:
	"""
	Mutable builder for `CodeBlock`.

	Every public `add*` call records the caller's source position; the writer
	prints it only when `ComposerConfig.add_debug_output` is set.
	"""

	def __init__(self) -> None:
		self.format_parts: List[str] = []
		self.args: List[Any] = []
		self.static_imports: set[str] = set()

	def is_empty(self) -> bool:
		return all(part == DEBUG_PART for part in self.format_parts)

	def add(self, format: str | CodeBlock, *args: Any) -> "CodeBlockBuilder":
		"""Append a format string with its arguments, or a whole `CodeBlock`."""

		def action() -> None:
			if isinstance(format, CodeBlock):
				check_argument(not args, "arguments are not allowed when adding a code block")
				self.add_code(format)
			else:
				self._add_format(format, args)

		return self._recorded(action)

	def add_named(self, format: str, arguments: Mapping[str, Any]) -> "CodeBlockBuilder":
		"""Append a format string using `$name:X` placeholders."""
		return self._recorded(lambda: self._add_named(format, arguments))

	def add_format(self, format: str, *args: Any) -> "CodeBlockBuilder":
		"""Like `add`, without recording the caller position."""
		return self._recorded(lambda: self._add_format(format, args), debug=False)

	def _add_named(self, format: str, arguments: Mapping[str, Any]) -> None:
		require_non_null(format, "format")
		require_non_null(arguments, "arguments")
		for name in arguments:
			check_argument(
				_LOWERCASE.fullmatch(name) is not None,
				f"argument '{name}' must start with a lowercase character",
			)
		pos = 0
		length = len(format)
		while pos < length:
			next_pos = format.find("$", pos)
			if next_pos == -1:
				self.format_parts.append(format[pos:])
				break
			if pos != next_pos:
				self.format_parts.append(format[pos:next_pos])
				pos = next_pos
			match = _NAMED_ARGUMENT.match(format, pos)
			if match is not None:
				name = match.group("name")
				if name not in arguments:
					raise InvalidArgumentError(f"missing named argument for ${name}")
				placeholder = match.group("type")
				self._add_argument(format, placeholder, arguments[name])
				self.format_parts.append("$" + placeholder)
				pos = match.end()
				continue
			if pos >= length - 1:
				raise InvalidArgumentError(f"dangling $ at end of '{format}'")
			if format[pos + 1] not in NO_ARG_PLACEHOLDERS:
				raise InvalidArgumentError(f"unknown format ${format[pos + 1]} at {pos + 1} in '{format}'")
			self.format_parts.append(format[pos : pos + 2])
			pos += 2

	def _add_format(self, format: str, args: Tuple[Any, ...]) -> None:
		require_non_null(format, "format")
		has_relative = False
		has_indexed = False
		relative_count = 0
		used = [False] * len(args)
		pos = 0
		length = len(format)
		while pos < length:
			if format[pos] != "$":
				next_pos = format.find("$", pos + 1)
				if next_pos == -1:
					next_pos = length
				self.format_parts.append(format[pos:next_pos])
				pos = next_pos
				continue

			pos += 1
			index_start = pos
			while True:
				if pos >= length:
					raise InvalidArgumentError(f"dangling format characters in '{format}'")
				ch = format[pos]
				pos += 1
				if not "0" <= ch <= "9":
					break
			index_end = pos - 1

			if ch in NO_ARG_PLACEHOLDERS:
				if index_start != index_end:
					raise InvalidArgumentError("$$, $>, $<, $[, $], $W, and $Z may not have an index")
				self.format_parts.append("$" + ch)
				continue

			if index_start < index_end:
				index = int(format[index_start:index_end]) - 1
				has_indexed = True
			else:
				index = relative_count
				relative_count += 1
				has_relative = True
			if has_indexed and has_relative:
				raise InvalidArgumentError("cannot mix indexed and positional parameters")
			if not 0 <= index < len(args):
				raise InvalidArgumentError(
					f"index {index + 1} for '{format[index_start - 1:index_end + 1]}' not in range "
					f"(received {len(args)} arguments)"
				)
			self._add_argument(format, ch, args[index])
			used[index] = True
			self.format_parts.append("$" + ch)

		if not all(used):
			unused = ", ".join(f"${i + 1}" for i, flag in enumerate(used) if not flag)
			logger.debug("unused format arguments %s in %r", unused, format)

	def add_code(self, code_block: CodeBlock) -> "CodeBlockBuilder":
		require_non_null(code_block, "code_block")
		self.format_parts.extend(code_block.format_parts)
		self.args.extend(code_block.args)
		self.static_imports.update(code_block.static_imports)
		return self

	def add_statement(self, format: str | CodeBlock, *args: Any) -> "CodeBlockBuilder":
		"""`format` as one statement: `$[`, the code, `;` and a newline, `$]`."""
		def action() -> None:
			self.add_format("$[")
			if isinstance(format, CodeBlock):
				self.add_format("$L", format)
				self.static_imports.update(format.static_imports)
			else:
				self.add_format(format, *args)
			self.add_format(";\n$]")
		return self._recorded(action)

	def add_comment(self, format: str, *args: Any) -> "CodeBlockBuilder":
		def action() -> None:
			self.add_format("// ")
			self.add_format(format, *args)
			self.add_format("\n")
		return self._recorded(action)

	def begin_control_flow(self, control_flow: str, *args: Any) -> "CodeBlockBuilder":
		"""`control_flow {` followed by an indent, e.g. `if ($L)`."""
		def action() -> None:
			require_non_null(control_flow, "control_flow")
			if control_flow.strip():
				self.add_format(control_flow, *args)
				if not control_flow.endswith("\n"):
					self.add_format(" ")
			self.add_format("{\n")
			self.indent()
		return self._recorded(action)

	def next_control_flow(self, control_flow: str, *args: Any) -> "CodeBlockBuilder":
		"""Close the current block and open the next, e.g. `} else {`."""
		def action() -> None:
			require_non_null(control_flow, "control_flow")
			self.unindent()
			self.add_format("}")
			if not control_flow.startswith("\n"):
				self.add_format(" ")
			self.add_format(control_flow, *args)
			if not control_flow.endswith("\n"):
				self.add_format(" ")
			self.add_format("{\n")
			self.indent()
		return self._recorded(action)

	def end_control_flow(self, control_flow: str | None = None, *args: Any) -> "CodeBlockBuilder":
		"""Close the block; with `control_flow` emits `} while (...);`."""
		def action() -> None:
			self.unindent()
			if control_flow is None:
				self.add_format("}\n")
			else:
				self.add_format("} " + control_flow + ";\n", *args)
		return self._recorded(action)

	def indent(self) -> "CodeBlockBuilder":
		self.format_parts.append("$>")
		return self

	def unindent(self) -> "CodeBlockBuilder":
		self.format_parts.append("$<")
		return self

	def add_static_import(self, class_name: ClassName, *names: str) -> "CodeBlockBuilder":
		"""Register `import static class_name.name;` for each name (`*` allowed)."""
		require_non_null(class_name, "class_name")
		require_not_empty(names, "names")
		for name in names:
			require_not_empty(name, "name")
			self.static_imports.add(f"{class_name.canonical_name}.{name}")
		return self

	def clear(self) -> "CodeBlockBuilder":
		self.format_parts.clear()
		self.args.clear()
		return self

	def build(self) -> CodeBlock:
		return CodeBlock(tuple(self.format_parts), tuple(self.args), frozenset(self.static_imports))

	def _recorded(self, action: Callable[[], None], debug: bool = True) -> "CodeBlockBuilder":
		"""
		Run one public `add*` call. A rejected call leaves the builder as it
		was; an accepted one is preceded by the caller position.
		"""
		position = find_caller() if debug else None
		parts_mark = len(self.format_parts)
		args_mark = len(self.args)
		imports = set(self.static_imports)
		try:
			action()
		except Exception:
			del self.format_parts[parts_mark:]
			del self.args[args_mark:]
			self.static_imports.intersection_update(imports)
			raise
		if position is not None:
			self.format_parts.insert(parts_mark, DEBUG_PART)
			self.args.insert(args_mark, position)
		return self

	def _add_argument(self, format: str, placeholder: str, arg: Any) -> None:
		if placeholder == "L":
			value = arg
		elif placeholder == "S":
			value = None if arg is None else str(arg)
		elif placeholder == "T":
			value = _arg_to_type(arg)
		elif placeholder == "N":
			value = _arg_to_name(arg)
		elif placeholder == "C":
			value = _arg_to_char(arg)
		else:
			raise InvalidArgumentError(f"invalid format string: '{format}'")
		self.args.append(value)


def _arg_to_type(arg: Any) -> TypeName:
	require_non_null(arg, "type")
	if isinstance(arg, TypeName):
		return arg
	if isinstance(arg, str):
		return parse_type_name(arg)
	if isinstance(getattr(arg, "kind", None), MirrorKind):
		return type_name_from_mirror(arg)
	raise InvalidArgumentError(f"expected type but was {arg!r}")


def _arg_to_name(arg: Any) -> Any:
	"""Strings pass through; specs are kept so the writer can rename them."""
	require_non_null(arg, "name")
	if isinstance(arg, str):
		require_not_empty(arg, "name")
		return arg
	if isinstance(getattr(arg, "name", None), str):
		return arg
	raise InvalidArgumentError(f"expected name but was {arg!r}")


def _arg_to_char(arg: Any) -> str:
	require_non_null(arg, "char")
	if isinstance(arg, str) and len(arg) == 1:
		return arg
	raise InvalidArgumentError(f"expected a single character but was {arg!r}")


def consumes_argument(part: str) -> bool:
	"""True for format parts that have an entry in `CodeBlock.args`."""
	return part == DEBUG_PART or (len(part) == 2 and part[0] == "$" and part[1] in ARG_PLACEHOLDERS)


__all__ = ["CodeBlock", "CodeBlockBuilder", "DEBUG_PART", "consumes_argument"]
