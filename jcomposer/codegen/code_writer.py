# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Import-aware writer for code blocks and specs.

A `CodeWriter` is owned by a single render. It tracks the indentation level,
the open type declarations, the current package and the imports decided for
the file, and writes everything through a `LineWrapper`.

Rendering a file takes two writers. The first one writes into a discarded
sink and only collects the types that could be imported
(`suggested_imports`); the second one receives those imports and writes the
actual text. `render.py` drives both passes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Iterable, List, Mapping, Protocol, Set, Tuple, runtime_checkable

from jcomposer.core.config import DEFAULT_CONFIG, ComposerConfig
from jcomposer.core.errors import ComposerStateError, check_state, require_non_null
from jcomposer.core.literals import character_literal, string_literal
from jcomposer.core.modifiers import Modifier, sorted_modifiers
from jcomposer.core.type_names import (
	ArrayTypeName,
	ClassName,
	ErrorTypeName,
	ParameterizedTypeName,
	PrimitiveTypeName,
	TypeName,
	TypeNameKind,
	TypeVariableName,
	WildcardTypeName,
)

from .code_block import DEBUG_PART, CodeBlock
from .line_wrapper import LineWrapper, TextSink

logger = logging.getLogger(__name__)

JAVA_LANG = "java.lang"


@runtime_checkable
class Emittable(Protocol):
	"""Anything that can write itself to a `CodeWriter` (code blocks, specs)."""

	def emit(self, writer: "CodeWriter") -> None:
		...


class CommentType(Enum):
	NONE = auto()
	JAVADOC = auto()
	BLOCK = auto()
	LINE = auto()


@dataclass(frozen=True)
class TypeScope:
	"""A type declaration being emitted: its name and its member types' names."""

	name: str
	nested_names: Tuple[str, ...] = ()


class NullSink:
	"""Text sink that drops everything; used by the import collecting pass."""

	def write(self, text: str) -> int:
		return len(text)


class CodeWriter:
	def __init__(
		self,
		out: TextSink,
		config: ComposerConfig | None = None,
		imported_types: Mapping[str, ClassName] | None = None,
		static_imports: Iterable[str] = (),
	) -> None:
		self.config = config if config is not None else DEFAULT_CONFIG
		self._indent = self.config.indent
		self._wrapper = LineWrapper(require_non_null(out, "out"), self._indent, self.config.column_limit)
		self._imported_types: Dict[str, ClassName] = dict(imported_types or {})
		self._static_imports = frozenset(static_imports)
		self._static_import_class_names = {s.rpartition(".")[0] for s in self._static_imports}
		# Filled while writing; read by the import collecting pass.
		self._importable_types: Dict[str, ClassName] = {}
		self._referenced_names: Set[str] = set()
		self._package_name: str | None = None
		self._type_stack: List[TypeScope] = []
		self._name_scopes: List[Dict[str, str]] = []
		self._indent_level = 0
		# -1 outside a statement, otherwise the number of lines written in it.
		self._statement_line = -1
		self._trailing_newline = False
		self._comment = CommentType.NONE

	def __enter__(self) -> "CodeWriter":
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.close()

	def close(self) -> None:
		self._wrapper.close()

	# -- text -----------------------------------------------------------------

	def emit(self, text: str) -> "CodeWriter":
		"""
		Write plain text (no placeholders). Every line after a newline is
		indented, and prefixed while a comment is open.
		"""
		if not text:
			return self
		first = True
		for line in text.split("\n"):
			if not first:
				if self._comment is not CommentType.NONE and self._trailing_newline:
					self._emit_indentation()
					self._wrapper.append("//" if self._comment is CommentType.LINE else " *")
				self._wrapper.append("\n")
				self._trailing_newline = True
				if self._statement_line != -1:
					if self._statement_line == 0:
						# Continuation lines of a statement.
						self.indent(2)
					self._statement_line += 1
			first = False
			if not line:
				continue
			if self._trailing_newline:
				self._emit_indentation()
				if self._comment in (CommentType.BLOCK, CommentType.JAVADOC):
					self._wrapper.append(" * ")
				elif self._comment is CommentType.LINE:
					self._wrapper.append("// ")
			self._wrapper.append(line)
			self._trailing_newline = False
		return self

	def emit_format(self, format: str, *args: Any) -> "CodeWriter":
		return self.emit_code(CodeBlock.builder().add_format(format, *args).build())

	def emit_code(self, code_block: CodeBlock) -> "CodeWriter":
		require_non_null(code_block, "code_block")
		parts = code_block.format_parts
		args = code_block.args
		arg_index = 0
		# A `$T` held back because the next literal may name a static import.
		deferred: ClassName | None = None
		for idx, part in enumerate(parts):
			if part == "$L":
				self._emit_literal(args[arg_index])
				arg_index += 1
			elif part == "$N":
				self.emit(self.resolve_name(args[arg_index]))
				arg_index += 1
			elif part == "$S":
				self.emit(string_literal(args[arg_index]))
				arg_index += 1
			elif part == "$C":
				self.emit(character_literal(args[arg_index]))
				arg_index += 1
			elif part == "$T":
				type_name = args[arg_index]
				arg_index += 1
				deferred = None
				if (
					isinstance(type_name, ClassName)
					and idx + 1 < len(parts)
					and not parts[idx + 1].startswith("$")
					and type_name.canonical_name in self._static_import_class_names
				):
					deferred = type_name
				if deferred is None:
					self.emit_type(type_name)
			elif part == DEBUG_PART:
				if self.config.add_debug_output:
					self.emit(args[arg_index].as_comment())
				arg_index += 1
			elif part == "$$":
				self.emit("$")
			elif part == "$>":
				self.indent()
			elif part == "$<":
				self.unindent()
			elif part == "$[":
				check_state(self._statement_line == -1, "statement enter $[ followed by statement enter $[")
				self._statement_line = 0
			elif part == "$]":
				check_state(self._statement_line != -1, "statement exit $] has no matching statement enter $[")
				if self._statement_line > 0:
					self.unindent(2)
				self._statement_line = -1
			elif part == "$W":
				self._wrapper.wrapping_space(self._indent_level + 2)
			elif part == "$Z":
				self._wrapper.zero_width_space(self._indent_level + 2)
			else:
				if deferred is not None:
					if part.startswith(".") and self._emit_static_import_member(deferred.canonical_name, part):
						deferred = None
						continue
					self.emit_type(deferred)
					deferred = None
				self.emit(part)
		return self

	def emit_wrapping_space(self) -> "CodeWriter":
		self._wrapper.wrapping_space(self._indent_level + 2)
		return self

	def _emit_literal(self, value: Any) -> None:
		if value is None:
			self.emit("null")
		elif isinstance(value, bool):
			self.emit("true" if value else "false")
		elif isinstance(value, Emittable):
			value.emit(self)
		else:
			self.emit(str(value))

	def _emit_indentation(self) -> None:
		for _ in range(self._indent_level):
			self._wrapper.append(self._indent)

	def _emit_static_import_member(self, canonical: str, part: str) -> bool:
		rest = part[1:]
		member = _leading_identifier(rest)
		if not member:
			return False
		if f"{canonical}.{member}" in self._static_imports or f"{canonical}.*" in self._static_imports:
			self.emit(rest)
			return True
		return False

	# -- types ----------------------------------------------------------------

	def emit_type(self, type_name: TypeName, varargs: bool = False) -> "CodeWriter":
		"""Write a type usage; `varargs` prints the outermost `[]` as `...`."""
		kind = type_name.kind
		if kind is TypeNameKind.PRIMITIVE:
			assert isinstance(type_name, PrimitiveTypeName)
			self.emit(type_name.keyword)
		elif kind is TypeNameKind.CLASS:
			assert isinstance(type_name, ClassName)
			self.emit(self.lookup_name(type_name))
		elif kind is TypeNameKind.PARAMETERIZED:
			assert isinstance(type_name, ParameterizedTypeName)
			if type_name.enclosing is not None:
				self.emit_type(type_name.enclosing)
				self.emit(".")
				self.emit(type_name.raw_type.simple_name)
			else:
				self.emit_type(type_name.raw_type)
			if type_name.type_arguments:
				self.emit("<")
				for idx, arg in enumerate(type_name.type_arguments):
					if idx:
						self.emit(", ")
					self.emit_type(arg)
				self.emit(">")
		elif kind is TypeNameKind.ARRAY:
			assert isinstance(type_name, ArrayTypeName)
			self.emit_type(type_name.component_type)
			self.emit("..." if varargs else "[]")
		elif kind is TypeNameKind.TYPE_VARIABLE:
			assert isinstance(type_name, TypeVariableName)
			self.emit(type_name.name)
		elif kind is TypeNameKind.WILDCARD:
			assert isinstance(type_name, WildcardTypeName)
			if type_name.lower_bound is not None:
				self.emit("? super ")
				self.emit_type(type_name.lower_bound)
			elif type_name.upper_bound is not None:
				self.emit("? extends ")
				self.emit_type(type_name.upper_bound)
			else:
				self.emit("?")
		elif kind is TypeNameKind.ERROR:
			assert isinstance(type_name, ErrorTypeName)
			self.emit(".".join(type_name.segments))
		else:
			raise AssertionError(f"unhandled type kind {kind}")
		return self

	def lookup_name(self, class_name: ClassName) -> str:
		"""
		Shortest name for `class_name` that is unambiguous at this point.

		Walks from the class outwards through its enclosing classes; the first
		one whose simple name resolves to itself (a type being declared, a
		member type of one, or an imported type) anchors a partially qualified
		name. A simple name bound to a different type forces the canonical
		name. Otherwise the type is recorded as importable.
		"""
		name_resolved = False
		current: ClassName | None = class_name
		while current is not None:
			resolved = self._resolve(current.simple_name)
			name_resolved = resolved is not None
			if resolved is not None and resolved == current:
				suffix_offset = len(current.simple_names()) - 1
				return ".".join(class_name.simple_names()[suffix_offset:])
			current = current.enclosing

		if name_resolved:
			logger.debug("simple name of %s is taken; using the canonical name", class_name.canonical_name)
			return class_name.canonical_name

		if (self._package_name or "") == class_name.package_name:
			self._referenced_names.add(class_name.top_level_class_name().simple_name)
			return ".".join(class_name.simple_names())

		# Types mentioned only in javadoc are never imported.
		if self._comment is not CommentType.JAVADOC:
			self._importable_type(class_name)
		return class_name.canonical_name

	def _importable_type(self, class_name: ClassName) -> None:
		if not class_name.package_name:
			return
		top_level = class_name.top_level_class_name()
		self._importable_types.setdefault(top_level.simple_name, top_level)

	def _resolve(self, simple_name: str) -> ClassName | None:
		for depth in range(len(self._type_stack) - 1, -1, -1):
			if simple_name in self._type_stack[depth].nested_names:
				return self._stack_class_name(depth, simple_name)
		if self._type_stack and self._type_stack[0].name == simple_name:
			return ClassName(self._package_name or "", simple_name)
		return self._imported_types.get(simple_name)

	def _stack_class_name(self, depth: int, simple_name: str) -> ClassName:
		name = ClassName(self._package_name or "", self._type_stack[0].name)
		for scope in self._type_stack[1 : depth + 1]:
			name = name.nested_class(scope.name)
		return name.nested_class(simple_name)

	def emit_type_variables(self, type_variables: Iterable[TypeVariableName]) -> "CodeWriter":
		"""Declaration site: `<T extends Comparable<T>, U>`."""
		type_variables = list(type_variables)
		if not type_variables:
			return self
		self.emit("<")
		for idx, var in enumerate(type_variables):
			if idx:
				self.emit(", ")
			self.emit(var.name)
			for bound_idx, bound in enumerate(var.explicit_bounds()):
				self.emit(" extends " if bound_idx == 0 else " & ")
				self.emit_type(bound)
		self.emit(">")
		return self

	# -- declarations ---------------------------------------------------------

	def emit_annotations(self, annotations: Iterable[Emittable], inline: bool) -> "CodeWriter":
		for annotation in annotations:
			annotation.emit(self, inline)  # type: ignore[call-arg]
			self.emit(" " if inline else "\n")
		return self

	def emit_modifiers(self, modifiers: Iterable[Modifier], implicit_modifiers: Iterable[Modifier] = ()) -> "CodeWriter":
		implicit = set(implicit_modifiers)
		for modifier in sorted_modifiers(modifiers):
			if modifier not in implicit:
				self.emit(modifier.value)
				self.emit(" ")
		return self

	def emit_javadoc(self, code_block: CodeBlock) -> "CodeWriter":
		if code_block.is_empty():
			return self
		self.emit("/**\n")
		self._comment = CommentType.JAVADOC
		try:
			self.emit_code(code_block)
		finally:
			self._comment = CommentType.NONE
		self.emit(" */\n")
		return self

	def emit_block_comment(self, code_block: CodeBlock) -> "CodeWriter":
		self.emit("/*\n")
		self._trailing_newline = True
		self._comment = CommentType.BLOCK
		try:
			self.emit_code(code_block)
			self.emit("\n")
		finally:
			self._comment = CommentType.NONE
		self.emit(" */\n")
		return self

	def emit_line_comment(self, code_block: CodeBlock) -> "CodeWriter":
		self._trailing_newline = True
		self._comment = CommentType.LINE
		try:
			self.emit_code(code_block)
			self.emit("\n")
		finally:
			self._comment = CommentType.NONE
		return self

	def emit_imports(self) -> "CodeWriter":
		"""
		Write the import header: regular imports and static imports, each
		block sorted and followed by a blank line.
		"""
		if self.config.case_sensitive_imports:
			key = str
		else:
			key = str.lower  # type: ignore[assignment]
		regular = sorted(
			(
				c.canonical_name
				for c in self._imported_types.values()
				if not (self.config.skip_default_imports and c.package_name == JAVA_LANG)
			),
			key=key,
		)
		static = sorted(self._static_imports, key=key)
		blocks = [
			[f"import {name};\n" for name in regular],
			[f"import static {name};\n" for name in static],
		]
		if self.config.static_imports_first:
			blocks.reverse()
		for block in blocks:
			if block:
				for line in block:
					self.emit(line)
				self.emit("\n")
		return self

	# -- state ----------------------------------------------------------------

	def indent(self, levels: int = 1) -> "CodeWriter":
		self._indent_level += levels
		return self

	def unindent(self, levels: int = 1) -> "CodeWriter":
		if self._indent_level - levels < 0:
			raise ComposerStateError(f"cannot unindent {levels} from {self._indent_level}")
		self._indent_level -= levels
		return self

	def push_package(self, package_name: str) -> "CodeWriter":
		check_state(self._package_name is None, f"package already set: {self._package_name}")
		self._package_name = require_non_null(package_name, "package_name")
		return self

	def pop_package(self) -> "CodeWriter":
		check_state(self._package_name is not None, "package not set")
		self._package_name = None
		return self

	def push_type(self, scope: TypeScope) -> "CodeWriter":
		self._type_stack.append(scope)
		return self

	def pop_type(self) -> "CodeWriter":
		check_state(bool(self._type_stack), "no type to pop")
		self._type_stack.pop()
		return self

	def push_names(self, names: Mapping[str, str]) -> "CodeWriter":
		"""Open a name scope mapping declared parameter names to the identifiers written for them."""
		self._name_scopes.append(dict(names))
		return self

	def pop_names(self) -> "CodeWriter":
		check_state(bool(self._name_scopes), "no name scope to pop")
		self._name_scopes.pop()
		return self

	def resolve_name(self, value: Any) -> str:
		"""
		Identifier for a `$N` argument, a string or a named spec. A name that
		belongs to a renamed parameter in an open scope follows the rename.
		"""
		name = value if isinstance(value, str) else value.name
		for scope in reversed(self._name_scopes):
			renamed = scope.get(name)
			if renamed is not None:
				return renamed
		return name

	def suggested_imports(self) -> Dict[str, ClassName]:
		"""Importable types found so far, minus names taken by same-package types."""
		return {
			name: class_name
			for name, class_name in self._importable_types.items()
			if name not in self._referenced_names
		}

	def set_statement_line(self, line: int) -> int:
		"""Replace the statement line counter and return the previous one."""
		previous = self._statement_line
		self._statement_line = line
		return previous


def _leading_identifier(text: str) -> str:
	if not text or not (text[0].isalpha() or text[0] in "_$"):
		return ""
	end = 1
	while end < len(text) and (text[end].isalnum() or text[end] in "_$"):
		end += 1
	return text[:end]


__all__ = ["CodeWriter", "CommentType", "Emittable", "NullSink", "TypeScope"]
