# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Method, constructor and lambda parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List, Tuple

from jcomposer.codegen.code_block import CodeBlock
from jcomposer.core.errors import check_argument, require_not_empty
from jcomposer.core.modifiers import Modifier
from jcomposer.core.names import to_java_identifier
from jcomposer.core.type_names import ArrayTypeName, TypeName

from .annotation_spec import AnnotationSpec
from .base import EMPTY_BLOCK, Spec, as_code_block, as_type_name


@dataclass(frozen=True, eq=False)
class ParameterSpec(Spec):
	"""
	A parameter declaration.

	Reserved words are accepted as names; methods rename such parameters
	(`class` becomes `class_`) when they are written, and `$N` references to
	the parameter follow the rename.
	"""

	type: TypeName
	name: str
	modifiers: FrozenSet[Modifier] = frozenset()
	annotations: Tuple[AnnotationSpec, ...] = ()
	javadoc: CodeBlock = EMPTY_BLOCK

	@staticmethod
	def builder(type: TypeName | str, name: str, *modifiers: Modifier) -> "ParameterSpecBuilder":
		return ParameterSpecBuilder(as_type_name(type), name).add_modifiers(*modifiers)

	@staticmethod
	def get(type: TypeName | str, name: str, *modifiers: Modifier) -> "ParameterSpec":
		return ParameterSpec.builder(type, name, *modifiers).build()

	def emit(self, writer, varargs: bool = False) -> None:
		writer.emit_annotations(self.annotations, True)
		writer.emit_modifiers(self.modifiers)
		if varargs:
			check_argument(isinstance(self.type, ArrayTypeName), f"varargs parameter {self.name} is not an array")
		writer.emit_type(self.type, varargs)
		writer.emit(" ")
		writer.emit(writer.resolve_name(self))

	def to_builder(self) -> "ParameterSpecBuilder":
		builder = ParameterSpecBuilder(self.type, self.name)
		builder.modifiers.extend(self.modifiers)
		builder.annotations.extend(self.annotations)
		builder.javadoc = self.javadoc.to_builder()
		return builder


class ParameterSpecBuilder:
	def __init__(self, type: TypeName, name: str) -> None:
		require_not_empty(name, "name")
		check_argument(to_java_identifier(name) == name, f"not a valid name: {name}")
		self.type = type
		self.name = name
		self.modifiers: List[Modifier] = []
		self.annotations: List[AnnotationSpec] = []
		self.javadoc = CodeBlock.builder()

	def add_modifiers(self, *modifiers: Modifier) -> "ParameterSpecBuilder":
		for modifier in modifiers:
			check_argument(modifier is Modifier.FINAL, f"unexpected parameter modifier: {modifier}")
		self.modifiers.extend(modifiers)
		return self

	def add_annotation(self, annotation: AnnotationSpec | TypeName | str) -> "ParameterSpecBuilder":
		if not isinstance(annotation, AnnotationSpec):
			annotation = AnnotationSpec.get(annotation)
		self.annotations.append(annotation)
		return self

	def add_javadoc(self, format: str | CodeBlock, *args: Any) -> "ParameterSpecBuilder":
		self.javadoc.add_code(as_code_block(format, args))
		return self

	def build(self) -> ParameterSpec:
		return ParameterSpec(
			self.type,
			self.name,
			frozenset(self.modifiers),
			tuple(self.annotations),
			self.javadoc.build(),
		)


def javadoc_with_parameters(javadoc: CodeBlock, parameters: Iterable[ParameterSpec]) -> CodeBlock:
	"""`javadoc` followed by an `@param` line for each documented parameter."""
	documented = [p for p in parameters if not p.javadoc.is_empty()]
	if not documented:
		return javadoc
	builder = javadoc.to_builder()
	if not javadoc.is_empty():
		builder.add_format("\n")
	for parameter in documented:
		builder.add_format("@param $N $L", parameter, parameter.javadoc)
	return builder.build()


__all__ = ["ParameterSpec", "ParameterSpecBuilder", "javadoc_with_parameters"]
