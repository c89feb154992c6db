# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Bridge from a host compiler's type mirrors to `TypeName` values.

Host integrations (an annotation-processing shim, a class-file reader, test
fakes) expose their types through the small protocols below. Only the
attributes relevant to a mirror's `kind` are read.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Protocol, Sequence

from .errors import InvalidArgumentError, require_non_null
from .type_names import (
	PRIMITIVES,
	ArrayTypeName,
	ClassName,
	ErrorTypeName,
	ParameterizedTypeName,
	TypeName,
	TypeVariableName,
	WildcardTypeName,
)


class MirrorKind(Enum):
	BOOLEAN = auto()
	BYTE = auto()
	SHORT = auto()
	INT = auto()
	LONG = auto()
	CHAR = auto()
	FLOAT = auto()
	DOUBLE = auto()
	VOID = auto()
	# No type at all, e.g. the superclass of java.lang.Object.
	NONE = auto()
	DECLARED = auto()
	ERROR = auto()
	ARRAY = auto()
	TYPEVAR = auto()
	WILDCARD = auto()


class TypeMirror(Protocol):
	kind: MirrorKind


class DeclaredMirror(TypeMirror, Protocol):
	"""A declared type; `enclosing_type` is set for inner classes of generic types."""

	package_name: str
	simple_names: Sequence[str]
	type_arguments: Sequence[TypeMirror]
	enclosing_type: TypeMirror | None


class ErrorMirror(TypeMirror, Protocol):
	simple_names: Sequence[str]


class ArrayMirror(TypeMirror, Protocol):
	component_type: TypeMirror


class TypeVariableMirror(TypeMirror, Protocol):
	"""
	A type variable. `element` identifies the declaring parameter and is used
	as the cache key that breaks cycles through recursive bounds.
	"""

	name: str
	bounds: Sequence[TypeMirror]
	element: object


class WildcardMirror(TypeMirror, Protocol):
	extends_bound: TypeMirror | None
	super_bound: TypeMirror | None


def type_name_from_mirror(mirror: TypeMirror) -> TypeName:
	"""Convert a host type mirror into the equivalent `TypeName`."""
	require_non_null(mirror, "mirror")
	return _convert(mirror, {})


def _convert(mirror: TypeMirror, type_variables: Dict[object, TypeVariableName]) -> TypeName:
	kind = mirror.kind
	if kind is MirrorKind.NONE:
		raise InvalidArgumentError("a NONE mirror has no type name")
	if kind is MirrorKind.DECLARED:
		return _declared(mirror, type_variables)  # type: ignore[arg-type]
	if kind is MirrorKind.ERROR:
		return ErrorTypeName(tuple(mirror.simple_names))  # type: ignore[attr-defined]
	if kind is MirrorKind.ARRAY:
		return ArrayTypeName(_convert(mirror.component_type, type_variables))  # type: ignore[attr-defined]
	if kind is MirrorKind.TYPEVAR:
		return _type_variable(mirror, type_variables)  # type: ignore[arg-type]
	if kind is MirrorKind.WILDCARD:
		return _wildcard(mirror, type_variables)  # type: ignore[arg-type]
	return PRIMITIVES[kind.name.lower()]


def _declared(mirror: DeclaredMirror, type_variables: Dict[object, TypeVariableName]) -> TypeName:
	raw = ClassName.get(mirror.package_name, *mirror.simple_names)
	args = tuple(_convert(arg, type_variables) for arg in mirror.type_arguments)
	enclosing = mirror.enclosing_type
	if enclosing is not None and enclosing.kind is MirrorKind.DECLARED:
		outer = _convert(enclosing, type_variables)
		if isinstance(outer, ParameterizedTypeName):
			return outer.nested_class(raw.simple_name, args)
	if not args:
		return raw
	return ParameterizedTypeName(raw, args)


def _type_variable(mirror: TypeVariableMirror, type_variables: Dict[object, TypeVariableName]) -> TypeName:
	key = mirror.element
	cached = type_variables.get(key)
	if cached is not None:
		return cached
	bounds: list[TypeName] = []
	# Register before converting bounds; `T extends Comparable<T>` resolves
	# the inner `T` to this same (still filling) instance.
	var = TypeVariableName.deferred(mirror.name, lambda: bounds)
	type_variables[key] = var
	for bound in mirror.bounds:
		bounds.append(_convert(bound, type_variables))
	return var


def _wildcard(mirror: WildcardMirror, type_variables: Dict[object, TypeVariableName]) -> TypeName:
	if mirror.extends_bound is not None:
		return WildcardTypeName.subtype_of(_convert(mirror.extends_bound, type_variables))
	if mirror.super_bound is not None:
		return WildcardTypeName.supertype_of(_convert(mirror.super_bound, type_variables))
	return WildcardTypeName()


__all__ = [
	"ArrayMirror",
	"DeclaredMirror",
	"ErrorMirror",
	"MirrorKind",
	"TypeMirror",
	"TypeVariableMirror",
	"WildcardMirror",
	"type_name_from_mirror",
]
