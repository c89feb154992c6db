# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Immutable model of Java type usages.

The set of concrete classes is closed; consumers dispatch on `TypeName.kind`
(a `TypeNameKind`) and handle every member. All values are hashable and
compare structurally, so they can be shared freely between renders.

`str()` renders a type on its own: fully qualified, without imports. The
writer performs the import-aware rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, ClassVar, Dict, Iterable, List, Sequence, Tuple

from .errors import (
	InvalidArgumentError,
	UnsupportedOperationError,
	check_argument,
	require_non_null,
	require_not_empty,
)


class TypeNameKind(Enum):
	PRIMITIVE = auto()
	CLASS = auto()
	PARAMETERIZED = auto()
	ARRAY = auto()
	TYPE_VARIABLE = auto()
	WILDCARD = auto()
	ERROR = auto()


class TypeName:
	"""Base of all type references. Never instantiated directly."""

	kind: ClassVar[TypeNameKind]

	def is_primitive(self) -> bool:
		"""True for the eight value primitives; `void` is not a value type."""
		return self.kind is TypeNameKind.PRIMITIVE and self != VOID

	def is_boxed_primitive(self) -> bool:
		return self in _UNBOXED

	def box(self) -> "TypeName":
		"""Primitive to wrapper; every reference type boxes to itself."""
		if self.kind is TypeNameKind.PRIMITIVE:
			return _BOXED[self]
		return self

	def unbox(self) -> "TypeName":
		"""Wrapper to primitive; primitives unbox to themselves."""
		unboxed = unbox_or_none(self)
		if unboxed is None:
			raise UnsupportedOperationError(f"cannot unbox {self}: not a boxed primitive type")
		return unboxed

	def __str__(self) -> str:
		return _standalone(self)

	@staticmethod
	def from_descriptor(descriptor: str) -> "TypeName":
		"""
		Build a type from a JVM field descriptor such as `I`, `[[J` or
		`Ljava/util/Map$Entry;`.
		"""
		require_not_empty(descriptor, "descriptor")
		ty, end = _parse_descriptor(descriptor, 0)
		if end != len(descriptor):
			raise InvalidArgumentError(f"trailing characters in descriptor: {descriptor!r}")
		return ty


@dataclass(frozen=True)
class PrimitiveTypeName(TypeName):
	keyword: str

	kind: ClassVar[TypeNameKind] = TypeNameKind.PRIMITIVE


@dataclass(frozen=True, order=True)
class ClassName(TypeName):
	"""
	A named (possibly nested) declared type.

	Equality, hashing and ordering use the canonical dotted name only, so a
	class built from a string compares equal to the same class built from a
	descriptor or a host mirror.
	"""

	package_name: str = field(compare=False)
	simple_name: str = field(compare=False)
	enclosing: "ClassName | None" = field(default=None, compare=False)
	canonical_name: str = field(init=False, repr=False)

	kind: ClassVar[TypeNameKind] = TypeNameKind.CLASS

	def __post_init__(self) -> None:
		require_non_null(self.package_name, "package_name")
		require_not_empty(self.simple_name, "simple_name")
		if self.enclosing is not None:
			canonical = f"{self.enclosing.canonical_name}.{self.simple_name}"
		elif self.package_name:
			canonical = f"{self.package_name}.{self.simple_name}"
		else:
			canonical = self.simple_name
		object.__setattr__(self, "canonical_name", canonical)

	@classmethod
	def get(cls, package_name: str, simple_name: str, *simple_names: str) -> "ClassName":
		"""`ClassName.get("java.util", "Map", "Entry")` is `java.util.Map.Entry`."""
		name = cls(package_name, simple_name)
		for nested in simple_names:
			name = name.nested_class(nested)
		return name

	@classmethod
	def best_guess(cls, class_name_string: str) -> "ClassName":
		"""
		Guess a class from a dotted name: leading lower-case segments form the
		package, the remaining segments must be capitalized class names.
		"""
		require_not_empty(class_name_string, "class_name_string")
		pos = 0
		while pos < len(class_name_string) and class_name_string[pos].islower():
			pos = class_name_string.find(".", pos) + 1
			check_argument(pos != 0, f"couldn't make a guess for {class_name_string}")
		package_name = "" if pos == 0 else class_name_string[: pos - 1]
		name: ClassName | None = None
		for simple_name in class_name_string[pos:].split("."):
			check_argument(
				bool(simple_name) and simple_name[0].isupper(),
				f"couldn't make a guess for {class_name_string}",
			)
			name = cls(package_name, simple_name) if name is None else name.nested_class(simple_name)
		assert name is not None
		return name

	def nested_class(self, name: str) -> "ClassName":
		return ClassName(self.package_name, name, self)

	def peer_class(self, name: str) -> "ClassName":
		"""A class with the same enclosing class (or package) as this one."""
		return ClassName(self.package_name, name, self.enclosing)

	def enclosing_class_name(self) -> "ClassName | None":
		return self.enclosing

	def top_level_class_name(self) -> "ClassName":
		return self if self.enclosing is None else self.enclosing.top_level_class_name()

	def simple_names(self) -> List[str]:
		if self.enclosing is None:
			return [self.simple_name]
		return [*self.enclosing.simple_names(), self.simple_name]

	def reflection_name(self) -> str:
		"""Binary name: nested classes are joined with `$`."""
		if self.enclosing is not None:
			return f"{self.enclosing.reflection_name()}${self.simple_name}"
		return self.canonical_name


@dataclass(frozen=True)
class ParameterizedTypeName(TypeName):
	"""A raw class applied to type arguments, e.g. `List<String>`."""

	raw_type: ClassName
	type_arguments: Tuple[TypeName, ...]
	# Set for inner classes of generic types: `Outer<T>.Inner<U>`.
	enclosing: "ParameterizedTypeName | None" = None

	kind: ClassVar[TypeNameKind] = TypeNameKind.PARAMETERIZED

	def __post_init__(self) -> None:
		require_non_null(self.raw_type, "raw_type")
		object.__setattr__(self, "type_arguments", tuple(self.type_arguments))
		if self.enclosing is None and not self.type_arguments:
			raise InvalidArgumentError(f"no type arguments for {self.raw_type}: use the raw type directly")
		for arg in self.type_arguments:
			require_non_null(arg, "type argument")
			check_argument(
				arg.kind is not TypeNameKind.PRIMITIVE,
				f"invalid type parameter: {arg}",
			)

	@classmethod
	def get(cls, raw_type: ClassName, *type_arguments: TypeName) -> "ParameterizedTypeName":
		return cls(raw_type, tuple(type_arguments))

	def nested_class(self, name: str, type_arguments: Sequence[TypeName] = ()) -> "ParameterizedTypeName":
		require_not_empty(name, "name")
		return ParameterizedTypeName(self.raw_type.nested_class(name), tuple(type_arguments), self)


@dataclass(frozen=True)
class ArrayTypeName(TypeName):
	component_type: TypeName

	kind: ClassVar[TypeNameKind] = TypeNameKind.ARRAY

	def __post_init__(self) -> None:
		require_non_null(self.component_type, "component_type")
		check_argument(self.component_type != VOID, "void cannot be an array component")

	@classmethod
	def of(cls, component_type: TypeName) -> "ArrayTypeName":
		return cls(component_type)


@dataclass(frozen=True, eq=False)
class TypeVariableName(TypeName):
	"""
	A type variable such as `T` or `T extends Comparable<T>`.

	Bounds can be supplied eagerly or through `deferred`, whose supplier is
	called on first access. A variable referenced from its own bounds prints
	as its bare name, so printing never recurses.
	"""

	name: str
	_bounds: Tuple[TypeName, ...] | None = field(default=None, repr=False)
	_supplier: Callable[[], Iterable[TypeName]] | None = field(default=None, repr=False)

	kind: ClassVar[TypeNameKind] = TypeNameKind.TYPE_VARIABLE

	def __post_init__(self) -> None:
		require_not_empty(self.name, "name")
		if self._bounds is not None:
			object.__setattr__(self, "_bounds", _checked_bounds(self._bounds))

	@classmethod
	def get(cls, name: str, *bounds: TypeName) -> "TypeVariableName":
		return cls(name, tuple(bounds))

	@classmethod
	def deferred(cls, name: str, supplier: Callable[[], Iterable[TypeName]]) -> "TypeVariableName":
		return cls(name, None, supplier)

	def bounds(self) -> Tuple[TypeName, ...]:
		"""Declared bounds; `(java.lang.Object,)` when none were given."""
		if self._bounds is None:
			supplied = self._supplier() if self._supplier is not None else ()
			object.__setattr__(self, "_bounds", _checked_bounds(supplied))
		assert self._bounds is not None
		return self._bounds

	def explicit_bounds(self) -> Tuple[TypeName, ...]:
		"""Bounds as printed at a declaration site (implicit `Object` dropped)."""
		return tuple(b for b in self.bounds() if b != OBJECT)

	def with_bounds(self, *bounds: TypeName) -> "TypeVariableName":
		return TypeVariableName(self.name, (*self.explicit_bounds(), *bounds))

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, TypeVariableName):
			return NotImplemented
		if self is other:
			return True
		return self.name == other.name and _bounds_text(self) == _bounds_text(other)

	def __hash__(self) -> int:
		return hash((TypeVariableName, self.name))


@dataclass(frozen=True)
class WildcardTypeName(TypeName):
	"""`?`, `? extends Upper` or `? super Lower`; at most one bound is set."""

	upper_bound: TypeName | None = None
	lower_bound: TypeName | None = None

	kind: ClassVar[TypeNameKind] = TypeNameKind.WILDCARD

	def __post_init__(self) -> None:
		if self.upper_bound is not None and self.lower_bound is not None:
			raise InvalidArgumentError("a wildcard cannot have both an upper and a lower bound")
		for bound in (self.upper_bound, self.lower_bound):
			if bound is not None:
				check_argument(
					bound.kind is not TypeNameKind.PRIMITIVE,
					f"invalid wildcard bound: {bound}",
				)
		# `? extends Object` and `?` are the same type.
		if self.upper_bound == OBJECT:
			object.__setattr__(self, "upper_bound", None)

	@classmethod
	def subtype_of(cls, upper_bound: TypeName) -> "WildcardTypeName":
		require_non_null(upper_bound, "upper_bound")
		return cls(upper_bound=upper_bound)

	@classmethod
	def supertype_of(cls, lower_bound: TypeName) -> "WildcardTypeName":
		require_non_null(lower_bound, "lower_bound")
		return cls(lower_bound=lower_bound)


@dataclass(frozen=True)
class ErrorTypeName(TypeName):
	"""A type the host compiler could not resolve; carries only its text."""

	segments: Tuple[str, ...]

	kind: ClassVar[TypeNameKind] = TypeNameKind.ERROR

	def __post_init__(self) -> None:
		object.__setattr__(self, "segments", tuple(self.segments))
		require_not_empty(self.segments, "segments")


def _checked_bounds(bounds: Iterable[TypeName]) -> Tuple[TypeName, ...]:
	checked = tuple(bounds)
	for bound in checked:
		require_non_null(bound, "bound")
		check_argument(bound.kind is not TypeNameKind.PRIMITIVE, f"invalid bound: {bound}")
	return checked or (OBJECT,)


def _bounds_text(var: TypeVariableName) -> Tuple[str, ...]:
	return tuple(str(b) for b in var.bounds())


def _standalone(ty: TypeName) -> str:
	kind = ty.kind
	if kind is TypeNameKind.PRIMITIVE:
		assert isinstance(ty, PrimitiveTypeName)
		return ty.keyword
	if kind is TypeNameKind.CLASS:
		assert isinstance(ty, ClassName)
		return ty.canonical_name
	if kind is TypeNameKind.PARAMETERIZED:
		assert isinstance(ty, ParameterizedTypeName)
		if ty.enclosing is not None:
			head = f"{_standalone(ty.enclosing)}.{ty.raw_type.simple_name}"
		else:
			head = ty.raw_type.canonical_name
		if not ty.type_arguments:
			return head
		return head + "<" + ", ".join(_standalone(a) for a in ty.type_arguments) + ">"
	if kind is TypeNameKind.ARRAY:
		assert isinstance(ty, ArrayTypeName)
		return _standalone(ty.component_type) + "[]"
	if kind is TypeNameKind.TYPE_VARIABLE:
		assert isinstance(ty, TypeVariableName)
		return ty.name
	if kind is TypeNameKind.WILDCARD:
		assert isinstance(ty, WildcardTypeName)
		if ty.lower_bound is not None:
			return f"? super {_standalone(ty.lower_bound)}"
		if ty.upper_bound is not None:
			return f"? extends {_standalone(ty.upper_bound)}"
		return "?"
	if kind is TypeNameKind.ERROR:
		assert isinstance(ty, ErrorTypeName)
		return ".".join(ty.segments)
	raise AssertionError(f"unhandled type kind {kind}")


_DESCRIPTOR_PRIMITIVES: Dict[str, str] = {
	"Z": "boolean",
	"B": "byte",
	"S": "short",
	"I": "int",
	"J": "long",
	"C": "char",
	"F": "float",
	"D": "double",
	"V": "void",
}


def _parse_descriptor(text: str, pos: int) -> Tuple[TypeName, int]:
	if pos >= len(text):
		raise InvalidArgumentError(f"truncated descriptor: {text!r}")
	ch = text[pos]
	if ch in _DESCRIPTOR_PRIMITIVES:
		return PRIMITIVES[_DESCRIPTOR_PRIMITIVES[ch]], pos + 1
	if ch == "[":
		component, end = _parse_descriptor(text, pos + 1)
		return ArrayTypeName(component), end
	if ch == "L":
		end = text.find(";", pos)
		if end < 0:
			raise InvalidArgumentError(f"unterminated class descriptor: {text!r}")
		binary = text[pos + 1 : end]
		package, _, names = binary.rpartition("/")
		parts = names.split("$")
		if not all(parts):
			raise InvalidArgumentError(f"invalid class descriptor: {text!r}")
		return ClassName.get(package.replace("/", "."), *parts), end + 1
	raise InvalidArgumentError(f"invalid descriptor character {ch!r} in {text!r}")


VOID = PrimitiveTypeName("void")
BOOLEAN = PrimitiveTypeName("boolean")
BYTE = PrimitiveTypeName("byte")
SHORT = PrimitiveTypeName("short")
INT = PrimitiveTypeName("int")
LONG = PrimitiveTypeName("long")
CHAR = PrimitiveTypeName("char")
FLOAT = PrimitiveTypeName("float")
DOUBLE = PrimitiveTypeName("double")

PRIMITIVES: Dict[str, PrimitiveTypeName] = {
	p.keyword: p for p in (VOID, BOOLEAN, BYTE, SHORT, INT, LONG, CHAR, FLOAT, DOUBLE)
}

OBJECT = ClassName.get("java.lang", "Object")
STRING = ClassName.get("java.lang", "String")

BOXED_VOID = ClassName.get("java.lang", "Void")
BOXED_BOOLEAN = ClassName.get("java.lang", "Boolean")
BOXED_BYTE = ClassName.get("java.lang", "Byte")
BOXED_SHORT = ClassName.get("java.lang", "Short")
BOXED_INT = ClassName.get("java.lang", "Integer")
BOXED_LONG = ClassName.get("java.lang", "Long")
BOXED_CHAR = ClassName.get("java.lang", "Character")
BOXED_FLOAT = ClassName.get("java.lang", "Float")
BOXED_DOUBLE = ClassName.get("java.lang", "Double")

_BOXED: Dict[TypeName, TypeName] = {
	VOID: BOXED_VOID,
	BOOLEAN: BOXED_BOOLEAN,
	BYTE: BOXED_BYTE,
	SHORT: BOXED_SHORT,
	INT: BOXED_INT,
	LONG: BOXED_LONG,
	CHAR: BOXED_CHAR,
	FLOAT: BOXED_FLOAT,
	DOUBLE: BOXED_DOUBLE,
}
# Void unboxes to void but is not reported as a boxed primitive.
_UNBOXED: Dict[TypeName, TypeName] = {boxed: prim for prim, boxed in _BOXED.items() if prim != VOID}


def unbox_or_none(ty: TypeName) -> TypeName | None:
	if ty == BOXED_VOID:
		return VOID
	return ty if ty.kind is TypeNameKind.PRIMITIVE else _UNBOXED.get(ty)


__all__ = [
	"ArrayTypeName",
	"BOOLEAN",
	"BOXED_BOOLEAN",
	"BOXED_BYTE",
	"BOXED_CHAR",
	"BOXED_DOUBLE",
	"BOXED_FLOAT",
	"BOXED_INT",
	"BOXED_LONG",
	"BOXED_SHORT",
	"BOXED_VOID",
	"BYTE",
	"CHAR",
	"ClassName",
	"DOUBLE",
	"ErrorTypeName",
	"FLOAT",
	"INT",
	"LONG",
	"OBJECT",
	"PRIMITIVES",
	"ParameterizedTypeName",
	"PrimitiveTypeName",
	"SHORT",
	"STRING",
	"TypeName",
	"TypeNameKind",
	"TypeVariableName",
	"VOID",
	"WildcardTypeName",
	"unbox_or_none",
]
