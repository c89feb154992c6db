# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse the printed form of a type back into a `TypeName`.

The grammar lives in `type_name.lark`. A dotted name is split the same way
`ClassName.best_guess` splits it: leading lower-case segments without type
arguments are the package, the rest are (nested) class names. Single-segment
names listed in `type_variables` become `TypeVariableName`s, and primitive
keywords become primitives.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from jcomposer.core.errors import InvalidArgumentError, require_not_empty
from jcomposer.core.type_names import (
	PRIMITIVES,
	ArrayTypeName,
	ClassName,
	ParameterizedTypeName,
	TypeName,
	TypeVariableName,
	WildcardTypeName,
)

_GRAMMAR_PATH = Path(__file__).with_name("type_name.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)


def parse_type_name(text: str, type_variables: Iterable[str | TypeVariableName] = ()) -> TypeName:
	"""
	Parse `text` (as printed by `str(type_name)`) into a `TypeName`.

	Raises `InvalidArgumentError` for text that is not a type usage.
	"""
	require_not_empty(text, "text")
	variables: Dict[str, TypeVariableName] = {}
	for var in type_variables:
		if isinstance(var, str):
			var = TypeVariableName.get(var)
		variables[var.name] = var
	try:
		tree = _PARSER.parse(text)
	except UnexpectedInput as err:
		raise InvalidArgumentError(f"not a type name: {text!r} ({err.__class__.__name__} at column {err.column})") from err
	return _build_any(tree.children[0], variables)


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	return node.type


def _build_type(tree: Tree, variables: Dict[str, TypeVariableName]) -> TypeName:
	base, *dims = tree.children
	ty = _build_class_type(base, variables)
	for dim in dims:
		if _name(dim) != "dim":
			raise InvalidArgumentError(f"unexpected node {_name(dim)!r} in type")
		ty = ArrayTypeName(ty)
	return ty


def _build_any(tree: Tree, variables: Dict[str, TypeVariableName]) -> TypeName:
	name = _name(tree)
	if name == "unbounded_wildcard":
		return WildcardTypeName()
	if name == "extends_wildcard":
		return WildcardTypeName.subtype_of(_build_type(tree.children[0], variables))
	if name == "super_wildcard":
		return WildcardTypeName.supertype_of(_build_type(tree.children[0], variables))
	if name == "type":
		return _build_type(tree, variables)
	raise InvalidArgumentError(f"unexpected node {name!r} in type")


def _build_class_type(tree: Tree, variables: Dict[str, TypeVariableName]) -> TypeName:
	segments: List[Tuple[str, Tuple[TypeName, ...]]] = []
	for seg in tree.children:
		ident = seg.children[0]
		args: Tuple[TypeName, ...] = ()
		if len(seg.children) > 1:
			args = tuple(_build_any(arg, variables) for arg in seg.children[1].children)
		segments.append((ident.value, args))

	if len(segments) == 1 and not segments[0][1]:
		simple = segments[0][0]
		if simple in PRIMITIVES:
			return PRIMITIVES[simple]
		if simple in variables:
			return variables[simple]

	split = 0
	while split < len(segments) - 1 and segments[split][0][0].islower() and not segments[split][1]:
		split += 1
	package_name = ".".join(seg_name for seg_name, _ in segments[:split])

	current: TypeName | None = None
	for seg_name, args in segments[split:]:
		if current is None:
			raw = ClassName(package_name, seg_name)
			current = ParameterizedTypeName(raw, args) if args else raw
		elif isinstance(current, ParameterizedTypeName):
			current = current.nested_class(seg_name, args)
		else:
			assert isinstance(current, ClassName)
			raw = current.nested_class(seg_name)
			current = ParameterizedTypeName(raw, args) if args else raw
	assert current is not None
	return current


__all__ = ["parse_type_name"]
