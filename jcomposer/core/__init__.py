# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Core value types: errors, configuration, the type-reference model, the host
mirror bridge, identifiers, literals and modifiers.
"""

from .config import DEFAULT_CONFIG, ComposerConfig
from .errors import (
	ComposerError,
	ComposerStateError,
	EmptyArgumentError,
	InvalidArgumentError,
	NullArgumentError,
	UnsupportedOperationError,
)
from .modifiers import Modifier
from .names import NameAllocator
from .type_mirror import MirrorKind, type_name_from_mirror
from .type_names import (
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

__all__ = [
	"ArrayTypeName",
	"ClassName",
	"ComposerConfig",
	"ComposerError",
	"ComposerStateError",
	"DEFAULT_CONFIG",
	"EmptyArgumentError",
	"ErrorTypeName",
	"InvalidArgumentError",
	"MirrorKind",
	"Modifier",
	"NameAllocator",
	"NullArgumentError",
	"ParameterizedTypeName",
	"PrimitiveTypeName",
	"TypeName",
	"TypeNameKind",
	"TypeVariableName",
	"UnsupportedOperationError",
	"WildcardTypeName",
	"type_name_from_mirror",
]
