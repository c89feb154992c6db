# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
jcomposer: Java source generation.

Stages:
  core     type references, configuration, errors, identifiers
  parser   printed type names back into type references
  codegen  format interpolation, import-aware writer, line wrapping
  specs    annotations, fields, methods, types, lambdas and whole files
"""

from .codegen import CodeBlock, CodeWriter, render
from .core import (
	ArrayTypeName,
	ClassName,
	ComposerConfig,
	ParameterizedTypeName,
	TypeName,
	TypeVariableName,
	WildcardTypeName,
)
from .core.modifiers import Modifier
from .specs import (
	AnnotationSpec,
	FieldSpec,
	JavaFile,
	LambdaSpec,
	MethodSpec,
	ParameterSpec,
	TypeSpec,
)

__version__ = "0.1.0"

__all__ = [
	"AnnotationSpec",
	"ArrayTypeName",
	"ClassName",
	"CodeBlock",
	"CodeWriter",
	"ComposerConfig",
	"FieldSpec",
	"JavaFile",
	"LambdaSpec",
	"MethodSpec",
	"Modifier",
	"ParameterSpec",
	"ParameterizedTypeName",
	"TypeName",
	"TypeSpec",
	"TypeVariableName",
	"WildcardTypeName",
	"render",
]
