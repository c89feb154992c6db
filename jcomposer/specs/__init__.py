# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Thin spec tree: immutable declarations built by mutable builders and
rendered through `jcomposer.codegen`.
"""

from .annotation_spec import AnnotationSpec, AnnotationSpecBuilder
from .field_spec import FieldSpec, FieldSpecBuilder
from .java_file import JavaFile, JavaFileBuilder
from .lambda_spec import LambdaSpec, LambdaSpecBuilder
from .method_spec import CONSTRUCTOR, MethodSpec, MethodSpecBuilder
from .parameter_spec import ParameterSpec, ParameterSpecBuilder
from .type_spec import TypeKind, TypeSpec, TypeSpecBuilder

__all__ = [
	"AnnotationSpec",
	"AnnotationSpecBuilder",
	"CONSTRUCTOR",
	"FieldSpec",
	"FieldSpecBuilder",
	"JavaFile",
	"JavaFileBuilder",
	"LambdaSpec",
	"LambdaSpecBuilder",
	"MethodSpec",
	"MethodSpecBuilder",
	"ParameterSpec",
	"ParameterSpecBuilder",
	"TypeKind",
	"TypeSpec",
	"TypeSpecBuilder",
]
