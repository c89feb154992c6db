#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Methods and constructors."""

import pytest

from jcomposer.core.errors import ComposerStateError, InvalidArgumentError
from jcomposer.core.modifiers import Modifier
from jcomposer.core.type_names import INT, OBJECT, STRING, ArrayTypeName, ClassName
from jcomposer.specs import MethodSpec, ParameterSpec

IO_EXCEPTION = ClassName.get("java.io", "IOException")


def test_method_with_body():
	method = (
		MethodSpec.method_builder("greet")
		.add_modifiers(Modifier.PUBLIC)
		.returns(STRING)
		.add_parameter(STRING, "name")
		.add_statement("return $S + $N", "Hello, ", "name")
		.build()
	)
	assert str(method) == 'public java.lang.String greet(java.lang.String name) {\n  return "Hello, " + name;\n}\n'


def test_parameter_javadoc_is_appended():
	first = ParameterSpec.builder(INT, "a").add_javadoc("the first\n").build()
	method = (
		MethodSpec.method_builder("add")
		.add_javadoc("Adds two numbers.\n")
		.returns(INT)
		.add_parameter(first)
		.add_parameter(INT, "b")
		.add_statement("return a + b")
		.build()
	)
	assert str(method) == (
		"/**\n"
		" * Adds two numbers.\n"
		" *\n"
		" * @param a the first\n"
		" */\n"
		"int add(int a, int b) {\n"
		"  return a + b;\n"
		"}\n"
	)


def test_reserved_parameter_names_are_renamed():
	param = ParameterSpec.get(OBJECT, "class")
	method = MethodSpec.method_builder("id").returns(OBJECT).add_parameter(param).add_statement("return $N", param).build()
	assert str(method) == "java.lang.Object id(java.lang.Object class_) {\n  return class_;\n}\n"


def test_renamed_parameter_is_found_by_its_declared_name():
	declared = ParameterSpec.get(INT, "class")
	equal = ParameterSpec.get(INT, "class")
	method = (
		MethodSpec.method_builder("f")
		.add_parameter(declared)
		.add_statement("return $N", equal)
		.add_statement("return $N", "class")
		.build()
	)
	assert str(method) == "void f(int class_) {\n  return class_;\n  return class_;\n}\n"


def test_duplicate_parameter_names_fail():
	param = ParameterSpec.get(INT, "a")
	builder = MethodSpec.method_builder("f").add_parameter(param).add_parameter(param)
	with pytest.raises(InvalidArgumentError, match="duplicate parameter names"):
		builder.build()


def test_varargs():
	method = (
		MethodSpec.method_builder("of")
		.add_modifiers(Modifier.STATIC, Modifier.PUBLIC)
		.add_parameter(ArrayTypeName.of(STRING), "values")
		.varargs()
		.build()
	)
	assert str(method) == "public static void of(java.lang.String... values) {\n}\n"


def test_varargs_requires_a_trailing_array():
	builder = MethodSpec.method_builder("of").add_parameter(STRING, "value").varargs()
	with pytest.raises(InvalidArgumentError):
		builder.build()


def test_throws_clause():
	method = MethodSpec.method_builder("read").add_exception(IO_EXCEPTION).build()
	assert str(method) == "void read() throws java.io.IOException {\n}\n"


def test_abstract_method_has_no_body():
	method = MethodSpec.method_builder("run").add_modifiers(Modifier.PUBLIC, Modifier.ABSTRACT).build()
	assert str(method) == "public abstract void run();\n"


def test_abstract_method_with_code_fails():
	builder = MethodSpec.method_builder("run").add_modifiers(Modifier.ABSTRACT).add_statement("go()")
	with pytest.raises(ComposerStateError):
		builder.build()


def test_annotation_default_value():
	method = (
		MethodSpec.method_builder("value")
		.add_modifiers(Modifier.PUBLIC, Modifier.ABSTRACT)
		.returns(STRING)
		.default_value("$S", "none")
		.build()
	)
	assert str(method) == 'public abstract java.lang.String value() default "none";\n'


def test_native_method():
	method = MethodSpec.method_builder("hash").add_modifiers(Modifier.NATIVE).returns(INT).build()
	assert str(method) == "native int hash();\n"


def test_control_flow_in_body():
	method = (
		MethodSpec.method_builder("abs")
		.returns(INT)
		.add_parameter(INT, "x")
		.begin_control_flow("if ($N < 0)", "x")
		.add_statement("return -x")
		.end_control_flow()
		.add_statement("return x")
		.build()
	)
	assert str(method) == "int abs(int x) {\n  if (x < 0) {\n    return -x;\n  }\n  return x;\n}\n"


def test_constructor_cannot_declare_a_return_type():
	with pytest.raises(ComposerStateError):
		MethodSpec.constructor_builder().returns(INT)


def test_invalid_method_name():
	with pytest.raises(InvalidArgumentError):
		MethodSpec.method_builder("1st")


def test_to_builder_round_trip():
	method = MethodSpec.method_builder("size").returns(INT).add_statement("return 0").build()
	assert method.to_builder().build() == method
	assert method.to_builder().add_modifiers(Modifier.FINAL).build() != method
