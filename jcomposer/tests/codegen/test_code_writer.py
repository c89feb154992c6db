#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Import resolution, name lookup and writer state, through `render`."""

import io

import pytest

from jcomposer.codegen import CodeBlock, render
from jcomposer.codegen.code_writer import CodeWriter, TypeScope
from jcomposer.core.config import ComposerConfig
from jcomposer.core.errors import ComposerStateError
from jcomposer.core.type_names import STRING, ClassName, ParameterizedTypeName, TypeVariableName
from jcomposer.specs import MethodSpec

LIST = ClassName.get("java.util", "List")
COLLECTIONS = ClassName.get("java.util", "Collections")
COMPARABLE = ClassName.get("java.lang", "Comparable")


def test_importable_types_use_simple_names():
	block = CodeBlock.of("$T<$T> names", LIST, STRING)
	assert render(block) == "import java.util.List;\n\nList<String> names"


def test_java_lang_types_are_not_listed():
	text = render(CodeBlock.of("$T", STRING), ComposerConfig(skip_default_imports=False))
	assert text == "import java.lang.String;\n\nString"
	assert render(CodeBlock.of("$T", STRING)) == "String"


def test_colliding_simple_names_keep_the_first_import():
	block = CodeBlock.of("$T $T", ClassName.get("com.a", "Map"), ClassName.get("java.util", "Map"))
	assert render(block) == "import com.a.Map;\n\nMap java.util.Map"


def test_same_package_types_shadow_imports():
	block = CodeBlock.of("$T $T", ClassName.get("com.example", "Other"), ClassName.get("org.x", "Other"))
	assert render(block, package_name="com.example") == "Other org.x.Other"


def test_nested_classes_import_their_top_level_class():
	entry = ClassName.get("java.util", "Map", "Entry")
	assert render(CodeBlock.of("$T", entry)) == "import java.util.Map;\n\nMap.Entry"


def test_default_package_types_are_never_imported():
	assert render(CodeBlock.of("$T", ClassName.get("", "Local"))) == "Local"


def test_static_imports_shorten_member_references():
	block = (
		CodeBlock.builder()
		.add_static_import(COLLECTIONS, "emptyList")
		.add("$T.emptyList()", COLLECTIONS)
		.build()
	)
	assert render(block) == "import static java.util.Collections.emptyList;\n\nemptyList()"


def test_wildcard_static_import():
	block = (
		CodeBlock.builder()
		.add_static_import(COLLECTIONS, "*")
		.add("$T.sort(list)", COLLECTIONS)
		.build()
	)
	assert render(block) == "import static java.util.Collections.*;\n\nsort(list)"


def test_static_import_of_another_member_keeps_the_type():
	block = (
		CodeBlock.builder()
		.add_static_import(COLLECTIONS, "emptyList")
		.add("$T.emptyMap()", COLLECTIONS)
		.build()
	)
	text = render(block)
	assert text == "import java.util.Collections;\n\nimport static java.util.Collections.emptyList;\n\nCollections.emptyMap()"


def test_import_order_is_case_sensitive_by_default():
	block = CodeBlock.of("$T $T", ClassName.get("com.x", "apple"), ClassName.get("com.x", "Zebra"))
	assert render(block) == "import com.x.Zebra;\nimport com.x.apple;\n\napple Zebra"
	relaxed = render(block, ComposerConfig(case_sensitive_imports=False))
	assert relaxed == "import com.x.apple;\nimport com.x.Zebra;\n\napple Zebra"


def test_static_imports_first():
	block = (
		CodeBlock.builder()
		.add_static_import(COLLECTIONS, "emptyList")
		.add("$T x = $T.emptyList()", LIST, COLLECTIONS)
		.build()
	)
	text = render(block, ComposerConfig(static_imports_first=True))
	assert text == (
		"import static java.util.Collections.emptyList;\n\n"
		"import java.util.List;\n\n"
		"List x = emptyList()"
	)


def test_render_is_repeatable():
	block = CodeBlock.of("$T<$T>", LIST, STRING)
	assert render(block) == render(block)


def test_recursive_type_variable_end_to_end():
	holder = {}
	t = TypeVariableName.deferred("T", lambda: [ParameterizedTypeName.get(COMPARABLE, holder["t"])])
	holder["t"] = t
	method = (
		MethodSpec.method_builder("max")
		.add_type_variable(t)
		.returns(t)
		.add_parameter(t, "a")
		.add_parameter(t, "b")
		.add_statement("return a.compareTo(b) > 0 ? a : b")
		.build()
	)
	assert render(method) == (
		"<T extends Comparable<T>> T max(T a, T b) {\n"
		"  return a.compareTo(b) > 0 ? a : b;\n"
		"}\n"
	)


def test_lookup_name_prefers_member_types():
	writer = CodeWriter(io.StringIO())
	writer.push_package("com.example")
	writer.push_type(TypeScope("Outer", ("Inner",)))
	assert writer.lookup_name(ClassName.get("com.example", "Outer", "Inner")) == "Inner"
	assert writer.lookup_name(ClassName.get("org.other", "Inner")) == "org.other.Inner"
	assert writer.lookup_name(ClassName.get("com.example", "Outer")) == "Outer"
	writer.pop_type()
	writer.pop_package()


def test_comments_prefix_every_line():
	out = io.StringIO()
	with CodeWriter(out) as writer:
		writer.emit_javadoc(CodeBlock.of("first\n\nsecond\n"))
		writer.emit_line_comment(CodeBlock.of("one\ntwo"))
	assert out.getvalue() == "/**\n * first\n *\n * second\n */\n// one\n// two\n"


def test_unindent_below_zero_fails():
	writer = CodeWriter(io.StringIO())
	with pytest.raises(ComposerStateError):
		writer.unindent()


def test_unbalanced_statement_markers_fail():
	writer = CodeWriter(io.StringIO())
	with pytest.raises(ComposerStateError):
		writer.emit_code(CodeBlock.of("$]"))
	with pytest.raises(ComposerStateError):
		writer.emit_code(CodeBlock.of("$[a$["))


def test_package_is_set_once():
	writer = CodeWriter(io.StringIO())
	writer.push_package("com.example")
	with pytest.raises(ComposerStateError):
		writer.push_package("com.other")
