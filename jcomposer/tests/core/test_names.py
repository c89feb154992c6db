#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Identifiers, the name allocator and literal escaping."""

import pytest

from jcomposer.core.errors import EmptyArgumentError, InvalidArgumentError, NullArgumentError, require_not_empty
from jcomposer.core.literals import character_literal, string_literal
from jcomposer.core.modifiers import Modifier, sorted_modifiers
from jcomposer.core.names import NameAllocator, is_identifier, to_java_identifier


def test_is_identifier():
	assert is_identifier("foo")
	assert is_identifier("_foo$1")
	assert not is_identifier("class")
	assert not is_identifier("1abc")
	assert not is_identifier("a-b")
	assert not is_identifier("")


def test_to_java_identifier():
	assert to_java_identifier("foo-bar") == "foo_bar"
	assert to_java_identifier("1st") == "_1st"
	assert to_java_identifier("a b") == "a_b"


def test_allocator_renames_keywords_and_duplicates():
	names = NameAllocator()
	assert names.new_name("foo", 1) == "foo"
	assert names.new_name("foo", 2) == "foo_"
	assert names.new_name("class", 3) == "class_"
	assert names.new_name("foo bar", 4) == "foo_bar"
	assert names.get(2) == "foo_"


def test_allocator_tags_are_unique():
	names = NameAllocator()
	names.new_name("a", "tag")
	with pytest.raises(InvalidArgumentError, match="cannot be used for both"):
		names.new_name("b", "tag")
	with pytest.raises(InvalidArgumentError, match="unknown tag"):
		names.get("other")


def test_require_not_empty():
	assert require_not_empty("x", "name") == "x"
	with pytest.raises(NullArgumentError, match="'name' is null"):
		require_not_empty(None, "name")
	with pytest.raises(EmptyArgumentError):
		require_not_empty("  ", "name")
	with pytest.raises(EmptyArgumentError):
		require_not_empty((), "names")


def test_string_literals():
	assert string_literal(None) == "null"
	assert string_literal("a\"b'c\\") == '"a\\"b\'c\\\\"'
	assert string_literal("tab\there") == '"tab\\there"'
	assert string_literal("\u0001") == '"\\u0001"'


def test_multi_line_strings_become_text_blocks():
	assert string_literal("a\nb") == '"""\na\nb"""'
	assert string_literal("say \"\"\"hi\"\"\"\n") == '"""\nsay ""\\"hi""\\"\n"""'
	assert string_literal("trailing \nend\"") == '"""\ntrailing\\s\nend\\""""'


def test_character_literals():
	assert character_literal("a") == "'a'"
	assert character_literal("'") == "'\\''"
	assert character_literal('"') == "'\"'"
	assert character_literal("\n") == "'\\n'"


def test_modifiers_sort_in_source_order():
	mods = [Modifier.FINAL, Modifier.STATIC, Modifier.PUBLIC, Modifier.FINAL]
	assert sorted_modifiers(mods) == [Modifier.PUBLIC, Modifier.STATIC, Modifier.FINAL]
	assert str(Modifier.NON_SEALED) == "non-sealed"
