# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Parsing of printed type names (lark grammar in `type_name.lark`)."""

from .type_parser import parse_type_name

__all__ = ["parse_type_name"]
