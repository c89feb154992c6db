# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Rendering engine: format interpolation (`CodeBlock`), the import-aware
`CodeWriter`, the `LineWrapper` and the `render` entry points.
"""

from .code_block import CodeBlock, CodeBlockBuilder
from .code_writer import CodeWriter, TypeScope
from .debug_output import DebugOutput
from .line_wrapper import LineWrapper
from .render import render, render_standalone

__all__ = [
	"CodeBlock",
	"CodeBlockBuilder",
	"CodeWriter",
	"DebugOutput",
	"LineWrapper",
	"TypeScope",
	"render",
	"render_standalone",
]
