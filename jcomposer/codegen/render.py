# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
End-to-end rendering.

`render` runs the two writer passes over a fragment (a `CodeBlock` or any
spec) and returns the import header followed by the body.
`render_standalone` runs a single pass without imports; it backs the `str()`
of blocks and specs, where every type prints fully qualified.
"""

from __future__ import annotations

import io
import logging
from typing import Callable, Iterable

from jcomposer.core.config import ComposerConfig
from jcomposer.core.errors import require_non_null

from .code_writer import CodeWriter, Emittable, NullSink
from .line_wrapper import TextSink

logger = logging.getLogger(__name__)


def write_with_imports(
	out: TextSink,
	emit_body: Callable[[CodeWriter], None],
	config: ComposerConfig | None = None,
	static_imports: Iterable[str] = (),
) -> None:
	"""
	Collect imports with a throwaway writer, then write for real into `out`.

	`emit_body` is called once per pass and must produce the same output both
	times; it decides where `CodeWriter.emit_imports` places the header.
	"""
	static_imports = frozenset(static_imports)
	with CodeWriter(NullSink(), config, static_imports=static_imports) as collector:
		emit_body(collector)
	imports = collector.suggested_imports()
	logger.debug("collected imports: %s", ", ".join(c.canonical_name for c in imports.values()) or "none")
	with CodeWriter(out, config, imported_types=imports, static_imports=static_imports) as writer:
		emit_body(writer)


def render(
	fragment: Emittable,
	config: ComposerConfig | None = None,
	package_name: str = "",
	static_imports: Iterable[str] = (),
) -> str:
	"""Render `fragment` as it would appear in a file of `package_name`."""
	require_non_null(fragment, "fragment")
	# Blocks carry a set; specs compute theirs.
	carried = getattr(fragment, "static_imports", ())
	if callable(carried):
		carried = carried()
	static_imports = frozenset(static_imports) | frozenset(carried)

	def emit_body(writer: CodeWriter) -> None:
		writer.push_package(package_name)
		writer.emit_imports()
		fragment.emit(writer)
		writer.pop_package()

	out = io.StringIO()
	write_with_imports(out, emit_body, config, static_imports)
	return out.getvalue()


def render_standalone(fragment: Emittable, config: ComposerConfig | None = None) -> str:
	require_non_null(fragment, "fragment")
	out = io.StringIO()
	with CodeWriter(out, config) as writer:
		fragment.emit(writer)
	return out.getvalue()


__all__ = ["render", "render_standalone", "write_with_imports"]
