# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Java modifiers, declared in canonical source order."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List


class Modifier(Enum):
	PUBLIC = "public"
	PROTECTED = "protected"
	PRIVATE = "private"
	ABSTRACT = "abstract"
	DEFAULT = "default"
	STATIC = "static"
	SEALED = "sealed"
	NON_SEALED = "non-sealed"
	FINAL = "final"
	TRANSIENT = "transient"
	VOLATILE = "volatile"
	SYNCHRONIZED = "synchronized"
	NATIVE = "native"
	STRICTFP = "strictfp"

	def __str__(self) -> str:
		return self.value


_ORDER = {m: idx for idx, m in enumerate(Modifier)}


def sorted_modifiers(modifiers: Iterable[Modifier]) -> List[Modifier]:
	"""Distinct modifiers in canonical Java source order."""
	return sorted(set(modifiers), key=_ORDER.__getitem__)


__all__ = ["Modifier", "sorted_modifiers"]
