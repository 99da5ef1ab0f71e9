"""Submodules called by a Terraform module."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key

from .position import Position


@dataclass
class ModuleCall:
    """A submodule called by a Terraform module."""

    name: str
    source: str = ""
    version: str = ""
    position: Position = field(default_factory=Position)

    def full_name(self) -> str:
        """Source of the module, with its version if one is set."""
        if self.version:
            return f"{self.source},{self.version}"
        return self.source


def _position_cmp(a: ModuleCall, b: ModuleCall) -> int:
    def less(x: ModuleCall, y: ModuleCall) -> bool:
        return x.position.filename < y.position.filename or x.position.line < y.position.line

    if less(a, b):
        return -1
    if less(b, a):
        return 1
    return 0


def sort_modulecalls_by_name(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Return the module calls sorted by name."""
    return sorted(calls, key=lambda m: m.name)


def sort_modulecalls_by_source(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Return the module calls sorted by source, then by name."""
    return sorted(calls, key=lambda m: (m.source, m.name))


def sort_modulecalls_by_position(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Return the module calls in the order they appear in their files."""
    return sorted(calls, key=cmp_to_key(_position_cmp))