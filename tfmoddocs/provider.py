"""Providers and requirements of a Terraform module."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key

from .position import Position
from .types import String


@dataclass
class Provider:
    """A provider used by the resources of a Terraform module."""

    name: str
    alias: String = field(default_factory=lambda: String(""))
    version: String = field(default_factory=lambda: String(""))
    position: Position = field(default_factory=Position)

    def full_name(self) -> str:
        """Name of the provider, with its alias if one is set."""
        if self.alias:
            return f"{self.name}.{self.alias}"
        return self.name


@dataclass
class Requirement:
    """A version requirement of a Terraform module."""

    name: str
    version: String = field(default_factory=lambda: String(""))


def _position_cmp(a: Provider, b: Provider) -> int:
    def less(x: Provider, y: Provider) -> bool:
        return x.position.filename < y.position.filename or x.position.line < y.position.line

    if less(a, b):
        return -1
    if less(b, a):
        return 1
    return 0


def sort_providers_by_name(providers: Iterable[Provider]) -> list[Provider]:
    """Return the providers sorted by name, then by alias."""
    return sorted(providers, key=lambda p: (p.name, str(p.alias)))


def sort_providers_by_position(providers: Iterable[Provider]) -> list[Provider]:
    """Return the providers in the order they appear in their files."""
    return sorted(providers, key=cmp_to_key(_position_cmp))