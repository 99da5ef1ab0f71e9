"""Input variables of a Terraform module."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key

from .position import Position
from .types import Nil, String, Value, _encode_json


@dataclass
class Input:
    """A Terraform input variable."""

    name: str
    type: String = field(default_factory=lambda: String(""))
    description: String = field(default_factory=lambda: String(""))
    default: Value = field(default_factory=Nil)
    required: bool = False
    position: Position = field(default_factory=Position)

    def get_value(self) -> str:
        """JSON text of the default value.

        A missing default yields an empty string for a required input and
        an explicit ``null`` for an optional one.
        """
        value = _encode_json(self.default, "  ").strip()
        if value == "null":
            return "" if self.required else "null"
        return value

    def has_default(self) -> bool:
        """Whether the variable has a default value set."""
        return self.default.has_default() or not self.required


def _position_cmp(a: Input, b: Input) -> int:
    def less(x: Input, y: Input) -> bool:
        return x.position.filename < y.position.filename or x.position.line < y.position.line

    if less(a, b):
        return -1
    if less(b, a):
        return 1
    return 0


def sort_inputs_by_name(inputs: Iterable[Input]) -> list[Input]:
    """Return the inputs sorted by name."""
    return sorted(inputs, key=lambda i: i.name)


def sort_inputs_by_required(inputs: Iterable[Input]) -> list[Input]:
    """Return the inputs without a default first, each part sorted by name."""
    return sorted(inputs, key=lambda i: (i.has_default(), i.name))


def sort_inputs_by_position(inputs: Iterable[Input]) -> list[Input]:
    """Return the inputs in the order they appear in their files."""
    return sorted(inputs, key=cmp_to_key(_position_cmp))


def sort_inputs_by_type(inputs: Iterable[Input]) -> list[Input]:
    """Return the inputs sorted by type, then by name."""
    return sorted(inputs, key=lambda i: (str(i.type), i.name))