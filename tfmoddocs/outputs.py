"""Outputs of a Terraform module."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from functools import cmp_to_key

from .position import Position
from .types import String, Value, _element, _encode_json, _escape


@dataclass
class Output:
    """A Terraform output."""

    name: str
    description: String = field(default_factory=lambda: String(""))
    value: Value | None = None
    sensitive: bool = False
    position: Position = field(default_factory=Position)
    show_value: bool = False

    def get_value(self) -> str:
        """Indented JSON text of the value, or an empty string when hidden or null."""
        if not self.show_value or self.value is None:
            return ""
        value = _encode_json(self.value, "  ", escape_html=True)
        if value == "null":
            return ""
        return value

    def has_default(self) -> bool:
        """Whether the output has a value to show."""
        if not self.show_value or self.value is None:
            return False
        return self.value.has_default()

    def marshal_json(self) -> str:
        """JSON text of the output; value and sensitivity only when values are shown."""
        parts = [
            f'"name":{_encode_json(self.name)}',
            f'"description":{_encode_json(String(self.description))}',
        ]
        if self.show_value:
            parts.append(f'"value":{_encode_json(self.value)}')
            parts.append(f'"sensitive":{_encode_json(self.sensitive)}')
        return "{" + ",".join(parts) + "}\n"

    def marshal_xml(self, name: str) -> str:
        """XML element called ``name``; value and sensitivity only when values are shown."""
        parts = [
            _element("name", _escape(self.name)),
            String(self.description).marshal_xml("description"),
        ]
        if self.show_value:
            if self.value is not None:
                parts.append(self.value.marshal_xml("value"))
            parts.append(_element("sensitive", "true" if self.sensitive else "false"))
        return _element(name, "".join(parts))

    def marshal_yaml(self) -> OutputValue | Output:
        """Object to serialize as YAML: all fields when values are shown, otherwise without them."""
        if self.show_value:
            return OutputValue(
                name=self.name,
                description=self.description,
                value=self.value,
                sensitive=self.sensitive,
                position=self.position,
                show_value=self.show_value,
            )
        return replace(self, value=None, sensitive=False)


@dataclass
class OutputValue:
    """An output whose value and sensitivity are always serialized."""

    name: str
    description: String = field(default_factory=lambda: String(""))
    value: Value | None = None
    sensitive: bool = False
    position: Position = field(default_factory=Position)
    show_value: bool = True


def _position_cmp(a: Output, b: Output) -> int:
    def less(x: Output, y: Output) -> bool:
        return x.position.filename < y.position.filename or x.position.line < y.position.line

    if less(a, b):
        return -1
    if less(b, a):
        return 1
    return 0


def sort_outputs_by_name(outputs: Iterable[Output]) -> list[Output]:
    """Return the outputs sorted by name."""
    return sorted(outputs, key=lambda o: o.name)


def sort_outputs_by_position(outputs: Iterable[Output]) -> list[Output]:
    """Return the outputs in the order they appear in their files."""
    return sorted(outputs, key=cmp_to_key(_position_cmp))