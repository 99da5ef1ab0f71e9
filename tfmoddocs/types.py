"""Typed wrappers for the default values of inputs and the values of outputs."""

from __future__ import annotations

import json
import math
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


class Value(ABC):
    """A default value of an input or the value of an output."""

    __slots__ = ()

    def has_default(self) -> bool:
        """Whether a value is actually set."""
        return True

    def length(self) -> int:
        """Length of the underlying item."""
        return 0

    @abstractmethod
    def raw(self) -> Any:
        """The plain Python value held by this wrapper."""

    def marshal_json(self) -> str:
        """Compact JSON text of the value."""
        return _encode_json(self.raw())

    def marshal_xml(self, name: str) -> str:
        """XML element called ``name`` holding the value."""
        return _element(name, _chardata(self.raw()))

    def marshal_yaml(self) -> Any:
        """Plain value to hand to a YAML serializer."""
        return self.raw()


@dataclass(frozen=True)
class Nil(Value):
    """No value set; rendered as ``null``."""

    def has_default(self) -> bool:
        return False

    def raw(self) -> Any:
        return None

    def marshal_json(self) -> str:
        return "null"

    def marshal_xml(self, name: str) -> str:
        return _nil_element(name)

    def marshal_yaml(self) -> Any:
        return None


class String(str, Value):
    """A string value; rendered as ``null`` when empty."""

    __slots__ = ()

    def length(self) -> int:
        return len(self.encode("utf-8"))

    def raw(self) -> str:
        return str(self)

    def marshal_json(self) -> str:
        if not self:
            return "null"
        return _quote(str(self))

    def marshal_xml(self, name: str) -> str:
        if not self:
            return _nil_element(name)
        return _element(name, _escape(str(self)))

    def marshal_yaml(self) -> Any:
        if self in ("", '""'):
            return None
        return str(self)

    def __repr__(self) -> str:
        return f"String({str(self)!r})"


class Empty(str, Value):
    """An explicitly empty string; rendered as ``""``."""

    __slots__ = ()

    def length(self) -> int:
        return len(self.encode("utf-8"))

    def raw(self) -> str:
        return str(self)

    def marshal_json(self) -> str:
        return '""'

    def __repr__(self) -> str:
        return f"Empty({str(self)!r})"


class Number(float, Value):
    """A numeric value."""

    __slots__ = ()

    def raw(self) -> float:
        return float(self)

    def __repr__(self) -> str:
        return f"Number({float(self)!r})"


@dataclass(frozen=True)
class Bool(Value):
    """A boolean value."""

    value: bool

    def raw(self) -> bool:
        return self.value

    def __bool__(self) -> bool:
        return self.value


class List(list, Value):
    """A list of values."""

    def underlying(self) -> list:
        """A plain copy of the elements."""
        return list(self)

    def length(self) -> int:
        return len(self)

    def raw(self) -> list:
        return self.underlying()

    def marshal_xml(self, name: str) -> str:
        if not self:
            return _element(name, "")
        return _element(name, "".join(_xml_child("item", item) for item in self))

    def __repr__(self) -> str:
        return f"List({list(self)!r})"


class Map(dict, Value):
    """A mapping of string keys to values."""

    def underlying(self) -> dict:
        """A plain copy of the entries."""
        return dict(self)

    def length(self) -> int:
        return len(self)

    def raw(self) -> dict:
        return self.underlying()

    def marshal_xml(self, name: str) -> str:
        if not self:
            return _element(name, "")
        entries = sorted((str(key), value) for key, value in self.items())
        return _element(name, "".join(_xml_child(key, value) for key, value in entries))

    def __repr__(self) -> str:
        return f"Map({dict(self)!r})"


def value_of(v: Any) -> Value:
    """Wrap a plain value in the matching :class:`Value` type."""
    if isinstance(v, Value):
        v = v.raw()
    if v is None:
        return Nil()
    if isinstance(v, bool):
        return Bool(v)
    if isinstance(v, str):
        return String(v) if v else Empty("")
    if isinstance(v, (int, float)):
        return Number(v)
    if isinstance(v, (list, tuple)):
        return List(v)
    if isinstance(v, Mapping):
        return Map(v)
    return Nil()


def type_of(t: str, v: Any) -> String:
    """Terraform type name: the declared one, or one guessed from the value."""
    if t:
        return String(t)
    if isinstance(v, Value):
        v = v.raw()
    if v is not None:
        if isinstance(v, bool):
            return String("bool")
        if isinstance(v, str):
            return String("string")
        if isinstance(v, (int, float)):
            return String("number")
        if isinstance(v, (list, tuple)):
            return String("list")
        if isinstance(v, Mapping):
            return String("map")
    return String("any")


# --- JSON ---------------------------------------------------------------


def _quote(text: str) -> str:
    return (
        json.dumps(text, ensure_ascii=False)
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def _encode_json(obj: Any, indent: str = "", escape_html: bool = False) -> str:
    text = _json(obj, indent, 0)
    if escape_html:
        text = text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return text


def _json(obj: Any, indent: str, level: int) -> str:
    if isinstance(obj, (Nil, String, Empty)):
        return obj.marshal_json()
    if isinstance(obj, Value):
        obj = obj.raw()
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, float):
        return _format_json_float(obj)
    if isinstance(obj, str):
        return _quote(obj)
    if isinstance(obj, Mapping):
        if not obj:
            return "{}"
        separator = ": " if indent else ":"
        entries = sorted((str(key), value) for key, value in obj.items())
        parts = [_quote(key) + separator + _json(value, indent, level + 1) for key, value in entries]
        return _wrap("{", "}", parts, indent, level)
    if isinstance(obj, (list, tuple)):
        if not obj:
            return "[]"
        parts = [_json(item, indent, level + 1) for item in obj]
        return _wrap("[", "]", parts, indent, level)
    raise TypeError(f"cannot encode {type(obj).__name__} as JSON")


def _wrap(opening: str, closing: str, parts: list[str], indent: str, level: int) -> str:
    if not indent:
        return opening + ",".join(parts) + closing
    inner = "\n" + indent * (level + 1)
    return opening + inner + ("," + inner).join(parts) + "\n" + indent * level + closing


# --- number formatting --------------------------------------------------


def _shortest_digits(x: float) -> tuple[str, int]:
    """Shortest decimal digits of a positive float and the decimal point position."""
    _, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, len(stripped) + exponent


def _fixed(digits: str, dp: int) -> str:
    if dp <= 0:
        return "0." + "0" * -dp + digits
    if dp >= len(digits):
        return digits + "0" * (dp - len(digits))
    return digits[:dp] + "." + digits[dp:]


def _exponent(digits: str, dp: int) -> str:
    exp = dp - 1
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    sign = "+" if exp >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exp):02d}"


def _format_json_float(x: float) -> str:
    if not math.isfinite(x):
        raise ValueError(f"unsupported value: {x!r}")
    if x == 0:
        return "0"
    magnitude = abs(x)
    digits, dp = _shortest_digits(magnitude)
    if magnitude < 1e-6 or magnitude >= 1e21:
        text = re.sub(r"e-0(\d)$", r"e-\1", _exponent(digits, dp))
    else:
        text = _fixed(digits, dp)
    return ("-" if x < 0 else "") + text


def _format_float_g(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "0"
    digits, dp = _shortest_digits(abs(x))
    eprec = 6
    if eprec > len(digits) and len(digits) >= dp:
        eprec = len(digits)
    exp = dp - 1
    text = _exponent(digits, dp) if exp < -4 or exp >= eprec else _fixed(digits, dp)
    return ("-" if x < 0 else "") + text


# --- XML ----------------------------------------------------------------

_XML_ESCAPES = {
    ord('"'): "&#34;",
    ord("'"): "&#39;",
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord("\t"): "&#x9;",
    ord("\n"): "&#xA;",
    ord("\r"): "&#xD;",
}
_XML_INVALID = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _escape(text: str) -> str:
    return _XML_INVALID.sub("\ufffd", text).translate(_XML_ESCAPES)


def _element(name: str, content: str) -> str:
    return f"<{name}>{content}</{name}>"


def _nil_element(name: str) -> str:
    return f'<{name} xsi:nil="true"></{name}>'


def _chardata(v: Any) -> str:
    if isinstance(v, Value):
        v = v.raw()
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return str(v)
    if isinstance(v, float):
        return _format_float_g(v)
    return _escape(str(v))


def _xml_child(name: str, v: Any) -> str:
    if isinstance(v, Mapping):
        return Map(v).marshal_xml(name)
    if isinstance(v, (list, tuple)):
        return List(v).marshal_xml(name)
    return _element(name, _chardata(v))