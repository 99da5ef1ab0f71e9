"""Options controlling how a Terraform module is loaded."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any


@dataclass
class SortBy:
    """Sort criteria for module items."""

    name: bool = False
    required: bool = False
    type: bool = False


@dataclass
class Options:
    """Options needed to load a module from a path."""

    path: str = ""
    show_header: bool = True
    header_from_file: str = "main.tf"
    show_footer: bool = False
    footer_from_file: str = ""
    use_lock_file: bool = True
    sort_by: SortBy | None = field(default_factory=SortBy)
    output_values: bool = False
    output_values_path: str = ""

    def merge(self, override: Mapping[str, Any]) -> Options:
        """Fill empty options from the non-empty values in ``override``."""
        return self._apply(override, overwrite=False)

    def merge_overwrite(self, override: Mapping[str, Any]) -> Options:
        """Replace options with the non-empty values in ``override``."""
        return self._apply(override, overwrite=True)

    def _apply(self, override: Mapping[str, Any] | None, overwrite: bool) -> Options:
        if override is None:
            raise ValueError("cannot use None as override value")
        if not isinstance(override, Mapping):
            raise TypeError(f"override must be a mapping, not {type(override).__name__}")
        known = {f.name for f in fields(self)}
        unknown = sorted(set(override) - known)
        if unknown:
            raise TypeError(f"unknown option(s): {', '.join(unknown)}")

        for name, value in override.items():
            if _is_empty(value):
                continue
            current = getattr(self, name)
            if name == "sort_by" and not overwrite and current is not None:
                self.sort_by = replace(
                    current,
                    **{f.name: getattr(current, f.name) or getattr(value, f.name) for f in fields(current)},
                )
            elif overwrite or _is_empty(current):
                setattr(self, name, value)
        return self


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, SortBy):
        return False
    return not value