"""Location of Terraform module items in their source files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Position of a Terraform item (input, output, provider, ...) in a file."""

    filename: str = ""
    line: int = 0