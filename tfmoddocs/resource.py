"""Resources and data sources declared by a Terraform module."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key

from .position import Position
from .types import String

_REGISTRY = "https://registry.terraform.io/providers"

_MODE_NAMES = {"managed": "resource", "data": "data source"}
_MODE_KINDS = {"managed": "resources", "data": "data-sources"}


@dataclass
class Resource:
    """A managed resource or data source created by the module."""

    type: str
    name: str = ""
    provider_name: str = ""
    provider_source: str = ""
    mode: str = ""
    version: String = field(default_factory=lambda: String(""))
    position: Position = field(default_factory=Position)

    def spec(self) -> str:
        """Resource address in the form ``<provider>_<type>.<name>``."""
        return f"{self.provider_name}_{self.type}.{self.name}"

    def get_mode(self) -> str:
        """Normalised mode: ``resource``, ``data source`` or ``invalid``."""
        return _MODE_NAMES.get(self.mode, "invalid")

    def url(self) -> str:
        """Best guess at the registry documentation URL, or empty if unknown."""
        kind = _MODE_KINDS.get(self.mode)
        if kind is None:
            return ""
        if self.provider_source.count("/") > 1:
            return ""
        return f"{_REGISTRY}/{self.provider_source}/{self.version}/docs/{kind}/{self.type}"


def _type_cmp(a: Resource, b: Resource) -> int:
    if a.mode != b.mode:
        return -1 if a.mode > b.mode else 1
    spec_a, spec_b = a.spec(), b.spec()
    if spec_a != spec_b:
        return -1 if spec_a < spec_b else 1
    if a.name != b.name:
        return -1 if a.name < b.name else 1
    return 0


def sort_resources_by_type(resources: Iterable[Resource]) -> list[Resource]:
    """Return resources grouped by mode (managed, data, other), each sorted by address."""
    return sorted(resources, key=cmp_to_key(_type_cmp))