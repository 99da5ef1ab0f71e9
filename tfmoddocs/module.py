"""Loading a Terraform module and the items it documents."""

from __future__ import annotations

import errno
import json
import os
import re
import subprocess
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from itertools import takewhile
from typing import Any

from .inputs import (
    Input,
    sort_inputs_by_name,
    sort_inputs_by_position,
    sort_inputs_by_required,
    sort_inputs_by_type,
)
from .modulecall import (
    ModuleCall,
    sort_modulecalls_by_name,
    sort_modulecalls_by_position,
    sort_modulecalls_by_source,
)
from .options import Options, SortBy
from .outputs import Output, sort_outputs_by_name, sort_outputs_by_position
from .position import Position
from .provider import Provider, Requirement, sort_providers_by_name, sort_providers_by_position
from .resource import Resource, sort_resources_by_type
from .types import String, type_of, value_of

_SUPPORTED_FORMATS = (".adoc", ".md", ".tf", ".txt")
_REF_MARKER = "?ref="
_LOCK_FILE = ".terraform.lock.hcl"
_LOCK_PROVIDER = re.compile(r'^\s*provider\s+"([^"]*)"\s*\{(.*?)^\s*\}', re.MULTILINE | re.DOTALL)
_LOCK_VERSION = re.compile(r'^\s*version\s*=\s*"([^"]*)"', re.MULTILINE)


# --- parsed configuration -------------------------------------------------


def _position(data: Mapping[str, Any] | None) -> Position:
    data = data or {}
    return Position(filename=str(data.get("filename", "")), line=int(data.get("line", 0)))


def _entries(data: Any) -> Iterable[Mapping[str, Any]]:
    if not data:
        return []
    if isinstance(data, Mapping):
        return list(data.values())
    return list(data)


@dataclass(frozen=True)
class _Variable:
    name: str
    type: str = ""
    description: str = ""
    default: Any = None
    required: bool = False
    position: Position = field(default_factory=Position)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> _Variable:
        return cls(
            name=data["name"],
            type=data.get("type") or "",
            description=data.get("description") or "",
            default=data.get("default"),
            required=bool(data.get("required", "default" not in data)),
            position=_position(data.get("pos")),
        )


@dataclass(frozen=True)
class _OutputBlock:
    name: str
    description: str = ""
    position: Position = field(default_factory=Position)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> _OutputBlock:
        return cls(
            name=data["name"],
            description=data.get("description") or "",
            position=_position(data.get("pos")),
        )


@dataclass(frozen=True)
class _ModuleCallBlock:
    name: str
    source: str = ""
    version: str = ""
    position: Position = field(default_factory=Position)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> _ModuleCallBlock:
        return cls(
            name=data["name"],
            source=data.get("source") or "",
            version=data.get("version") or "",
            position=_position(data.get("pos")),
        )


@dataclass(frozen=True)
class _ProviderRef:
    name: str
    alias: str = ""


@dataclass(frozen=True)
class _ResourceBlock:
    mode: str
    type: str
    name: str
    provider: _ProviderRef
    position: Position = field(default_factory=Position)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], mode: str) -> _ResourceBlock:
        rtype = data["type"]
        provider = data.get("provider") or {}
        return cls(
            mode=data.get("mode") or mode,
            type=rtype,
            name=data["name"],
            provider=_ProviderRef(
                name=provider.get("name") or rtype.split("_", 1)[0],
                alias=provider.get("alias") or "",
            ),
            position=_position(data.get("pos")),
        )


@dataclass(frozen=True)
class _ProviderRequirement:
    source: str = ""
    version_constraints: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> _ProviderRequirement:
        data = data or {}
        return cls(
            source=data.get("source") or "",
            version_constraints=tuple(data.get("version_constraints") or ()),
        )


@dataclass
class TerraformConfig:
    """The declarations found in the ``.tf`` files of a module."""

    variables: list[_Variable] = field(default_factory=list)
    outputs: list[_OutputBlock] = field(default_factory=list)
    module_calls: list[_ModuleCallBlock] = field(default_factory=list)
    managed_resources: list[_ResourceBlock] = field(default_factory=list)
    data_resources: list[_ResourceBlock] = field(default_factory=list)
    required_core: list[str] = field(default_factory=list)
    required_providers: dict[str, _ProviderRequirement] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TerraformConfig:
        """Build a configuration from its JSON-style description."""
        return cls(
            variables=[_Variable.from_dict(v) for v in _entries(data.get("variables"))],
            outputs=[_OutputBlock.from_dict(o) for o in _entries(data.get("outputs"))],
            module_calls=[_ModuleCallBlock.from_dict(m) for m in _entries(data.get("module_calls"))],
            managed_resources=[
                _ResourceBlock.from_dict(r, "managed") for r in _entries(data.get("managed_resources"))
            ],
            data_resources=[
                _ResourceBlock.from_dict(r, "data") for r in _entries(data.get("data_resources"))
            ],
            required_core=list(data.get("required_core") or ()),
            required_providers={
                name: _ProviderRequirement.from_dict(req)
                for name, req in (data.get("required_providers") or {}).items()
            },
        )


# --- module ---------------------------------------------------------------


@dataclass
class Module:
    """A Terraform module and everything documented about it."""

    header: str = ""
    footer: str = ""
    inputs: list[Input] = field(default_factory=list)
    module_calls: list[ModuleCall] = field(default_factory=list)
    outputs: list[Output] = field(default_factory=list)
    providers: list[Provider] = field(default_factory=list)
    requirements: list[Requirement] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)
    required_inputs: list[Input] = field(default_factory=list)
    optional_inputs: list[Input] = field(default_factory=list)

    def has_header(self) -> bool:
        return bool(self.header)

    def has_footer(self) -> bool:
        return bool(self.footer)

    def has_inputs(self) -> bool:
        return bool(self.inputs)

    def has_module_calls(self) -> bool:
        return bool(self.module_calls)

    def has_outputs(self) -> bool:
        return bool(self.outputs)

    def has_providers(self) -> bool:
        return bool(self.providers)

    def has_requirements(self) -> bool:
        return bool(self.requirements)

    def has_resources(self) -> bool:
        return bool(self.resources)


def load_with_options(options: Options, config: TerraformConfig | Mapping[str, Any]) -> Module:
    """Load the documented items of the module at ``options.path``."""
    if isinstance(config, Mapping):
        config = TerraformConfig.from_dict(config)
    if options.path and not os.path.isdir(options.path):
        raise _file_not_found(options.path)
    module = load_module_items(config, options)
    sort_items(module, options.sort_by)
    return module


def load_module_items(config: TerraformConfig, options: Options) -> Module:
    """Collect header, footer and all items of the module, unsorted."""
    header = load_header(options)
    footer = load_footer(options)
    inputs, required, optional = load_inputs(config)
    return Module(
        header=header,
        footer=footer,
        inputs=inputs,
        module_calls=load_modulecalls(config),
        outputs=load_outputs(config, options),
        providers=load_providers(config, options),
        requirements=load_requirements(config),
        resources=load_resources(config),
        required_inputs=required,
        optional_inputs=optional,
    )


# --- header and footer ----------------------------------------------------


def get_file_format(filename: str) -> str:
    """Extension of ``filename`` including the dot, or an empty string."""
    last = filename.rfind(".")
    if last == -1:
        return ""
    return filename[last:]


def is_file_format_supported(filename: str, section: str) -> bool:
    """Check that ``filename`` can be read for ``section``; raise ValueError if not."""
    if not section:
        raise ValueError("section is missing")
    if not filename:
        raise ValueError(f"--{section}-from value is missing")
    if get_file_format(filename) in _SUPPORTED_FORMATS:
        return True
    raise ValueError(f"only .adoc, .md, .tf, and .txt formats are supported to read {section} from")


def load_header(options: Options) -> str:
    """The module header, or an empty string if it is not shown."""
    if not options.show_header:
        return ""
    return load_section(options, options.header_from_file, "header")


def load_footer(options: Options) -> str:
    """The module footer, or an empty string if it is not shown."""
    if not options.show_footer:
        return ""
    return load_section(options, options.footer_from_file, "footer")


def load_section(options: Options, file: str, section: str) -> str:
    """Read a header or footer from ``file`` inside the module directory."""
    if not section:
        raise ValueError("section is missing")
    filename = os.path.join(options.path, file)
    is_file_format_supported(file, section)
    if not os.path.exists(filename):
        if section == "header" and file == "main.tf":
            return ""
        raise _file_not_found(filename)
    if os.path.isdir(filename):
        return ""
    if get_file_format(file) != ".tf":
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.read()
    return "\n".join(_extract_lines(filename, -1, _is_block_comment, _parse_block_comment))


def _is_block_comment(line: str) -> bool:
    return line.strip().startswith(("/*", "*"))


def _parse_block_comment(line: str) -> str | None:
    stripped = line.strip()
    if stripped.startswith(("/*", "*/")):
        return None
    if stripped == "*":
        return ""
    return line.lstrip(" ").rstrip("\r\n").removeprefix("* ")


def _is_line_comment(line: str) -> bool:
    return line.startswith(("#", "//"))


def _parse_line_comment(line: str) -> str:
    return line.strip().removeprefix("#").removeprefix("//").strip()


def _extract_lines(
    filename: str,
    line_num: int,
    condition: Callable[[str], bool],
    parser: Callable[[str], str | None],
) -> list[str]:
    """Parse the leading block of matching lines (``line_num`` < 0) or the block just above ``line_num``."""
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        lines = handle.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    if line_num < 0:
        block = list(takewhile(condition, lines))
    else:
        if line_num > len(lines):
            raise ValueError(f"line number {line_num} is out of range in {filename}")
        preceding = lines[: max(line_num - 1, 0)]
        block = list(takewhile(condition, reversed(preceding)))[::-1]
    return [parsed for parsed in map(parser, block) if parsed is not None]


def load_comments(filename: str, line_num: int) -> str:
    """Comment lines right above ``line_num`` joined by spaces; empty on any error."""
    try:
        comment = _extract_lines(filename, line_num, _is_line_comment, _parse_line_comment)
    except (OSError, ValueError):
        return ""
    return " ".join(comment)


# --- items ----------------------------------------------------------------


def load_inputs(config: TerraformConfig) -> tuple[list[Input], list[Input], list[Input]]:
    """All inputs, the required ones and the optional ones."""
    inputs: list[Input] = []
    required: list[Input] = []
    optional: list[Input] = []
    for variable in config.variables:
        description = variable.description.replace("\r\n", "\n")
        if not description:
            description = load_comments(variable.position.filename, variable.position.line)
        item = Input(
            name=variable.name,
            type=type_of(variable.type, variable.default),
            description=String(description),
            default=value_of(variable.default),
            required=variable.required,
            position=variable.position,
        )
        inputs.append(item)
        (optional if item.has_default() else required).append(item)
    return inputs, required, optional


def format_source(source: str, version: str) -> tuple[str, str]:
    """Split a ``?ref=`` suffix off ``source`` unless a version is already given."""
    if version:
        return source, version
    pos = source.rfind(_REF_MARKER)
    if pos == -1:
        return source, ""
    start = pos + len(_REF_MARKER)
    if start >= len(source):
        return source, ""
    return source[:pos], source[start:]


def load_modulecalls(config: TerraformConfig) -> list[ModuleCall]:
    """The submodules called by the module."""
    calls = []
    for call in config.module_calls:
        source, version = format_source(call.source, call.version)
        calls.append(ModuleCall(name=call.name, source=source, version=version, position=call.position))
    return calls


def load_outputs(config: TerraformConfig, options: Options) -> list[Output]:
    """The outputs of the module, with their values if requested."""
    values = load_output_values(options) if options.output_values else {}
    outputs = []
    for block in config.outputs:
        description = block.description or load_comments(block.position.filename, block.position.line)
        output = Output(
            name=block.name,
            description=String(description),
            position=block.position,
            show_value=options.output_values,
        )
        if options.output_values:
            entry = values.get(output.name)
            if entry is None:
                raise ValueError(f"no value found for output {output.name!r}")
            output.sensitive = bool(entry.get("sensitive", False))
            output.value = value_of("<sensitive>" if output.sensitive else entry.get("value"))
        outputs.append(output)
    return outputs


def load_output_values(options: Options) -> dict[str, dict[str, Any]]:
    """Output values from ``terraform output -json`` or from the configured file."""
    if not options.output_values_path:
        try:
            completed = subprocess.run(
                ["terraform", "output", "-json"],
                cwd=options.path or None,
                capture_output=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise RuntimeError(f"caught error while reading the terraform outputs: {exc}") from exc
        data = completed.stdout
    else:
        try:
            with open(options.output_values_path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise RuntimeError(
                "caught error while reading the terraform outputs file at "
                f"{options.output_values_path}: {exc}"
            ) from exc
    values = json.loads(data)
    if values is None:
        return {}
    if not isinstance(values, dict):
        raise ValueError("terraform outputs must be a JSON object")
    return values


def _read_lock_versions(filename: str) -> dict[str, str]:
    try:
        with open(filename, encoding="utf-8") as handle:
            text = "\n".join(line for line in handle.read().splitlines() if not line.lstrip().startswith("#"))
    except OSError:
        return {}
    versions: dict[str, str] = {}
    for block in _LOCK_PROVIDER.finditer(text):
        version = _LOCK_VERSION.search(block.group(2))
        if version is None:
            return {}
        versions[block.group(1).rsplit("/", 1)[-1]] = version.group(1)
    return versions


def load_providers(config: TerraformConfig, options: Options) -> list[Provider]:
    """Providers used by the resources of the module, one per name and alias."""
    lock = _read_lock_versions(os.path.join(options.path, _LOCK_FILE)) if options.use_lock_file else {}
    discovered: dict[str, Provider] = {}
    for resource in (*config.managed_resources, *config.data_resources):
        name = resource.provider.name
        version = ""
        if name in lock:
            version = lock[name]
        elif name in config.required_providers and config.required_providers[name].version_constraints:
            version = " ".join(config.required_providers[name].version_constraints)
        discovered[f"{name}.{resource.provider.alias}"] = Provider(
            name=name,
            alias=String(resource.provider.alias),
            version=String(version),
            position=resource.position,
        )
    return list(discovered.values())


def load_requirements(config: TerraformConfig) -> list[Requirement]:
    """Terraform core requirements followed by provider requirements sorted by name."""
    requirements = [Requirement(name="terraform", version=String(core)) for core in config.required_core]
    for name in sorted(config.required_providers):
        requirements.extend(
            Requirement(name=name, version=String(version))
            for version in config.required_providers[name].version_constraints
        )
    return requirements


def load_resources(config: TerraformConfig) -> list[Resource]:
    """Managed resources and data sources declared by the module."""
    discovered: dict[str, Resource] = {}
    for block in (*config.managed_resources, *config.data_resources):
        provider = block.provider.name
        requirement = config.required_providers.get(provider)
        version = resource_version(list(requirement.version_constraints)) if requirement else ""
        source = requirement.source if requirement and requirement.source else f"hashicorp/{provider}"
        rtype = block.type.removeprefix(provider + "_")
        discovered[f"{provider}.{block.mode}.{rtype}.{block.name}"] = Resource(
            type=rtype,
            name=block.name,
            mode=block.mode,
            provider_name=provider,
            provider_source=source,
            version=String(version),
            position=block.position,
        )
    return list(discovered.values())


def resource_version(constraints: list[str]) -> str:
    """The exact version pinned by the last constraint, or ``latest``."""
    if not constraints:
        return "latest"
    parts = constraints[-1].split(" ")
    if len(parts) == 1:
        first = parts[0][:1]
        if first and first in "0123456789":
            return parts[0]
        if first == "=":
            return parts[0][1:]
        return "latest"
    if len(parts) == 2 and parts[0] == "=":
        return parts[1]
    return "latest"


def sort_items(module: Module, sort_by: SortBy | None) -> None:
    """Order the items of ``module`` in place according to ``sort_by``."""
    sort_by = sort_by or SortBy()

    if sort_by.type:
        sort_inputs = sort_inputs_by_type
    elif sort_by.required:
        sort_inputs = sort_inputs_by_required
    elif sort_by.name:
        sort_inputs = sort_inputs_by_name
    else:
        sort_inputs = sort_inputs_by_position
    module.inputs = sort_inputs(module.inputs)
    module.required_inputs = sort_inputs(module.required_inputs)
    module.optional_inputs = sort_inputs(module.optional_inputs)

    by_name = sort_by.name or sort_by.required or sort_by.type
    module.outputs = (sort_outputs_by_name if by_name else sort_outputs_by_position)(module.outputs)
    module.providers = (sort_providers_by_name if by_name else sort_providers_by_position)(module.providers)
    module.resources = sort_resources_by_type(module.resources)

    if sort_by.name or sort_by.required:
        module.module_calls = sort_modulecalls_by_name(module.module_calls)
    elif sort_by.type:
        module.module_calls = sort_modulecalls_by_source(module.module_calls)
    else:
        module.module_calls = sort_modulecalls_by_position(module.module_calls)


def _file_not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)