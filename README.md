# tfmoddocs

`tfmoddocs` builds a documentation model of a Terraform module. The model
holds the module's header and footer text, its input variables, outputs,
called modules, providers, requirements and resources. Each kind of item is
put in a predictable order. Values can be rendered as JSON, XML or as data
ready for a YAML serializer.

The package uses only the standard library.

## What it does not do

- It does not parse HCL. The declarations of a module (variables, outputs,
  module calls, resources, required providers) are handed in as a plain
  dictionary. From disk it reads only these:
  - header and footer files,
  - comments next to declarations,
  - the `.terraform.lock.hcl` file,
  - the output values file.
- It has no command-line tool.
- It does not render documents such as Markdown tables. It provides the
  model that such documents are built from.

## Loading a module

```python
from tfmoddocs.module import TerraformConfig, load_with_options
from tfmoddocs.options import Options, SortBy

data = {
    "variables": [
        {"name": "region", "type": "string", "default": "eu-west-1",
         "pos": {"filename": "my-module/variables.tf", "line": 1}},
        {"name": "name", "required": True,
         "pos": {"filename": "my-module/variables.tf", "line": 6}},
    ],
    "outputs": [
        {"name": "id", "description": "The id",
         "pos": {"filename": "my-module/outputs.tf", "line": 1}},
    ],
    "module_calls": [
        {"name": "vpc", "source": "git::example.com/vpc.git?ref=v1.2.0"},
    ],
    "managed_resources": [
        {"type": "aws_instance", "name": "web", "provider": {"name": "aws"}},
    ],
    "data_resources": [],
    "required_core": [">= 0.12"],
    "required_providers": {
        "aws": {"source": "hashicorp/aws", "version_constraints": [">= 2.15.0"]},
    },
}

options = Options(path="./my-module", sort_by=SortBy(name=True))
module = load_with_options(options, data)  # a TerraformConfig works as well

for item in module.inputs:
    print(item.name, item.type, item.get_value())
```

`load_with_options` takes either a `TerraformConfig` or the dictionary that
`TerraformConfig.from_dict` accepts. It raises `FileNotFoundError` when
`options.path` is set but is not a directory. It returns a `Module`, which
has these members:

- lists: `inputs`, `required_inputs`, `optional_inputs`, `module_calls`,
  `outputs`, `providers`, `requirements`, `resources`;
- text: `header` and `footer`;
- tests: `has_header()`, `has_footer()`, `has_inputs()`,
  `has_module_calls()`, `has_outputs()`, `has_providers()`,
  `has_requirements()` and `has_resources()`.

### The configuration dictionary

Each top-level key is optional. Each entry under one of these keys may carry
a `pos` of `{"filename": ..., "line": ...}`.

- `variables`: entries with `name`, `type`, `description`, `default` and
  `required`. If `required` is not given, a variable counts as required when
  it has no `default` key.
- `outputs`: entries with `name` and `description`.
- `module_calls`: entries with `name`, `source` and `version`. When the
  version is empty, a `?ref=` suffix on the source becomes the version.
- `managed_resources` and `data_resources`: entries with `type`, `name` and
  `provider` (`{"name": ..., "alias": ...}`). When the provider name is
  missing, it is taken from the resource type's prefix.
- `required_core`: a list of Terraform version constraints.
- `required_providers`: a mapping from provider name to
  `{"source": ..., "version_constraints": [...]}`.

Each of the four entry keys (`variables`, `outputs`, `module_calls` and the
two resource keys) may be a list or a mapping. For a mapping, its values are
used.

When a variable or an output has no description, the `#` or `//` comment
lines directly above its position are read from its file and used instead.

### Options

`tfmoddocs.options.Options` has these fields:

| Field | Default | Meaning |
| --- | --- | --- |
| `path` | `""` | the module directory |
| `show_header` | `True` | read a header |
| `header_from_file` | `"main.tf"` | file the header comes from |
| `show_footer` | `False` | read a footer |
| `footer_from_file` | `""` | file the footer comes from |
| `use_lock_file` | `True` | take provider versions from `.terraform.lock.hcl` |
| `sort_by` | `SortBy()` | how items are ordered |
| `output_values` | `False` | include the values of outputs |
| `output_values_path` | `""` | JSON file of output values |

Settings can be layered with two methods. Each takes a mapping of field
names and returns the options object.

- `Options.merge(override)` fills only fields that are empty. For `sort_by`,
  the flags are combined.
- `Options.merge_overwrite(override)` replaces a field wherever the override
  holds a non-empty value.

Both methods skip empty values in the override. Both raise `ValueError` for
`None` and `TypeError` for unknown field names.

### Header and footer

Headers and footers can come from `.adoc`, `.md`, `.tf` or `.txt` files.
Any other extension raises `ValueError`, and so does an empty file name.

- A `.tf` file supplies its leading `/* ... */` block comment.
- Any other supported file is read whole.
- If the header is to come from the default `main.tf` and that file is
  missing, the header is empty.
- Any other missing file raises `FileNotFoundError`.

### Output values

When `output_values` is set, the values come from one of two places:

- the JSON file named by `output_values_path`, or
- the result of running `terraform output -json` in the module directory.

The JSON maps each output name to `{"sensitive": ..., "value": ...}`.

- A sensitive value is shown as `<sensitive>`.
- An output with no entry in the JSON raises `ValueError`.
- A failure to read the file or to run the command raises `RuntimeError`.

### Sorting

`SortBy(name=..., required=..., type=...)` controls the order of items.

- Inputs: sorted by type when `type` is set, otherwise with required inputs
  first when `required` is set, otherwise by name when `name` is set.
  Without any flag they keep file position order.
- Outputs and providers: sorted by name when any flag is set, otherwise by
  position.
- Module calls: sorted by name for `name` or `required`, by source for
  `type`, and by position otherwise.
- Resources: always ordered as managed resources first, then data sources,
  each by address.

The same orderings are available on their own:

- `tfmoddocs.inputs.sort_inputs_by_name`, `sort_inputs_by_required`,
  `sort_inputs_by_position` and `sort_inputs_by_type`;
- `tfmoddocs.outputs.sort_outputs_by_name` and `sort_outputs_by_position`;
- `tfmoddocs.provider.sort_providers_by_name` and
  `sort_providers_by_position`;
- `tfmoddocs.modulecall.sort_modulecalls_by_name`,
  `sort_modulecalls_by_source` and `sort_modulecalls_by_position`;
- `tfmoddocs.resource.sort_resources_by_type`.

The smaller helpers of `tfmoddocs.module` can also be called directly:
`load_header`, `load_footer`, `load_section`, `load_inputs`,
`load_outputs`, `load_output_values`, `load_providers`,
`load_requirements`, `load_resources`, `load_modulecalls`,
`load_comments`, `format_source`, `resource_version`, `get_file_format`,
`is_file_format_supported`, `load_module_items` and `sort_items`.

## Items

These are the item types and their methods:

- `Input.get_value()`: the default value as indented JSON. It is `""` for a
  required input without a default and `null` for an optional one.
- `Input.has_default()`: whether the input has a default value.
- `Output.get_value()` and `Output.has_default()`: the same for outputs,
  taking `show_value` into account.
- `Output.marshal_json()` and `Output.marshal_xml(name)`: include `value`
  and `sensitive` only when values are shown.
- `Output.marshal_yaml()`: returns an `OutputValue` when values are shown,
  and an `Output` with both fields cleared otherwise.
- `ModuleCall.full_name()`: `source,version`.
- `Provider.full_name()`: `name.alias`.
- `Requirement`: a plain record with `name` and `version`.
- `Resource.spec()`: `provider_type.name`.
- `Resource.get_mode()`: `resource`, `data source` or `invalid`.
- `Resource.url()`: a Terraform Registry documentation link, or `""` when
  none can be formed.
- `Position`: a record of `filename` and `line`.

## Value types

`tfmoddocs.types` wraps default and output values in typed objects. The
classes are `Nil`, `String`, `Empty`, `Number`, `Bool`, `List` and `Map`,
and each is a `Value`. Every value supports these methods:

- `has_default()`
- `length()`
- `raw()`
- `marshal_json()`
- `marshal_xml(name)`
- `marshal_yaml()`

`List.underlying()` and `Map.underlying()` return plain copies of their
contents.

```python
from tfmoddocs.types import value_of, type_of

value_of([1, 2]).marshal_xml("default")  # '<default><item>1</item><item>2</item></default>'
value_of("").marshal_json()              # '""'
value_of(None).marshal_xml("v")          # '<v xsi:nil="true"></v>'
type_of("", {"a": 1}) == "map"           # True
```

## Version

```python
from tfmoddocs.version import core, short, full

core()              # '0.15.0'
short()             # '0.15.0-alpha'
full("abc1234")     # e.g. 'v0.15.0-alpha abc1234 linux/amd64'
```

The output of `full` depends on the platform it runs on.