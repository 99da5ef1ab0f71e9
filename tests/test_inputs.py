import pytest

from tfmoddocs.inputs import (
    Input,
    sort_inputs_by_name,
    sort_inputs_by_position,
    sort_inputs_by_required,
    sort_inputs_by_type,
)
from tfmoddocs.position import Position
from tfmoddocs.types import String, value_of


def _make(default, required):
    return Input(
        name="input",
        type=String("type"),
        description=String("description"),
        default=value_of(default),
        required=required,
        position=Position("foo.tf", 13),
    )


@pytest.mark.parametrize(
    "default, required, expect_value, expect_default",
    [
        (None, True, "", False),
        (None, False, "null", True),
        (True, False, "true", True),
        (False, False, "false", True),
        ("", False, '""', True),
        ("foo", False, '"foo"', True),
        (42, False, "42", True),
        (13.75, False, "13.75", True),
        (["a", "b", "c"], False, '[\n  "a",\n  "b",\n  "c"\n]', True),
        ([], False, "[]", True),
        ({"a": 1, "b": 2, "c": 3}, False, '{\n  "a": 1,\n  "b": 2,\n  "c": 3\n}', True),
        ({}, False, "{}", True),
    ],
)
def test_input_value_and_has_default(default, required, expect_value, expect_default):
    item = _make(default, required)
    assert item.get_value() == expect_value
    assert item.has_default() is expect_default


def test_default_input_has_no_default_when_required():
    item = Input(name="x", required=True)
    assert item.get_value() == ""
    assert item.has_default() is False


def _sample_inputs():
    return [
        Input("e", String(""), String("description of e"), value_of(True), False, Position("foo/variables.tf", 35)),
        Input("a", String("string"), String(""), value_of("a"), False, Position("foo/variables.tf", 10)),
        Input("d", String("string"), String("description for d"), value_of(None), True, Position("foo/variables.tf", 23)),
        Input("b", String("number"), String("description of b"), value_of(None), True, Position("foo/variables.tf", 42)),
        Input("c", String("list"), String("description of c"), value_of("c"), False, Position("foo/variables.tf", 51)),
        Input("f", String("string"), String("description of f"), value_of(None), False, Position("foo/variables.tf", 59)),
    ]


@pytest.mark.parametrize(
    "sorter, expected",
    [
        (sort_inputs_by_name, ["a", "b", "c", "d", "e", "f"]),
        (sort_inputs_by_required, ["b", "d", "a", "c", "e", "f"]),
        (sort_inputs_by_position, ["a", "d", "e", "b", "c", "f"]),
        (sort_inputs_by_type, ["e", "c", "b", "a", "d", "f"]),
    ],
)
def test_inputs_sorted(sorter, expected):
    assert [i.name for i in sorter(_sample_inputs())] == expected


def test_sorting_keeps_all_items():
    inputs = _sample_inputs()
    result = sort_inputs_by_name(inputs)
    assert sorted(i.name for i in result) == sorted(i.name for i in inputs)
    assert len(result) == len(inputs)