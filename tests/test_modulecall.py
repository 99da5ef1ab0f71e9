import pytest

from tfmoddocs.modulecall import (
    ModuleCall,
    sort_modulecalls_by_name,
    sort_modulecalls_by_position,
    sort_modulecalls_by_source,
)
from tfmoddocs.position import Position


def test_full_name_without_version():
    assert ModuleCall(name="provider", source="bar").full_name() == "bar"


def test_full_name_with_version():
    assert ModuleCall(name="provider", source="bar", version="1.2.3").full_name() == "bar,1.2.3"


def _sample():
    return [
        ModuleCall("a", "z", "1.2.3", Position("foo/main.tf", 35)),
        ModuleCall("b", "z", "1.2.3", Position("foo/main.tf", 10)),
        ModuleCall("c", "m", "1.2.3", Position("foo/main.tf", 23)),
        ModuleCall("e", "x", "1.2.3", Position("foo/main.tf", 42)),
        ModuleCall("d", "l", "1.2.3", Position("foo/main.tf", 51)),
        ModuleCall("f", "a", "1.2.3", Position("foo/main.tf", 59)),
    ]


@pytest.mark.parametrize(
    "sorter, expected",
    [
        (sort_modulecalls_by_name, ["a", "b", "c", "d", "e", "f"]),
        (sort_modulecalls_by_source, ["f", "d", "c", "e", "a", "b"]),
        (sort_modulecalls_by_position, ["b", "c", "a", "e", "d", "f"]),
    ],
)
def test_modulecall_sort(sorter, expected):
    assert [m.name for m in sorter(_sample())] == expected