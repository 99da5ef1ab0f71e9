import dataclasses

import pytest

from tfmoddocs.position import Position


def test_fields_hold_given_values():
    position = Position("foo.tf", 13)
    assert position.filename == "foo.tf"
    assert position.line == 13


def test_default_position_is_empty():
    assert Position() == Position(filename="", line=0)


def test_equality_by_value():
    assert Position("foo.tf", 13) == Position(filename="foo.tf", line=13)
    assert not Position("foo.tf", 13) == Position("foo.tf", 14)


def test_position_is_immutable():
    position = Position("foo.tf", 13)
    with pytest.raises(dataclasses.FrozenInstanceError):
        position.line = 14
    assert position.line == 13
    assert position == Position("foo.tf", 13)


def test_positions_are_hashable():
    positions = {Position("a.tf", 1), Position("a.tf", 1), Position("b.tf", 1)}
    assert len(positions) == 2