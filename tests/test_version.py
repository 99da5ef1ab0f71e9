from tfmoddocs.version import core, full, short


def test_core_version():
    assert core() == "0.15.0"


def test_short_adds_prerelease():
    assert short() == "0.15.0-alpha"
    assert short().startswith(core())


def test_full_without_commit():
    parts = full().split(" ")
    assert len(parts) == 2
    assert parts[0] == "v" + short()
    assert parts[1].count("/") == 1


def test_full_with_commit():
    assert full("abc1234").startswith("v" + short() + " abc1234 ")


def test_full_commit_with_leading_space_is_not_doubled():
    assert full(" abc1234") == full("abc1234")