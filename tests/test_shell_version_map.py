import pytest

from shellextensions.shell_version_map import MapEntry, ShellVersionMap


def test_empty_map_supports_nothing():
    version_map = ShellVersionMap()
    assert not version_map.supports("40")
    assert len(version_map) == 0


def test_add_splits_major_and_minor():
    version_map = ShellVersionMap()
    version_map.add("3.36", 1234, 7.0)
    assert list(version_map) == [MapEntry("3", "36", 1234, 7.0)]


def test_add_without_minor():
    version_map = ShellVersionMap()
    version_map.add("42", 55, 3.0)
    entry = version_map.entries[0]
    assert entry.shell_major_version == "42"
    assert entry.shell_minor_version is None


def test_major_only_entry_supports_any_minor():
    version_map = ShellVersionMap()
    version_map.add("40", 1, 1.0)
    assert version_map.supports("40")
    assert version_map.supports("40.1")
    assert not version_map.supports("41")


def test_minor_entry_matches_equal_or_more_specific():
    version_map = ShellVersionMap()
    version_map.add("3.36", 1, 1.0)
    assert version_map.supports("3.36")
    assert version_map.supports("3.36.2")
    assert not version_map.supports("3.38")
    assert not version_map.supports("3")


def test_supports_checks_every_entry():
    version_map = ShellVersionMap()
    version_map.add("3.38", 1, 1.0)
    version_map.add("44", 2, 2.0)
    assert version_map.supports("44")
    assert version_map.supports("3.38")
    assert not version_map.supports("45")


def test_from_json_preserves_order_and_values():
    data = {
        "3.38": {"pk": 101, "version": 5},
        "40": {"pk": 202, "version": 9},
    }
    version_map = ShellVersionMap.from_json(data)
    assert [e.extension_package for e in version_map] == [101, 202]
    assert [e.extension_version for e in version_map] == [5.0, 9.0]
    assert version_map.supports("40.2")


def test_from_json_rejects_non_object():
    with pytest.raises(ValueError):
        ShellVersionMap.from_json(["40"])


def test_from_json_rejects_non_object_entry():
    with pytest.raises(ValueError):
        ShellVersionMap.from_json({"40": 3})