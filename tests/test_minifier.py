"""Tests for the expansion of Composer minified metadata."""

from conftests import MONOLOG_P2
from packagist_release.internals.minifier import (
    Set,
    Unset,
    apply_delta,
    decode_delta,
    expand,
    expand_package_versions,
)


def test_expand_empty():
    assert expand([]) == []


def test_first_record_is_copied_as_is():
    base = {"version": "1.0.0", "require": "__unset"}

    assert expand([base]) == [{"version": "1.0.0", "require": "__unset"}]


def test_missing_fields_are_inherited():
    result = expand([{"a": "1", "b": "2"}, {"b": "3"}])

    assert result == [{"a": "1", "b": "2"}, {"a": "1", "b": "3"}]


def test_unset_marker_removes_field():
    result = expand([{"a": "1", "b": "2"}, {"b": "__unset"}])

    assert result == [{"a": "1", "b": "2"}, {"a": "1"}]


def test_unset_applies_only_to_its_record():
    result = expand(
        [
            {"version": "3.0.0", "require": {"php": ">=8.1"}},
            {"version": "2.0.0", "require": "__unset"},
            {"version": "1.0.0"},
            {"version": "0.9.0", "require": {"php": ">=5.3"}},
        ]
    )

    assert result == [
        {"version": "3.0.0", "require": {"php": ">=8.1"}},
        {"version": "2.0.0"},
        {"version": "1.0.0"},
        {"version": "0.9.0", "require": {"php": ">=5.3"}},
    ]


def test_markers_of_the_base_record_are_dropped_on_first_merge():
    result = expand([{"version": "2.0.0", "license": "__unset"}, {"version": "1.0.0"}])

    assert result == [{"version": "2.0.0", "license": "__unset"}, {"version": "1.0.0"}]


def test_output_mirrors_input_order_and_length():
    deltas = [{"version": f"1.{minor}.0"} for minor in range(10, 0, -1)]

    result = expand(deltas)

    assert len(result) == len(deltas)
    assert [record["version"] for record in result] == [d["version"] for d in deltas]


def test_records_are_independent_copies():
    deltas = [{"version": "2.0.0", "license": ["MIT"]}, {"version": "1.0.0"}]

    result = expand(deltas)
    result[0]["version"] = "changed"
    result[1]["homepage"] = "https://example.com"

    assert result[1]["version"] == "1.0.0"
    assert "homepage" not in result[0]
    assert deltas[0] == {"version": "2.0.0", "license": ["MIT"]}


def test_nested_values_are_not_inspected():
    # "__unset" only counts at the top level
    result = expand(
        [
            {"version": "2.0.0", "require": {"php": ">=8.1"}},
            {"version": "1.0.0", "require": {"php": "__unset"}},
        ]
    )

    assert result[1] == {"version": "1.0.0", "require": {"php": "__unset"}}


def test_records_without_version_pass_through():
    result = expand([{"name": "a/b"}, {"time": "2024-01-01"}])

    assert result == [{"name": "a/b"}, {"name": "a/b", "time": "2024-01-01"}]


def test_decode_delta():
    changes = dict(decode_delta({"version": "1.0.0", "suggest": "__unset", "n": 0}))

    assert changes == {"version": Set("1.0.0"), "suggest": Unset(), "n": Set(0)}


def test_apply_delta_does_not_mutate_current():
    current = {"version": "2.0.0", "license": ["MIT"]}

    merged = apply_delta(current, {"version": "1.0.0", "license": "__unset"})

    assert merged == {"version": "1.0.0"}
    assert current == {"version": "2.0.0", "license": ["MIT"]}


def test_expand_package_versions():
    versions = expand_package_versions(MONOLOG_P2, "monolog/monolog")

    assert [v["version"] for v in versions] == ["3.5.0", "3.0.0-RC1", "2.9.2", "1.0.0"]
    assert versions[1]["license"] == ["MIT"]
    assert versions[1]["require"] == {"php": ">=8.1"}
    assert "suggest" in versions[1]
    assert "suggest" not in versions[2]
    assert "require" not in versions[3]


def test_expand_package_versions_unknown_package():
    assert expand_package_versions(MONOLOG_P2, "other/package") == []
