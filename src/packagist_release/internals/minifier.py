"""
Expansion of Composer "minified" metadata.

The Packagist v2 API (`/p2/{vendor}/{package}.json`) ships the releases of a
package as a list where only the first entry is complete. Every following
entry contains just the fields that changed compared to the previous, already
expanded, entry:

    [
        {"version": "2.0.0", "license": ["MIT"], "require": {"php": ">=8.1"}},
        {"version": "1.9.0", "require": {"php": ">=7.4"}},
        {"version": "1.0.0", "require": "__unset"},
    ]

A field set to the string "__unset" is removed from the expanded entry.

See https://github.com/composer/metadata-minifier/blob/main/src/MetadataMinifier.php
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, TypeAlias

from packagist_release.internals.types import (
    DeltaRecord,
    PackageName,
    VersionList,
    VersionRecord,
)

UNSET_MARKER = "__unset"


@dataclass(frozen=True)
class Set:
    value: Any


@dataclass(frozen=True)
class Unset:
    pass


FieldChange: TypeAlias = Set | Unset


def is_unset(value: Any) -> bool:
    return isinstance(value, str) and value == UNSET_MARKER


def decode_delta(record: DeltaRecord) -> Iterator[tuple[str, FieldChange]]:
    """
    Turn a delta record into (field, change) pairs.

    Fields that are absent from the record are kept as they are, so they
    produce no change at all.
    """
    for key, value in record.items():
        if is_unset(value):
            yield key, Unset()
        else:
            yield key, Set(value)


def apply_delta(current: VersionRecord, record: DeltaRecord) -> VersionRecord:
    """Return a new record made of `current` with the changes of `record` applied."""
    # markers can only be inherited from the base snapshot, they never survive a merge
    merged = {key: value for key, value in current.items() if not is_unset(value)}
    for key, change in decode_delta(record):
        match change:
            case Set(value=value):
                merged[key] = value
            case Unset():
                merged.pop(key, None)
    return merged


def expand(delta_records: Iterable[DeltaRecord]) -> VersionList:
    """
    Expand a minified list of releases back to full records.

    The first record is the base snapshot and is copied as is, "__unset"
    values included. Every later record is merged on top of the expanded
    record before it. Output order and length follow the input.
    """
    expanded: VersionList = []
    current: VersionRecord | None = None

    for record in delta_records:
        if current is None:
            current = dict(record)
        else:
            current = apply_delta(current, record)
        expanded.append(dict(current))

    return expanded


def expand_package_versions(
    payload: dict[str, Any], package_name: PackageName
) -> VersionList:
    """
    Extract the minified releases of `package_name` from a p2 response
    and expand them.
    """
    packages = payload.get("packages") or {}
    return expand(packages.get(package_name) or [])
