"""
Composer version ordering.

Composer versions look like `1.2.3`, `v2.0.0-RC1`, `3.0.0-beta.2`,
`1.0.0-patch1`, `2.0.x-dev` or `dev-main`. They are ranked by their numbered
part first and by their stability modifier second:

    alpha < beta < RC < stable < patch < dev

Normalization follows https://github.com/composer/semver/blob/main/src/VersionParser.php
closely enough to pick the latest release of a package.
"""

import logging
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, Sequence

from packagist_release.internals.types import VersionString

logger = logging.getLogger(__name__)

# a non-numeric segment such as the `x` of `2.0.x-dev` ranks above any number
WILDCARD_SEGMENT = 0xFFFFFFFF

modifier_count_pattern = re.compile(r"(\d+)")


class Modifier(IntEnum):
    ALPHA = 0
    BETA = 1
    RC = 2
    STABLE = 3
    PATCH = 4
    DEV = 5


# checked in order, longest spelling first
MODIFIER_PREFIXES: list[tuple[str, Modifier]] = [
    ("alpha", Modifier.ALPHA),
    ("a", Modifier.ALPHA),
    ("beta", Modifier.BETA),
    ("b", Modifier.BETA),
    ("rc", Modifier.RC),
    ("patch", Modifier.PATCH),
    ("pl", Modifier.PATCH),
    ("p", Modifier.PATCH),
    ("dev", Modifier.DEV),
    ("d", Modifier.DEV),
]


class UnparsableVersion(ValueError):
    pass


class VersionOracle(Protocol):
    def is_stable(self, version: VersionString) -> bool: ...

    def latest(self, versions: Sequence[VersionString]) -> VersionString | None: ...


@dataclass(frozen=True)
class ComposerVersion:
    numbers: tuple[int, ...]
    modifier: Modifier
    modifier_count: int

    @property
    def sort_key(self) -> tuple[tuple[int, ...], int, int]:
        return self.numbers, self.modifier, self.modifier_count

    @property
    def is_stable(self) -> bool:
        return self.modifier in (Modifier.STABLE, Modifier.PATCH)


def omit_v(version: VersionString) -> str:
    if version[:1] in ("v", "V"):
        return version[1:]
    return version


def _parse_modifier(modifier: str) -> tuple[Modifier, int]:
    lowered = modifier.lower()
    for prefix, level in MODIFIER_PREFIXES:
        if lowered.startswith(prefix):
            count = modifier_count_pattern.search(lowered[len(prefix) :])
            return level, int(count.group(1)) if count else 0
    raise UnparsableVersion(f"Unknown stability modifier: {modifier}")


def _to_number(segment: str) -> int:
    if segment.isdigit():
        return int(segment)
    return WILDCARD_SEGMENT


def parse_version(version: VersionString) -> ComposerVersion:
    """
    Parse a Composer version string.

    Raises UnparsableVersion when the string has no usable numbered part
    or an unknown modifier.
    """
    raw = omit_v(version.strip())
    if not raw:
        raise UnparsableVersion(f"Empty version: {version!r}")

    parts = raw.split("-")

    # branch aliases such as dev-main or dev-feature-x
    if parts[0].lower() == "dev" and len(parts) > 1:
        return ComposerVersion(numbers=(), modifier=Modifier.DEV, modifier_count=0)

    numbered = parts[0]
    if not numbered or not numbered[0].isdigit():
        raise UnparsableVersion(f"Version does not start with a number: {version!r}")

    modifier, modifier_count = Modifier.STABLE, 0
    if len(parts) > 1 and parts[-1]:
        modifier, modifier_count = _parse_modifier(parts[-1])

    numbers = tuple(_to_number(segment) for segment in numbered.split("."))
    return ComposerVersion(
        numbers=numbers, modifier=modifier, modifier_count=modifier_count
    )


def ordering_key(version: VersionString) -> tuple:
    """
    Total ordering key: unparsable versions rank below every parsable one
    and compare by plain string among themselves.
    """
    try:
        return (1, parse_version(version).sort_key)
    except UnparsableVersion:
        return (0, omit_v(version))


def compare(first: VersionString, second: VersionString) -> int:
    """Return -1, 0 or 1 as `first` ranks below, equal to or above `second`."""
    first_key, second_key = ordering_key(first), ordering_key(second)

    if first_key < second_key:
        return -1
    if first_key > second_key:
        return 1
    return 0


def is_stable(version: VersionString) -> bool:
    try:
        return parse_version(version).is_stable
    except UnparsableVersion:
        logger.debug("Treating unparsable version %s as unstable", version)
        return False


def latest(versions: Sequence[VersionString]) -> VersionString | None:
    """
    Return the greatest version, or None for an empty sequence.
    On ties the earliest version wins.
    """
    if not versions:
        return None
    return max(versions, key=ordering_key)


class ComposerVersionOracle:
    """Default VersionOracle, ranking versions the way Packagist does."""

    def is_stable(self, version: VersionString) -> bool:
        return is_stable(version)

    def latest(self, versions: Sequence[VersionString]) -> VersionString | None:
        return latest(versions)


default_oracle = ComposerVersionOracle()
