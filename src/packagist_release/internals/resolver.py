import logging
from typing import Sequence

from packagist_release.internals.errors import InvalidVersion, NoReleasedVersion
from packagist_release.internals.php_version import VersionOracle, default_oracle
from packagist_release.internals.types import VersionRecord, VersionString

logger = logging.getLogger(__name__)


def _first_with_version(
    versions: Sequence[VersionRecord], version: VersionString
) -> VersionRecord | None:
    for record in versions:
        if record.get("version") == version:
            return record
    return None


def find_latest_release(
    versions: Sequence[VersionRecord],
    include_prereleases: bool = False,
    oracle: VersionOracle = default_oracle,
) -> VersionRecord:
    """
    Find the record of the latest release.

    Stable releases are preferred unless `include_prereleases` is set. When a
    package has no stable release at all, its latest pre-release is returned.
    Records without a string `version` are ignored.

    Raises:
        NoReleasedVersion: if no record carries a version string.
    """
    version_strings = [
        record["version"]
        for record in versions
        if isinstance(record.get("version"), str)
    ]
    if not version_strings:
        raise NoReleasedVersion("no released version found")

    release = oracle.latest(version_strings)
    if not include_prereleases:
        stable_release = oracle.latest(
            [version for version in version_strings if oracle.is_stable(version)]
        )
        if stable_release:
            release = stable_release
        else:
            logger.debug("No stable release among %d versions", len(version_strings))

    found = _first_with_version(versions, release)
    if found is None:
        # the oracle returned something that is not one of our versions
        raise NoReleasedVersion("no released version found")
    return found


def find_specified_version(
    versions: Sequence[VersionRecord], version: VersionString
) -> VersionRecord:
    """
    Return the first record whose version is exactly `version`.

    Raises:
        InvalidVersion: if no record matches.
    """
    found = _first_with_version(versions, version)
    if found is None:
        raise InvalidVersion("invalid version")
    return found
