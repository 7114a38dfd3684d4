"""Read Composer metadata from Packagist and pick the release you asked for."""

__version__ = "0.1.0"

from packagist_release.internals.errors import (  # noqa: E402
    InvalidVersion,
    NoReleasedVersion,
    NotFound,
    PackagistError,
    RegistryError,
)
from packagist_release.internals.minifier import (  # noqa: E402
    expand,
    expand_package_versions,
)
from packagist_release.internals.packagist import (  # noqa: E402
    fetch_by_json_api,
    fetch_dev,
    fetch_release,
    fetch_versions,
    get_package_name,
)
from packagist_release.internals.php_version import (  # noqa: E402
    ComposerVersionOracle,
    VersionOracle,
    is_stable,
    latest,
)
from packagist_release.internals.resolver import (  # noqa: E402
    find_latest_release,
    find_specified_version,
)

__all__ = [
    "__version__",
    "ComposerVersionOracle",
    "InvalidVersion",
    "NoReleasedVersion",
    "NotFound",
    "PackagistError",
    "RegistryError",
    "VersionOracle",
    "expand",
    "expand_package_versions",
    "fetch_by_json_api",
    "fetch_dev",
    "fetch_release",
    "fetch_versions",
    "find_latest_release",
    "find_specified_version",
    "get_package_name",
    "is_stable",
    "latest",
]
