"""
HTTP access to a Packagist registry.

The composer metadata API (`/p2/...`) is the preferred way to read releases:
it is always up to date and served from static files. The JSON API
(`/packages/...`) carries extra data such as download counts, but Packagist
caches it for twelve hours so it may be outdated.

See https://packagist.org/apidoc#get-package-data
"""

import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from packagist_release.internals.config import get_settings
from packagist_release.internals.errors import NotFound, RegistryError
from packagist_release.internals.http_utils import get_global_session
from packagist_release.internals.minifier import expand_package_versions
from packagist_release.internals.schemas import PackageJson, PackagistMetadata
from packagist_release.internals.types import PackageName, VersionList

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_package_name(user: str, repo: str) -> PackageName:
    return f"{user.lower()}/{repo.lower()}"


def split_package_name(package: str) -> tuple[str, str]:
    """Split `vendor/package` into its two halves."""
    user, sep, repo = package.strip().partition("/")
    if not sep or not user or not repo or "/" in repo:
        raise ValueError(
            f"Invalid package name '{package}'. Expected format: 'vendor/package'"
        )
    return user, repo


def _resolve_server(server: str | None) -> str:
    if server:
        return server.rstrip("/")
    return get_settings().server_url


def _request_json(url: str, model: type[ModelT]) -> dict[str, Any]:
    """
    GET `url`, validate the body against `model` and return it as received.
    """
    session = get_global_session()
    logger.debug("Requesting %s", url)

    try:
        response = session.get(url, timeout=get_settings().timeout)
        if response.status_code == 404:
            logger.warning("Package not found at %s", url)
            raise NotFound("package not found")
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Failed to fetch %s: %s", url, exc)
        raise RegistryError(f"failed to fetch {url}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        logger.error("Response of %s is not valid JSON: %s", url, exc)
        raise RegistryError("invalid response data") from exc

    try:
        model.model_validate(payload)
    except ValidationError as exc:
        logger.error("Unexpected response shape at %s: %s", url, exc)
        raise RegistryError("invalid response data") from exc

    return payload


def fetch_release(user: str, repo: str, server: str | None = None) -> dict[str, Any]:
    """Fetch the minified metadata of the tagged releases."""
    url = f"{_resolve_server(server)}/p2/{user.lower()}/{repo.lower()}.json"
    return _request_json(url, PackagistMetadata)


def fetch_dev(user: str, repo: str, server: str | None = None) -> dict[str, Any]:
    """Fetch the minified metadata of the dev branches."""
    url = f"{_resolve_server(server)}/p2/{user.lower()}/{repo.lower()}~dev.json"
    return _request_json(url, PackagistMetadata)


def fetch_by_json_api(
    user: str, repo: str, server: str | None = None
) -> dict[str, Any]:
    """
    Fetch the package through the JSON API.

    Prefer `fetch_release`, the JSON API responses may be up to twelve hours old.
    """
    url = f"{_resolve_server(server)}/packages/{user}/{repo}.json"
    return _request_json(url, PackageJson)


def fetch_versions(
    user: str, repo: str, server: str | None = None, dev: bool = False
) -> VersionList:
    """Fetch and expand every release of a package, in registry order."""
    fetch = fetch_dev if dev else fetch_release
    payload = fetch(user, repo, server=server)
    return expand_package_versions(payload, get_package_name(user, repo))
