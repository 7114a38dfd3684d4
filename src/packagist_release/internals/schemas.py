"""
Shapes of the Packagist responses.

Only the fields we rely on are described; everything else the registry sends
is allowed and passed through untouched.
"""

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, RootModel

from packagist_release.internals.types import PackageName

UnsetMarker: TypeAlias = Literal["__unset"]


class DeltaVersion(BaseModel):
    """One entry of the minified version list of a p2 response."""

    model_config = ConfigDict(extra="allow")

    version: str | None = None
    require: dict[str, Any] | UnsetMarker | None = None


class PackageVersions(RootModel):
    root: list[DeltaVersion]


class PackagistMetadata(BaseModel):
    """
    Response of `/p2/{vendor}/{package}.json` and `/p2/{vendor}/{package}~dev.json`:
    {"packages": {"vendor/package": [...minified versions...]}}
    """

    model_config = ConfigDict(extra="allow")

    packages: dict[PackageName, PackageVersions]
    minified: str | None = Field(default=None, description="Minifier version, e.g composer/2.0")


class PackageInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: PackageName
    versions: dict[str, dict[str, Any]] = Field(default_factory=dict)


class PackageJson(BaseModel):
    """Response of the JSON API, `/packages/{vendor}/{package}.json`."""

    model_config = ConfigDict(extra="allow")

    package: PackageInfo
