from typing import Annotated, Any, TypeAlias

# Type aliases for common Packagist types
PackageName: TypeAlias = Annotated[str, "Name of the package on Packagist, e.g monolog/monolog"]
VersionString: TypeAlias = Annotated[str, "Version of the package on Packagist, e.g v1.2.3"]
VersionRecord: TypeAlias = Annotated[dict[str, Any], "Fully expanded metadata of one release"]
DeltaRecord: TypeAlias = Annotated[
    dict[str, Any], "Minified metadata of one release, relative to the previous one"
]
VersionList: TypeAlias = Annotated[list[VersionRecord], "Expanded releases in registry order"]
