import json
import logging
from pathlib import Path
from typing import Annotated, Any, NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from packagist_release.internals.config import get_settings
from packagist_release.internals.errors import PackagistError
from packagist_release.internals.minifier import expand_package_versions
from packagist_release.internals.packagist import (
    fetch_versions,
    get_package_name,
    split_package_name,
)
from packagist_release.internals.resolver import (
    find_latest_release,
    find_specified_version,
)
from packagist_release.internals.schemas import PackagistMetadata

app = typer.Typer(no_args_is_help=True, pretty_exceptions_enable=False)

console = Console()
err_console = Console(stderr=True)

PackageArgument = Annotated[
    str,
    typer.Argument(help="Package name in `vendor/package` format. Example: `monolog/monolog`."),
]
ServerOption = Annotated[
    Optional[str],
    typer.Option(help="Base URL of a self-hosted Packagist instance."),
]
DevOption = Annotated[
    bool,
    typer.Option("--dev", help="Read the dev branches (`~dev.json`) instead of tagged releases."),
]


def _parse_package(package: str) -> tuple[str, str]:
    try:
        return split_package_name(package)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data), highlight=False)


def _fail(exc: PackagistError) -> NoReturn:
    err_console.print(f"[red]✗[/red] {exc.pretty_message}")
    raise typer.Exit(1)


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option(help="Log level, defaults to PACKAGIST_LOG_LEVEL or WARNING."),
    ] = None,
):
    """
    \bpackagist-release reads Composer metadata from a Packagist registry.
     It can:
    - `latest` - show the record of the latest release of a package.
    - `show` - show the record of one specific version.
    - `expand` - expand a saved minified p2 response.
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        err_console.print(f"[red]✗[/red] Invalid configuration: {exc}")
        raise typer.Exit(1)

    level = (log_level or settings.log_level).upper()
    if level not in logging.getLevelNamesMapping():
        if log_level:
            raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")
        err_console.print(f"[red]✗[/red] Invalid configuration: unknown log level {level}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def latest(
    package: PackageArgument,
    include_prereleases: Annotated[
        bool, typer.Option(help="Consider alpha, beta, RC and dev versions too.")
    ] = False,
    dev: DevOption = False,
    server: ServerOption = None,
):
    """
    Show the latest release of a package.

    Stable releases win over pre-releases unless `--include-prereleases` is given.
    """
    user, repo = _parse_package(package)
    try:
        versions = fetch_versions(user, repo, server=server, dev=dev)
        record = find_latest_release(versions, include_prereleases=include_prereleases)
    except PackagistError as exc:
        _fail(exc)
    _print_json(record)


@app.command()
def show(
    package: PackageArgument,
    version: Annotated[
        str, typer.Argument(help="Exact version string. Example: `3.5.0` or `v1.0.0-RC1`.")
    ],
    dev: DevOption = False,
    server: ServerOption = None,
):
    """
    Show the record of one exact version of a package.
    """
    user, repo = _parse_package(package)
    try:
        versions = fetch_versions(user, repo, server=server, dev=dev)
        record = find_specified_version(versions, version)
    except PackagistError as exc:
        _fail(exc)
    _print_json(record)


@app.command()
def expand(
    file: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="Saved response of `/p2/{vendor}/{package}.json`."),
    ],
    package: PackageArgument,
):
    """
    Expand the minified versions of a saved p2 response, without any network access.
    """
    user, repo = _parse_package(package)
    try:
        payload = json.loads(file.read_text())
        PackagistMetadata.model_validate(payload)
    except (ValueError, ValidationError) as exc:
        err_console.print(f"[red]✗[/red] {file} is not a valid p2 response: {exc}")
        raise typer.Exit(1)

    _print_json(expand_package_versions(payload, get_package_name(user, repo)))
