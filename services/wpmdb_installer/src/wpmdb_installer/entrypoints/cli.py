from pathlib import Path
import json as _json
import logging
import os

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from wpmdb_installer.adapters.environment.mapping import MappingEnvironment
from wpmdb_installer.adapters.environment.process import ProcessEnvironment
from wpmdb_installer.adapters.policy.lock_schema import LockSchemaPolicy
from wpmdb_installer.application.fetch_url import fetch_url_for
from wpmdb_installer.application.lock import DEFAULT_LOCK_NAME
from wpmdb_installer.application.manifest import DEFAULT_MANIFEST_NAME
from wpmdb_installer.application.result_serialization import serialize_result
from wpmdb_installer.application.sync_lock import resolve_into_lock, sync_lock
from wpmdb_installer.application.validate_lock import validate_lock
from wpmdb_installer.domain.diagnostics import Severity
from wpmdb_installer.domain.package import PackageRef
from wpmdb_installer.domain.result import Result
from wpmdb_installer.domain.variants import (
    PACKAGE_NAME,
    classify_variant,
    package_name_for,
)
from wpmdb_installer.ports.environment import EnvironmentPort

LOCK_ENV_VARIABLE = "WPMDB_PRO_LOCK"

app = typer.Typer(
    add_completion=False,
    help="Resolve download URLs for WP Migrate DB Pro and its add-ons.",
)
console = Console(stderr=True)

_SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARN: "yellow",
    Severity.INFO: "blue",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level="DEBUG" if verbose else "INFO",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
                show_level=verbose,
            )
        ],
        force=True,
    )


def _lock_path(lock: Path | None) -> Path:
    if lock is not None:
        return lock
    return Path(os.environ.get(LOCK_ENV_VARIABLE) or DEFAULT_LOCK_NAME)


def _report(result: Result, command: str, args: list[str], json: bool) -> None:
    if json:
        typer.echo(_json.dumps(serialize_result(result, command=command, args=args)))
        return
    for d in result.diagnostics:
        style = _SEVERITY_STYLES[d.severity]
        console.print(
            f"[{style}]{d.severity.value}[/{style}] {d.code}: {escape(d.message)}",
            markup=True,
            highlight=False,
        )
        if d.hint:
            console.print(f"  hint: {d.hint}", markup=False, highlight=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    _configure_logging(verbose)


@app.command()
def resolve(
    source: str = typer.Argument(..., help="Source URL of the package definition."),
    version: str = typer.Argument(..., help='Exact version, or "*" for latest.'),
    name: str | None = typer.Option(
        None, "--name", help="Package name; derived from the source when omitted."
    ),
    lock: Path | None = typer.Option(None, "--lock"),
    json: bool = False,
):
    """Resolve one package and record its dist URL in the lock."""
    if name is None:
        name = package_name_for(classify_variant(source))
    package = PackageRef(name=name, pretty_version=version, source_url=source)
    result = resolve_into_lock(_lock_path(lock), package)
    _report(result, "resolve", [source, version], json)
    if result.value is not None and not json:
        typer.echo(result.value.dist_url)
    raise typer.Exit(result.exit_code)


@app.command()
def sync(
    manifest: Path = typer.Option(Path(DEFAULT_MANIFEST_NAME), "--manifest"),
    lock: Path | None = typer.Option(None, "--lock"),
    json: bool = False,
):
    """Resolve every package of the manifest and rewrite the lock."""
    result = sync_lock(manifest, _lock_path(lock))
    _report(result, "sync", [str(manifest)], json)
    if result.value is not None and not json:
        for package in result.value:
            typer.echo(f"{package.name} {package.dist_url}")
    raise typer.Exit(result.exit_code)


@app.command("fetch-url")
def fetch_url(
    name: str = typer.Argument(PACKAGE_NAME),
    lock: Path | None = typer.Option(None, "--lock"),
    env_file: Path | None = typer.Option(
        None, "--env-file", exists=True, dir_okay=False
    ),
):
    """Print the authenticated download URL of a locked package."""
    env: EnvironmentPort = (
        MappingEnvironment.from_env_file(env_file) if env_file else ProcessEnvironment()
    )
    result = fetch_url_for(_lock_path(lock), name, env)
    _report(result, "fetch-url", [name], json=False)
    if result.value is not None:
        typer.echo(result.value)
    raise typer.Exit(result.exit_code)


@app.command()
def validate(
    lock: Path | None = typer.Option(None, "--lock"),
    json: bool = False,
    strict: bool = typer.Option(False, "--strict"),
):
    """Check the lock record: versions, variants, canonical URLs, no credentials."""
    result = validate_lock(
        _lock_path(lock), strict=strict, policy_engine=LockSchemaPolicy()
    )
    _report(result, "validate", [], json)
    raise typer.Exit(result.exit_code)
