"""
Command line interface for gclone.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from .environment import EnvironmentMismatchError, validate_environment
from .logger import configure_logging, get_logger
from .reconcile import ReconcileError
from .remote import GitExecutableError
from .services import CloneService, CloneStatus
from .settings import AppSettings, SettingsError, load_settings
from .version import PROGRAM_NAME, version_banner

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Clone a repository into the current <container>/<owner> directory.",
    add_completion=False,
)
configure_logging()
log = get_logger(__name__)

PLACEHOLDER_OWNER = "OWNER"


def _usage(settings: AppSettings, owner: str) -> str:
    return "\n".join(
        [
            f"Usage: {PROGRAM_NAME} <repo-name>",
            "",
            f"  Clones {settings.host_url}/{owner}/<repo-name> into ./<repo-name>",
            f"  Run from a directory laid out as {settings.container}/{owner}",
        ]
    )


def _not_found(remote_url: str) -> str:
    return "\n".join(
        [
            f"Repository not found: {remote_url}",
            "Possible causes:",
            "  * the repository name is misspelled",
            "  * you do not have permission to access it",
            "  * the network or remote host is unreachable",
        ]
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(version_banner())
        raise typer.Exit()


def _build_service(settings: AppSettings) -> CloneService:
    return CloneService(settings)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def clone(
    repo_names: Optional[List[str]] = typer.Argument(
        None, metavar="REPO-NAME", help="Repository to clone from the current owner."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show the program version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Write diagnostic logs to stderr."
    ),
) -> None:
    """Clone REPO-NAME into the current directory after resolving conflicts."""
    configure_logging(debug=debug)

    try:
        settings = load_settings()
    except SettingsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    try:
        identity = validate_environment(settings.container)
    except EnvironmentMismatchError as exc:
        typer.echo(_usage(settings, PLACEHOLDER_OWNER))
        typer.echo(f"\nError: {exc}.", err=True)
        raise typer.Exit(code=1)

    args = list(repo_names or [])
    if len(args) != 1:
        typer.echo(_usage(settings, identity.owner))
        raise typer.Exit()

    service = _build_service(settings)
    try:
        result = service.run(identity, args[0])
    except ReconcileError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    except GitExecutableError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=exc.exit_code)

    if result.status is CloneStatus.NOT_FOUND:
        typer.echo(_not_found(result.target.remote_url), err=True)
    raise typer.Exit(code=result.exit_code)


def main() -> None:  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    app()
