"""gitcred — manage host-scoped git credentials from the command line.

Commands
--------
  path         Print the credentials file location
  get          Look up the credential for a host
  list         List every stored credential in a rich table
  store        Replace the credentials file with a single entry
  mirror-name  Derive a mirror repository name from a URL
  mirror-url   Derive a full mirror URL from a base URL and a source URL
  info         Show credentials file metadata
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from . import __version__
from .mirror import mirror_name, mirror_url
from .models import CredentialRecord
from .store import CredentialStore

# ---------------------------------------------------------------------------
# App & consoles
# ---------------------------------------------------------------------------

_THEME = Theme(
    {
        "success": "bold green",
        "warning": "bold yellow",
        "danger": "bold red",
        "muted": "dim",
        "label": "cyan",
        "highlight": "bold white",
    }
)

console = Console(theme=_THEME)
err = Console(stderr=True, theme=_THEME)

app = typer.Typer(
    name="gitcred",
    help="[bold cyan]gitcred[/bold cyan] — host-scoped git credentials on local disk.",
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
)

_MASK = "••••••••••••"

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=err, show_path=False, show_time=False)
    logger = logging.getLogger("gitcred")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _get_base_dir(ctx: typer.Context) -> Optional[Path]:
    home = (ctx.obj or {}).get("home")
    if home:
        return home
    env = os.environ.get("GITCRED_HOME")
    if env:
        return Path(env)
    return None


def _store(ctx: typer.Context) -> CredentialStore:
    return CredentialStore(_get_base_dir(ctx))


def _render_credential(cred: CredentialRecord, *, show_password: bool = False) -> None:
    body = Text()

    def row(label: str, value: str, style: str = "highlight") -> None:
        body.append(f"  {label:<10}", style="label")
        body.append(value + "\n", style=style)

    row("Username", cred.username)
    row("Password", cred.password if show_password else _MASK, style="bold green" if show_password else "muted")

    console.print(
        Panel(body, title=f"[bold cyan]{cred.host_pattern}[/bold cyan]", expand=False, border_style="cyan")
    )


def _render_table(creds: list[CredentialRecord], title: str = "Credentials") -> None:
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        highlight=True,
        title_style="bold",
    )
    table.add_column("#", style="muted", justify="right", no_wrap=True)
    table.add_column("Host", style="bold white", min_width=16)
    table.add_column("Username", style="dim", min_width=14)
    table.add_column("Password", style="muted")

    # File order matters: the first matching row wins a lookup.
    for i, c in enumerate(creds, 1):
        table.add_row(str(i), c.host_pattern, c.username, _MASK)
    console.print(table)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    home: Annotated[
        Optional[Path],
        typer.Option("--home", help="Directory holding .git-credentials (default: $GITCRED_HOME or ~).", show_default=False),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    _configure_logging(verbose)
    ctx.obj = {"home": home}


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the credentials file location."""
    typer.echo(str(_store(ctx).path))


@app.command()
def get(
    ctx: typer.Context,
    host: Annotated[str, typer.Argument(help="Host or URL to find a credential for.")],
    show: Annotated[bool, typer.Option("--show", "-s", help="Display password in plain text.")] = False,
) -> None:
    """Look up the first stored credential whose host occurs in HOST."""
    cred = _store(ctx).find(host)
    if cred is None:
        err.print(f"[danger]No credential found for '[bold]{host}[/bold]'.[/danger]")
        raise typer.Exit(1)
    _render_credential(cred, show_password=show)


@app.command("list")
def list_creds(ctx: typer.Context) -> None:
    """List every stored credential in file order."""
    report = _store(ctx).parse()

    if report.read_error:
        err.print(f"[warning]Could not read {report.path}:[/warning] {report.read_error}")
    if not report.found:
        console.print(f"[muted]No credentials file at {report.path}.[/muted]")
        return
    if report.records:
        _render_table(report.records, title=f"Credentials ({len(report.records)} total)")
    elif not report.read_error:
        console.print("[muted]No credentials stored.[/muted]")
    if report.skipped:
        lines = ", ".join(str(s.line_number) for s in report.skipped)
        console.print(f"[warning]Skipped {len(report.skipped)} malformed line(s):[/warning] {lines}")


@app.command()
def store(
    ctx: typer.Context,
    host: Annotated[str, typer.Argument(help="Host (optionally with path) the credential is for.")],
    username: Annotated[str, typer.Option("--username", "-u", help="Username.")],
    password: Annotated[Optional[str], typer.Option("--password", "-p", help="Password (prompted if omitted).")] = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip the overwrite confirmation.")] = False,
) -> None:
    """Replace the credentials file with a single entry for HOST.

    Every credential previously stored, for any host, is removed.
    """
    cred_store = _store(ctx)

    if cred_store.exists() and not yes:
        overwrite = Confirm.ask(
            f"[warning]{cred_store.path} already exists and will be replaced. Continue?[/warning]",
            default=False,
            console=console,
        )
        if not overwrite:
            raise typer.Exit(0)

    if password is None:
        password = Prompt.ask("  Password", password=True, console=console)
    if not password:
        err.print("[danger]Password cannot be empty.[/danger]")
        raise typer.Exit(1)

    result = cred_store.write(host, username, password)
    if not result.ok:
        err.print(f"[danger]Unable to update the git credentials file:[/danger] {result.error}")
        raise typer.Exit(1)

    console.print(f"[success]Credential for '[bold]{host}[/bold]' saved.[/success]")


@app.command("mirror-name")
def mirror_name_cmd(
    url: Annotated[str, typer.Argument(help="Source repository URL.")],
) -> None:
    """Print the mirror repository name derived from URL."""
    typer.echo(mirror_name(url))


@app.command("mirror-url")
def mirror_url_cmd(
    base_url: Annotated[str, typer.Argument(help="Mirror server base URL.")],
    url: Annotated[str, typer.Argument(help="Source repository URL.")],
) -> None:
    """Print the full mirror URL for URL under BASE_URL."""
    typer.echo(mirror_url(base_url, url))


@app.command()
def info(ctx: typer.Context) -> None:
    """Show credentials file metadata and location."""
    report = _store(ctx).parse()

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Version", __version__)
    table.add_row("File path", str(report.path))
    table.add_row("File exists", "[green]yes[/green]" if report.found else "[red]no[/red]")

    if report.found:
        mode = report.path.stat().st_mode & 0o777 if report.path.is_file() else None
        if mode is not None:
            table.add_row("Permissions", oct(mode))
        table.add_row("Credentials", str(len(report.records)))
        table.add_row("Skipped lines", str(len(report.skipped)))
    if report.read_error:
        table.add_row("Read error", f"[red]{report.read_error}[/red]")

    console.print(Panel(table, title="[bold cyan]gitcred info[/bold cyan]", border_style="cyan", expand=False))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    app()


if __name__ == "__main__":
    main()
