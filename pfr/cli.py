"""Typer-based console interface for ``pfr``.

The root callback loads a local ``.env`` (python-dotenv, never overriding
variables that are already set), configures logging and binds a
:class:`~pfr.storage.LedgerStore` to the context. Commands are thin: they
parse arguments, call into ``pfr.storage``/``pfr.snapshots``/``pfr.api`` and
turn :class:`~pfr.errors.PfrError` into an ``Error: ...`` line on stderr with
exit status 1. Argument-parsing failures are reported by Typer (exit 2).
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from .errors import LedgerExists, PfrError
from .logging_setup import configure_logging, get_logger
from .models import Transaction
from .storage import LedgerStore

_logger = get_logger("pfr.cli")


app = typer.Typer(
    name="pfr",
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Personal finance reporter: track recurring incomes and expenses and "
        "report what each account needs every month."
    ),
)


# ---- Small helpers ------------------------------------------------------------


def _store(ctx: typer.Context) -> LedgerStore:
    store = ctx.obj
    if not isinstance(store, LedgerStore):  # pragma: no cover - callback always sets it
        store = LedgerStore()
        ctx.obj = store
    return store


def _fail(exc: Exception) -> typer.Exit:
    _logger.debug("command failed", exc_info=True)
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(1)


def _confirmed(message: str, *, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    # Deferred import keeps prompt_toolkit off the non-interactive paths.
    from .term_ui import confirm

    return confirm(message, default=False)


# ---- Commands -------------------------------------------------------------------


@app.command("init")
def init_cmd(
    ctx: typer.Context,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Replace an existing ledger without asking.")
    ] = False,
) -> None:
    """Create an empty ledger."""

    store = _store(ctx)
    try:
        store.init(overwrite=force)
    except LedgerExists:
        if not _confirmed(f"A ledger already exists at {store.path}. Replace it?", assume_yes=False):
            typer.echo("Ledger left unchanged.", err=True)
            raise typer.Exit(1) from None
        try:
            store.init(overwrite=True)
        except PfrError as exc:
            raise _fail(exc) from exc
    except PfrError as exc:
        raise _fail(exc) from exc
    typer.echo(f"Initialized empty ledger at {store.path}")


@app.command("add")
def add_cmd(
    ctx: typer.Context,
    kind: Annotated[str, typer.Argument(help="income or expense")],
    frequency: Annotated[str, typer.Argument(help="weekly or monthly")],
    name: Annotated[str, typer.Argument(help="Display name of the transaction")],
    amount: Annotated[str, typer.Argument(help="Non-negative amount per occurrence")],
    account: Annotated[
        str | None, typer.Option("--account", "-a", help="Account the expense is paid from")
    ] = None,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Category used in the breakdown")
    ] = None,
) -> None:
    """Add a recurring income or expense to the ledger."""

    try:
        tx = Transaction.parse(kind, frequency, name, amount, category=category, account=account)
        _store(ctx).add(tx)
    except PfrError as exc:
        raise _fail(exc) from exc


@app.command("list")
def list_cmd(ctx: typer.Context) -> None:
    """List ledger entries, tab-separated, in ledger order."""

    try:
        transactions = _store(ctx).load()
    except PfrError as exc:
        raise _fail(exc) from exc
    for tx in transactions:
        typer.echo(
            "\t".join(
                (
                    tx.kind.value,
                    tx.frequency.value,
                    tx.name,
                    str(tx.amount),
                    tx.category or "",
                    tx.account or "",
                )
            )
        )


@app.command("report")
def report_cmd(ctx: typer.Context) -> None:
    """Print the monthly report."""

    from .api import generate_report

    try:
        text = generate_report(_store(ctx))
    except PfrError as exc:
        raise _fail(exc) from exc
    typer.echo(text, nl=False)


@app.command("save")
def save_cmd(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Snapshot name")],
) -> None:
    """Save the current ledger as a named snapshot."""

    from .snapshots import save_snapshot

    try:
        path = save_snapshot(_store(ctx), name)
    except PfrError as exc:
        raise _fail(exc) from exc
    typer.echo(f"Saved snapshot {name!r} to {path}")


@app.command("load")
def load_cmd(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Snapshot name")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Replace the current ledger without asking.")
    ] = False,
) -> None:
    """Replace the current ledger with a named snapshot."""

    from .snapshots import load_snapshot, snapshot_path

    store = _store(ctx)
    try:
        src = snapshot_path(store, name)
        if store.exists() and not _confirmed(
            f"Replace the current ledger with snapshot {name!r}?", assume_yes=yes
        ):
            typer.echo("Ledger left unchanged.", err=True)
            raise typer.Exit(1)
        count = load_snapshot(store, name)
    except PfrError as exc:
        raise _fail(exc) from exc
    _logger.debug("loaded snapshot from %s", src)
    typer.echo(f"Loaded snapshot {name!r} ({count} transactions)")


@app.command("snapshots")
def snapshots_cmd(ctx: typer.Context) -> None:
    """List saved snapshot names."""

    from .snapshots import list_snapshots

    for name in list_snapshots(_store(ctx)):
        typer.echo(name)


@app.command("backup")
def backup_cmd(ctx: typer.Context) -> None:
    """Copy the current ledger to the backup slot."""

    from .snapshots import backup

    try:
        path = backup(_store(ctx))
    except PfrError as exc:
        raise _fail(exc) from exc
    typer.echo(f"Backed up ledger to {path}")


@app.command("restore")
def restore_cmd(
    ctx: typer.Context,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Replace the current ledger without asking.")
    ] = False,
) -> None:
    """Replace the current ledger with the backup."""

    from .snapshots import restore

    store = _store(ctx)
    if store.exists() and not _confirmed(
        "Replace the current ledger with the backup?", assume_yes=yes
    ):
        typer.echo("Ledger left unchanged.", err=True)
        raise typer.Exit(1)
    try:
        count = restore(store)
    except PfrError as exc:
        raise _fail(exc) from exc
    typer.echo(f"Restored ledger from backup ({count} transactions)")


@app.callback()
def _root(
    ctx: typer.Context,
    ledger: Annotated[
        Path | None,
        typer.Option(
            "--ledger",
            help="Ledger file to use (default: $PFR_HOME/ledger.json or ~/.pfr/ledger.json).",
            dir_okay=False,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level for stderr (default: $PFR_LOG_LEVEL or WARNING)."),
    ] = None,
) -> None:
    """Root command: environment, logging and the ledger store."""

    # Load environment from .env in CWD (override=False to keep existing env)
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging(log_level)

    ctx.obj = LedgerStore(ledger)


def main() -> None:  # pragma: no cover - console script shim
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
