"""Runtime configuration: where the ledger and its snapshots live.

Everything is driven by environment variables, which the CLI may populate
from a ``.env`` file in the working directory (python-dotenv, never
overriding variables that are already set).

- ``PFR_HOME``: data directory. Defaults to ``~/.pfr``.
- ``PFR_LOG_LEVEL``: logging level for the CLI (see ``logging_setup``).

Layout under the data directory::

    ledger.json            current ledger
    ledger.json.bak        backup written by ``pfr backup``
    snapshots/<name>.json  named snapshots written by ``pfr save``
"""

from __future__ import annotations

import os
from pathlib import Path

HOME_ENV = "PFR_HOME"
LOG_LEVEL_ENV = "PFR_LOG_LEVEL"

LEDGER_FILENAME = "ledger.json"
BACKUP_SUFFIX = ".bak"
SNAPSHOT_DIRNAME = "snapshots"


def get_data_dir() -> Path:
    root = os.getenv(HOME_ENV)
    if root and root.strip():
        return Path(root).expanduser().resolve()
    return (Path.home() / ".pfr").resolve()


def default_ledger_path() -> Path:
    return get_data_dir() / LEDGER_FILENAME


def backup_path_for(ledger_path: Path) -> Path:
    return ledger_path.with_name(ledger_path.name + BACKUP_SUFFIX)


def snapshot_dir_for(ledger_path: Path) -> Path:
    """Snapshots sit next to the ledger they were taken from."""

    return ledger_path.parent / SNAPSHOT_DIRNAME
