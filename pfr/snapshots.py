"""Named snapshots and the single backup slot.

Snapshots are verbatim copies of a ledger file. They live next to the ledger
(``<data dir>/snapshots/<name>.json``); the backup is ``<ledger>.bak``.
Copies made back into the current ledger are validated first, so a corrupt
snapshot never replaces a good ledger.
"""

from __future__ import annotations

import contextlib
import os
import re
import shutil
from pathlib import Path

from .config import backup_path_for, snapshot_dir_for
from .errors import InvalidSnapshotName, LedgerError, LedgerNotFound, SnapshotNotFound
from .logging_setup import get_logger
from .storage import LedgerStore, read_ledger_file

_SNAPSHOT_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")

_logger = get_logger("pfr.snapshots")


def validate_snapshot_name(name: str) -> str:
    """Reject names that could escape the snapshot directory."""

    if not _SNAPSHOT_NAME_RE.fullmatch(name):
        raise InvalidSnapshotName(name)
    return name


def snapshot_path(store: LedgerStore, name: str) -> Path:
    return snapshot_dir_for(store.path) / f"{validate_snapshot_name(name)}.json"


def _copy_atomic(src: Path, dst: Path) -> None:
    dst.parent.mkdir(parents=True, exist_ok=True)
    tmp = dst.with_suffix(dst.suffix + ".tmp")
    try:
        shutil.copyfile(src, tmp)
        os.replace(tmp, dst)
    except OSError as exc:
        with contextlib.suppress(FileNotFoundError):
            tmp.unlink()
        raise LedgerError(f"could not copy {src} to {dst}: {exc}") from exc


def _require_ledger(store: LedgerStore) -> None:
    if not store.exists():
        raise LedgerNotFound(store.path)


def _restore_from(store: LedgerStore, src: Path) -> int:
    if not src.is_file():
        raise SnapshotNotFound(src)
    # Validate before touching the current ledger.
    count = len(read_ledger_file(src))
    _copy_atomic(src, store.path)
    return count


def save_snapshot(store: LedgerStore, name: str) -> Path:
    """Copy the current ledger to the snapshot called ``name``."""

    dst = snapshot_path(store, name)
    _require_ledger(store)
    _copy_atomic(store.path, dst)
    _logger.info("snapshot:save name=%s path=%s", name, os.fspath(dst))
    return dst


def load_snapshot(store: LedgerStore, name: str) -> int:
    """Replace the current ledger with snapshot ``name``; returns its size."""

    count = _restore_from(store, snapshot_path(store, name))
    _logger.info("snapshot:load name=%s count=%d", name, count)
    return count


def list_snapshots(store: LedgerStore) -> list[str]:
    root = snapshot_dir_for(store.path)
    if not root.is_dir():
        return []
    return sorted(p.stem for p in root.glob("*.json") if p.is_file())


def backup(store: LedgerStore) -> Path:
    dst = backup_path_for(store.path)
    _require_ledger(store)
    _copy_atomic(store.path, dst)
    _logger.info("snapshot:backup path=%s", os.fspath(dst))
    return dst


def restore(store: LedgerStore) -> int:
    count = _restore_from(store, backup_path_for(store.path))
    _logger.info("snapshot:restore count=%d", count)
    return count


__all__ = [
    "validate_snapshot_name",
    "snapshot_path",
    "save_snapshot",
    "load_snapshot",
    "list_snapshots",
    "backup",
    "restore",
]
