from pathlib import Path

import pytest
from typer.testing import CliRunner

import pfr.term_ui as term_ui
from pfr import LedgerStore
from pfr.cli import app
from tests.expected_report import SAMPLE_REPORT

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(app, list(args))


def _add_sample() -> None:
    for args in (
        ("add", "income", "monthly", "work", "800"),
        ("add", "expense", "weekly", "petrol", "60", "--category", "car", "--account", "direct debit"),
        ("add", "expense", "weekly", "food", "40", "--account", "direct debit"),
        ("add", "expense", "monthly", "car insurance", "20", "-c", "car", "-a", "automatic"),
    ):
        result = _invoke(*args)
        assert result.exit_code == 0, result.output


def test_init_add_report_end_to_end():
    result = _invoke("init")
    assert result.exit_code == 0, result.output
    assert "Initialized empty ledger" in result.output

    _add_sample()

    result = _invoke("report")
    assert result.exit_code == 0, result.output
    assert result.stdout == SAMPLE_REPORT


def test_list_prints_tab_separated_rows_in_ledger_order():
    _invoke("init")
    _add_sample()
    result = _invoke("list")
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "income\tmonthly\twork\t800\t\t",
        "expense\tweekly\tpetrol\t60\tcar\tdirect debit",
        "expense\tweekly\tfood\t40\t\tdirect debit",
        "expense\tmonthly\tcar insurance\t20\tcar\tautomatic",
    ]


def test_report_without_ledger_fails_with_hint():
    result = _invoke("report")
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "pfr init" in result.output


def test_corrupt_ledger_exits_non_zero(_isolate_data_dir: Path):
    (_isolate_data_dir / "ledger.json").write_text("{oops", encoding="utf-8")
    result = _invoke("report")
    assert result.exit_code == 1
    assert "could not load ledger" in result.output


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (("add", "income", "daily", "x", "1"), "unknown frequency"),
        (("add", "gift", "monthly", "x", "1"), "unknown transaction kind"),
        (("add", "expense", "monthly", "x", "ten"), "invalid amount"),
    ],
)
def test_add_rejects_bad_values(args: tuple[str, ...], message: str):
    _invoke("init")
    result = _invoke(*args)
    assert result.exit_code == 1
    assert message in result.output


def test_add_rejects_duplicate_names():
    _invoke("init")
    assert _invoke("add", "income", "monthly", "work", "800").exit_code == 0
    result = _invoke("add", "expense", "monthly", "work", "1")
    assert result.exit_code == 1
    assert "already present" in result.output


def test_missing_arguments_are_a_usage_error():
    result = _invoke("add", "income")
    assert result.exit_code == 2


def test_init_over_existing_ledger_asks_first(monkeypatch: pytest.MonkeyPatch):
    _invoke("init")
    _invoke("add", "income", "monthly", "work", "800")

    asked: list[str] = []

    def _no(message: str, **_kw) -> bool:
        asked.append(message)
        return False

    monkeypatch.setattr(term_ui, "confirm", _no)
    result = _invoke("init")
    assert result.exit_code == 1
    assert asked and "already exists" in asked[0]
    assert len(LedgerStore().load()) == 1

    monkeypatch.setattr(term_ui, "confirm", lambda message, **_kw: True)
    assert _invoke("init").exit_code == 0
    assert LedgerStore().load() == []


def test_init_force_skips_the_prompt(monkeypatch: pytest.MonkeyPatch):
    _invoke("init")

    def _boom(*_a, **_kw):
        raise AssertionError("should not prompt")

    monkeypatch.setattr(term_ui, "confirm", _boom)
    assert _invoke("init", "--force").exit_code == 0


def test_save_load_snapshots_backup_restore():
    _invoke("init")
    _add_sample()

    assert _invoke("save", "full").exit_code == 0
    assert _invoke("backup").exit_code == 0
    assert _invoke("init", "--force").exit_code == 0
    assert _invoke("list").stdout == ""

    result = _invoke("snapshots")
    assert result.stdout.splitlines() == ["full"]

    result = _invoke("load", "full", "--yes")
    assert result.exit_code == 0, result.output
    assert "4 transactions" in result.stdout
    assert _invoke("report").stdout == SAMPLE_REPORT

    _invoke("init", "--force")
    result = _invoke("restore", "--yes")
    assert result.exit_code == 0, result.output
    assert _invoke("report").stdout == SAMPLE_REPORT


def test_load_unknown_snapshot_fails():
    _invoke("init")
    result = _invoke("load", "missing", "--yes")
    assert result.exit_code == 1
    assert "no snapshot" in result.output


def test_load_rejects_unsafe_names():
    _invoke("init")
    result = _invoke("save", "../x")
    assert result.exit_code == 1
    assert "invalid snapshot name" in result.output


def test_ledger_option_overrides_location(tmp_path: Path):
    ledger = tmp_path / "elsewhere" / "mine.json"
    assert _invoke("--ledger", str(ledger), "init").exit_code == 0
    assert ledger.is_file()
    assert not LedgerStore().exists()


def test_env_file_sets_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PFR_HOME")
    home = tmp_path / "from-dotenv"
    (tmp_path / ".env").write_text(f"PFR_HOME={home}\n", encoding="utf-8")
    assert _invoke("init").exit_code == 0
    assert (home / "ledger.json").is_file()
