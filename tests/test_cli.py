"""Tests for the travelstats command line."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from travelstats.adapters.config import load_operator_definitions
from travelstats.cli import (
    EXIT_LOAD_ERROR,
    EXIT_NO_INPUT,
    EXIT_OK,
    build_parser,
    main,
    selected_steps,
)
from tests.test_export_repository import make_entry, make_export, write_export


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run every CLI test in an empty working directory with default configuration."""
    monkeypatch.chdir(tmp_path)
    for name in ("OPERATORS_FILE", "TOP_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    load_operator_definitions.cache_clear()
    yield
    load_operator_definitions.cache_clear()


@pytest.fixture
def export_file(tmp_path: Path) -> Path:
    """An export with three check-ins."""
    return write_export(
        tmp_path / "export.json",
        make_export(
            [
                make_entry(1, "RE 30", "Magdeburg Hbf", "Halle(Saale)Hbf"),
                make_entry(2, "Bus 50", "Bremen Hbf", "Bremen Domsheide", category="bus"),
                make_entry(3, "ZZZ 1", "Foo Hbf", "Bar", category="special"),
            ]
        ),
    )


def test_default_steps_are_metadata_and_operators() -> None:
    """Given no report flags, when selecting steps, then metadata and operators run."""
    args = build_parser().parse_args(["export.json"])

    assert [name for name, _ in selected_steps(args)] == ["metadata", "operators"]


def test_all_selects_every_step_in_order() -> None:
    """Given --all, when selecting steps, then every report runs in output order."""
    args = build_parser().parse_args(["--all", "export.json"])

    assert [name for name, _ in selected_steps(args)] == [
        "metadata",
        "checkins",
        "events",
        "modes",
        "mode_stats",
        "lines",
        "all_lines",
        "operators",
        "seen_stations",
    ]


def test_selected_steps_keep_output_order() -> None:
    """Given flags in any order, when selecting steps, then the output order is fixed."""
    args = build_parser().parse_args(["--seen-stations", "--lines", "export.json"])

    assert [name for name, _ in selected_steps(args)] == ["lines", "seen_stations"]


@pytest.mark.parametrize("value", ["0", "-1", "many"])
def test_top_limit_must_be_positive(value: str) -> None:
    """Given an invalid top limit, when parsing, then argparse rejects it."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--top-limit", value, "export.json"])


def test_default_run(export_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given an export, when running without flags, then metadata and operators are printed."""
    exit_code = main([str(export_file)])

    output = capsys.readouterr().out
    assert exit_code == EXIT_OK
    assert "Distance travelled: 123 km" in output
    assert "Operators (all time)" in output
    assert "DB Regio AG Südost" in output
    assert "Bremer Straßenbahn AG" in output
    assert "<unknown operator>" in output


def test_operators_file_enables_declarative_rules(
    export_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given an operators file, when running, then its definitions classify remaining trips."""
    operators = tmp_path / "custom-operators.json"
    operators.write_text(
        json.dumps([{"name": "X", "types": ["ZZZ"], "match-all-stations-containing": ["Foo"]}]),
        encoding="utf-8",
    )

    exit_code = main(["--operators", "--operators-file", str(operators), str(export_file)])

    output = capsys.readouterr().out
    assert exit_code == EXIT_OK
    assert "<unknown operator>" not in output
    assert "Distance travelled" not in output


def test_operators_file_from_environment(
    export_file: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given OPERATORS_FILE, when running, then that file is used."""
    operators = tmp_path / "env-operators.json"
    operators.write_text(json.dumps([{"name": "X", "types": ["ZZZ"]}]), encoding="utf-8")
    monkeypatch.setenv("OPERATORS_FILE", str(operators))

    assert main(["--operators", str(export_file)]) == EXIT_OK
    assert "<unknown operator>" not in capsys.readouterr().out


def test_top_limit_flag(export_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given --top-limit, when running, then counted tables are truncated."""
    exit_code = main(["--lines", "--top-limit", "1", str(export_file)])

    output = capsys.readouterr().out
    assert exit_code == EXIT_OK
    assert "Lines (top 1)" in output
    assert "... and 2 more" in output


def test_all_reports(export_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given --all, when running, then every report is printed."""
    exit_code = main(["--all", str(export_file)])

    output = capsys.readouterr().out
    assert exit_code == EXIT_OK
    for heading in ("Events", "Modes (all time)", "Mode statistics", "Lines (all time)"):
        assert heading in output
    assert "All lines" in output
    assert "Seen stations" in output
    assert "Montag, 03. Juli 2023 14:05" in output


def test_missing_files_are_skipped(
    export_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a missing and an existing file, when running, then the missing one is reported."""
    exit_code = main([str(tmp_path / "missing.json"), str(export_file)])

    captured = capsys.readouterr()
    assert exit_code == EXIT_OK
    assert "file does not exist" in captured.err
    assert "Operators (all time)" in captured.out


def test_no_usable_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given only missing files, when running, then exit code 1 is returned."""
    exit_code = main([str(tmp_path / "missing.json")])

    assert exit_code == EXIT_NO_INPUT
    assert "no input file" in capsys.readouterr().err


def test_malformed_export(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a malformed export, when running, then exit code 3 is returned."""
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")

    assert main([str(path)]) == EXIT_LOAD_ERROR
    assert "broken.json" in capsys.readouterr().err


def test_empty_export(tmp_path: Path) -> None:
    """Given an export without check-ins, when running, then exit code 3 is returned."""
    path = write_export(tmp_path / "empty.json", make_export([]))

    assert main([str(path)]) == EXIT_LOAD_ERROR


def test_malformed_operators_file(
    export_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a malformed operators file, when running, then exit code 3 is returned."""
    operators = tmp_path / "operators.json"
    operators.write_text('[{"name": "X"}]', encoding="utf-8")

    assert main([str(export_file)]) == EXIT_LOAD_ERROR
    assert "operator definitions" in capsys.readouterr().err
