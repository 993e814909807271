"""Tests for main module."""

import ast

import pyarrow.parquet as pq

from lazy_sequences.main import main
from lazy_sequences.sources import DiceRolls


def test_main_writes_rolls(monkeypatch, tmp_path, capsys):
    """Test a full run with Parquet output."""
    output_file = tmp_path / "rolls.parquet"
    monkeypatch.setenv("SEQUENCE_SEED", "12345")
    monkeypatch.setenv("DICE_SIDES", "6")
    monkeypatch.setenv("DICE_SENTINEL", "6")
    monkeypatch.setenv("OUTPUT_FILE", str(output_file))

    assert main() == 0

    expected = DiceRolls(seed=12345).to_list()
    assert pq.read_table(output_file).column("value").to_pylist() == expected
    assert "EXECUTION SUMMARY" in capsys.readouterr().out


def test_main_reports_invalid_configuration(monkeypatch):
    """Test that a configuration error yields a failing exit code."""
    monkeypatch.setenv("DICE_SENTINEL", "9")
    monkeypatch.setenv("DICE_SIDES", "6")

    assert main() == 1


def test_unseeded_run_prints_and_writes_the_same_rolls(monkeypatch, tmp_path, capsys):
    """Test that an unseeded run reports and stores a single draw."""
    output_file = tmp_path / "rolls.parquet"
    monkeypatch.setenv("SEQUENCE_SEED", "")
    monkeypatch.setenv("DICE_SIDES", "6")
    monkeypatch.setenv("DICE_SENTINEL", "6")
    monkeypatch.setenv("TAKE_LIMIT", "3")
    monkeypatch.setenv("OUTPUT_FILE", str(output_file))

    for _ in range(5):
        assert main() == 0

        out = capsys.readouterr().out
        printed = ast.literal_eval(_summary_value(out, "Values"))
        top = ast.literal_eval(_summary_value(out, "Top 3 (descending)"))

        assert pq.read_table(output_file).column("value").to_pylist() == printed
        assert top == sorted(printed, reverse=True)[:3]
        assert printed[-1] == 6


def _summary_value(out, label):
    for line in out.splitlines():
        if line.strip().startswith(f"{label}:"):
            return line.split(":", 1)[1].strip()
    raise AssertionError(f"{label} missing from summary")
