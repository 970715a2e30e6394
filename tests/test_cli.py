"""Tests for the command-line interface."""

import logging

import pytest

from infuse.cli import (
    EXIT_ERROR,
    EXIT_OK,
    EXIT_USAGE,
    MISSING_INPUTS_MESSAGE,
    main,
)

EXAMPLE1_ARGS = [
    "--grams", "7",
    "--thc", "21.5",
    "--efficiency", "75",
    "--totalBaseMade", "1",
    "--totalBaseUnit", "cup",
    "--baseUsed", "0.5",
    "--recipeUnit", "cup",
    "--servings", "10",
]


def test_no_arguments_prints_help(capsys):
    assert main([]) == EXIT_OK
    out = capsys.readouterr().out
    assert "--grams" in out
    assert "--totalBaseUnit" in out


def test_help_flag_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "--examples" in capsys.readouterr().out


def test_calculation_prints_results(capsys):
    assert main(EXAMPLE1_ARGS) == EXIT_OK
    out = capsys.readouterr().out
    assert "Total THC in infusion: 1128.75 mg" in out
    assert "mg per mL: 4.77 mg" in out
    assert "mg per serving: 56.44 mg" in out


def test_efficiency_defaults_to_75(capsys):
    args = [a for a in EXAMPLE1_ARGS if a not in ("--efficiency", "75")]
    assert main(args) == EXIT_OK
    assert "Total THC in infusion: 1128.75 mg" in capsys.readouterr().out


def test_units_default_to_ml(capsys):
    args = ["--grams", "5", "--thc", "18", "--thca", "2.5", "--efficiency", "70",
            "--totalBaseMade", "250", "--baseUsed", "50", "--servings", "8"]
    assert main(args) == EXIT_OK
    assert "mg per serving: 17.67 mg" in capsys.readouterr().out


@pytest.mark.parametrize("drop", ["--grams", "--totalBaseMade", "--baseUsed", "--servings"])
def test_missing_required_flag_is_usage_error(drop, capsys):
    i = EXAMPLE1_ARGS.index(drop)
    args = EXAMPLE1_ARGS[:i] + EXAMPLE1_ARGS[i + 2:]
    assert main(args) == EXIT_USAGE
    captured = capsys.readouterr()
    assert MISSING_INPUTS_MESSAGE in captured.err
    assert "Results:" not in captured.out


def test_zero_servings_is_usage_error(capsys):
    args = list(EXAMPLE1_ARGS)
    args[args.index("--servings") + 1] = "0"
    assert main(args) == EXIT_USAGE


def test_non_numeric_value_is_reported(caplog, capsys):
    caplog.set_level(logging.ERROR)
    args = list(EXAMPLE1_ARGS)
    args[args.index("--grams") + 1] = "seven"
    assert main(args) == EXIT_ERROR
    assert any("--grams expects a number" in rec.message for rec in caplog.records)
    assert "Results:" not in capsys.readouterr().out


def test_examples_flag_runs_both_presets(capsys):
    assert main(["--examples"]) == EXIT_OK
    out = capsys.readouterr().out
    assert out.count("Results:") == 2
    assert "Example 1: 7g flower" in out
    assert "Example 2: 5g flower" in out
    assert "---" in out
    assert "mg per serving: 17.67 mg" in out


@pytest.mark.parametrize("flag", ["--grams", "--totalBaseMade", "--baseUsed", "--servings"])
@pytest.mark.parametrize("value", ["nan", "inf"])
def test_non_finite_required_value_is_usage_error(flag, value, capsys):
    args = list(EXAMPLE1_ARGS)
    args[args.index(flag) + 1] = value
    assert main(args) == EXIT_USAGE
    captured = capsys.readouterr()
    assert MISSING_INPUTS_MESSAGE in captured.err
    assert "Results:" not in captured.out
