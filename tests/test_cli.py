from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from metricgate import __version__
from metricgate.cli import EXIT_CONFIG, EXIT_DATAERR, EXIT_INVALID, EXIT_NOINPUT, EXIT_OK, cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from click.testing import CliRunner

# --------------------------------------------------------------------------- #
# helpers                                                                     #
# --------------------------------------------------------------------------- #


def _run(runner: CliRunner, args: list[str]) -> tuple[int, str]:
    """Invoke the CLI and return *(exit_code, output)* for convenience."""
    result = runner.invoke(cli, args)
    return result.exit_code, result.output


# --------------------------------------------------------------------------- #
# check                                                                       #
# --------------------------------------------------------------------------- #


def test_version(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["--version"])
    assert code == EXIT_OK
    assert out.strip() == f"metricgate {__version__}"


def test_check_valid_metric(
    cli_runner: CliRunner,
    metric_file: Callable[..., Path],
    valid_metric: dict[str, Any],
) -> None:
    code, out = _run(cli_runner, ["check", str(metric_file([valid_metric])), "--no-color"])
    assert code == EXIT_OK
    assert "Failed logins per window (valid)" in out
    assert "1 metric(s) checked, 0 invalid" in out


def test_check_invalid_metric(
    cli_runner: CliRunner,
    metric_file: Callable[..., Path],
    valid_metric: dict[str, Any],
) -> None:
    broken = {**valid_metric, "worst_case": "=>10/3min"}
    code, out = _run(cli_runner, ["check", str(metric_file([valid_metric, broken]))])
    assert code == EXIT_INVALID
    assert "2 metric(s) checked, 1 invalid" in out


def test_check_json_output(
    cli_runner: CliRunner,
    metric_file: Callable[..., Path],
    valid_metric: dict[str, Any],
) -> None:
    result = cli_runner.invoke(cli, ["check", str(metric_file([valid_metric])), "--format", "json"])
    assert result.exit_code == EXIT_OK
    payload = json.loads(result.stdout)
    assert payload["valid"] is True
    assert payload["metrics"][0]["fixed_variables"][0]["symbol"] == "B"


def test_check_toml_input(
    cli_runner: CliRunner,
    metric_file: Callable[..., Path],
    valid_metric: dict[str, Any],
) -> None:
    code, _out = _run(cli_runner, ["check", str(metric_file([valid_metric], filename="metrics.toml"))])
    assert code == EXIT_OK


def test_check_output_file(
    tmp_path: Path,
    cli_runner: CliRunner,
    metric_file: Callable[..., Path],
    valid_metric: dict[str, Any],
) -> None:
    target = tmp_path / "out" / "report.json"
    code, _out = _run(
        cli_runner,
        ["check", str(metric_file([valid_metric])), "--format", "json", "--output", str(target)],
    )
    assert code == EXIT_OK
    assert json.loads(target.read_text(encoding="utf-8"))["valid"] is True


def test_check_missing_file(tmp_path: Path, cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["check", str(tmp_path / "missing.json")])
    assert code == EXIT_NOINPUT
    assert "not found" in out


def test_check_malformed_file(tmp_path: Path, cli_runner: CliRunner) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"metrics": [{"formula": "A/B"}]}', encoding="utf-8")
    code, _out = _run(cli_runner, ["check", str(path)])
    assert code == EXIT_DATAERR


def test_check_bad_config(
    tmp_path: Path,
    cli_runner: CliRunner,
    metric_file: Callable[..., Path],
    valid_metric: dict[str, Any],
) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("[tool.metricgate]\nformula_required = 1\n", encoding="utf-8")
    code, out = _run(cli_runner, ["check", str(metric_file([valid_metric])), "--config", str(pyproject)])
    assert code == EXIT_CONFIG
    assert "formula_required" in out


def test_optional_formula_flag(
    cli_runner: CliRunner,
    metric_file: Callable[..., Path],
) -> None:
    path = metric_file([{"name": "Manual metric", "desired_threshold": "1"}])
    code, _out = _run(cli_runner, ["check", str(path)])
    assert code == EXIT_INVALID
    code, _out = _run(cli_runner, ["check", str(path), "--optional-formula"])
    assert code == EXIT_OK


# --------------------------------------------------------------------------- #
# threshold / variables                                                       #
# --------------------------------------------------------------------------- #


def test_threshold_command(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["threshold", ">=10/3min", "0%"])
    assert code == EXIT_OK
    assert "'>=10/3min': operator=>= magnitude=ratio 10/3 unit=min" in out
    assert "'0%': operator=none magnitude=scalar 0 unit=%" in out


def test_threshold_command_reports_errors(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["threshold", "=>10", "--label", "target"])
    assert code == EXIT_INVALID
    assert 'Invalid operator "=>" in target' in out


def test_variables_command(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["variables", "A/B", "--desired", "0/1min", "--worst", ">=10/3min"])
    assert code == EXIT_OK
    assert out.splitlines() == ["A", "B (denominator, fixed=1)"]


def test_variables_command_invalid_formula(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["variables", "a+b"])
    assert code == EXIT_INVALID
    assert "ERROR" in out
