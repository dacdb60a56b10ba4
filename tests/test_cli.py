import json
from pathlib import Path

from click.testing import CliRunner

from seqtest import __version__
from seqtest.cli.main import cli, main

PASSING = """
import asyncio

from seqtest.core import expect, is_true


def maybe_print():
    print("maybe")


def main(suite):
    def group(g):
        async def sample_test():
            await asyncio.sleep(0)
            maybe_print()
            expect(True, is_true)

        g.test("sample test", sample_test)

    suite.group("a group", group)
"""

MIXED = """
from seqtest.core import expect, is_true


def main(suite):
    def group(g):
        g.test("first", lambda: expect(False, is_true))
        g.test("second", lambda: expect(True, is_true))

    suite.group("a group", group)
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output
    assert "list" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"seqtest {__version__}"


def test_cli_run_passing_suite(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path, "sample_test.py", PASSING)
    result = CliRunner().invoke(cli, ["run", str(path), "--no-color"])
    assert result.exit_code == 0, result.output
    assert "maybe" in result.output
    assert "[1/1] a group > sample test -> PASSED" in result.output
    assert "Summary: total=1 passed=1 failed=0" in result.output


def test_cli_run_reports_failures_in_order(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path, "mixed_test.py", MIXED)
    result = CliRunner().invoke(cli, ["run", str(path), "--no-color"])
    assert result.exit_code == 1
    first = result.output.index("a group > first -> FAILED")
    second = result.output.index("a group > second -> PASSED")
    assert first < second
    assert "reason: Expected: True" in result.output


def test_cli_run_json_report(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path, "mixed_test.py", MIXED)
    report = tmp_path / "out" / "report.json"
    result = CliRunner().invoke(
        cli, ["run", str(path), "--reporter", "json", "--report-path", str(report)]
    )
    assert result.exit_code == 1
    payload = json.loads(report.read_text(encoding="utf-8"))
    assert [case["name"] for case in payload["cases"]] == ["first", "second"]
    assert payload["summary"]["failed"] == 1


def test_cli_name_filter(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path, "mixed_test.py", MIXED)
    result = CliRunner().invoke(cli, ["run", str(path), "--no-color", "--name", "*second"])
    assert result.exit_code == 0
    assert "first" not in result.output
    result = CliRunner().invoke(cli, ["run", str(path), "--name", "nothing*"])
    assert result.exit_code == 1
    assert "No cases matched" in result.output


def test_cli_uses_config_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    suite_dir = tmp_path / "suite"
    suite_dir.mkdir()
    _write(suite_dir, "sample_test.py", PASSING)
    config = _write(tmp_path, "custom.yaml", "paths: [suite]\ncolor: false\n")
    result = CliRunner().invoke(cli, ["run", "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert "a group > sample test -> PASSED" in result.output


def test_cli_list_does_not_run(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path, "mixed_test.py", MIXED)
    result = CliRunner().invoke(cli, ["list", str(path)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["a group > first", "a group > second"]


def test_cli_errors(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli, ["run"])
    assert result.exit_code == 2
    assert "No test paths" in result.output
    path = _write(tmp_path, "orphan_test.py", "def main(suite):\n    suite.test('x', lambda: None)\n")
    result = CliRunner().invoke(cli, ["run", str(path)])
    assert result.exit_code == 1
    assert "must be registered inside a group" in result.output
    sample = _write(tmp_path, "sample_test.py", PASSING)
    result = CliRunner().invoke(cli, ["run", str(sample), "--reporter", "xml"])
    assert result.exit_code == 1
    assert "Unknown reporter 'xml'" in result.output


def test_main_returns_exit_code() -> None:
    assert main(["--version"]) == 0


def test_cli_runs_bundled_sample() -> None:
    sample_dir = Path(__file__).resolve().parents[1] / "examples" / "sample"
    result = CliRunner().invoke(cli, ["run", str(sample_dir / "main_test.py"), "--no-color"])
    assert result.exit_code == 0, result.output
    assert "a group > sample test -> PASSED" in result.output


def test_cli_reports_unloadable_test_module(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path, "bad_test.py", "import does_not_exist\n")
    for command in ("run", "list"):
        result = CliRunner().invoke(cli, [command, str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Failed to load test module" in result.output
        assert "does_not_exist" in result.output
