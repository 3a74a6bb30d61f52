import json
from pathlib import Path

from typer.testing import CliRunner

from bundlepack.cli.app import app

STATS_DIR = Path(__file__).resolve().parents[1] / "examples" / "stats"
BASE = str(STATS_DIR / "base.json")
CURRENT = str(STATS_DIR / "current.json")


def test_cli_diff_prints_markdown_report() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", BASE, CURRENT, "--title", "web"])

    assert result.exit_code == 0
    assert "### Bundle Stats — web" in result.stdout
    assert "**Total**" in result.stdout
    assert "`src/chart.js` | 🆕 +11.72 KiB" in result.stdout
    assert "<!--- bundlekit-comment key:web --->" in result.stdout


def test_cli_diff_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", BASE, CURRENT, "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())

    assert payload["status"] == "ok"
    assert payload["assets"]["summary"] == {
        "added": 1,
        "removed": 1,
        "bigger": 1,
        "smaller": 1,
        "unchanged": 1,
    }
    assert payload["assets"]["added"][0]["diff_percentage"] == "Infinity"
    assert payload["modules"]["removed"][0]["name"] == "./src/legacy.js"
    assert payload["body"].startswith("### Bundle Stats")


def test_cli_diff_pretty_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--pretty-json", "diff", BASE, CURRENT, "--json"])

    assert result.exit_code == 0
    assert result.stdout.startswith("{\n")


def test_cli_diff_quiet_suppresses_report() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--quiet", "diff", BASE, CURRENT])

    assert result.exit_code == 0
    assert result.stdout.strip() == ""


def test_cli_diff_non_zero_on_missing_file() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", "missing-base.json", CURRENT])

    assert result.exit_code == 1


def test_cli_diff_json_error_payload_on_invalid_stats(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text(json.dumps({"assets": [{"name": "a.js", "size": -1}]}), encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(broken), CURRENT, "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["message"].startswith("diff failed: Invalid stats at assets.0.size")
    assert payload["base_path"] == str(broken)


def test_cli_diff_reports_unreadable_stats_path(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(tmp_path), CURRENT, "--json"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
    payload = json.loads(result.stdout.strip())
    assert payload["message"].startswith("diff failed: Stats file is not readable")
