"""CLI integration tests."""

from typer.testing import CliRunner

from replilab.cli.main import app
from replilab.replication.events import load_events

runner = CliRunner()


def test_organisms():
    result = runner.invoke(app, ["organisms"])
    assert result.exit_code == 0
    assert "e_coli" in result.output
    assert "Homo sapiens" in result.output
    assert "1000-2000" in result.output


def test_run_first_record(templates_fasta):
    result = runner.invoke(app, ["run", str(templates_fasta), "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Replication of ori_short (69 bp)" in result.output
    assert "100.0%" in result.output


def test_run_named_record(templates_fasta):
    result = runner.invoke(
        app, ["run", str(templates_fasta), "--record", "lac_fragment", "--organism", "human"]
    )
    assert result.exit_code == 0, result.output
    assert "Replication of lac_fragment (120 bp)" in result.output
    assert "Homo sapiens" in result.output


def test_run_writes_events(templates_fasta, tmp_path):
    out = tmp_path / "events.jsonl"
    result = runner.invoke(app, ["run", str(templates_fasta), "--events", str(out)])
    assert result.exit_code == 0, result.output
    assert "Wrote 210 events" in result.output
    events = load_events(out)
    assert len(events) == 210
    assert events[0].type == "unwind"
    assert events[-1].type == "ligation"


def test_run_missing_file(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "absent.fasta")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_run_unknown_organism(templates_fasta):
    result = runner.invoke(app, ["run", str(templates_fasta), "--organism", "mars"])
    assert result.exit_code == 1
    assert "Unknown organism 'mars'" in result.output


def test_run_step_budget(templates_fasta):
    result = runner.invoke(app, ["run", str(templates_fasta), "--max-steps", "5"])
    assert result.exit_code == 1
    assert "did not complete within 5 steps" in result.output


def test_simulate():
    result = runner.invoke(app, ["simulate", "69", "--seed", "1", "--proofreading"])
    assert result.exit_code == 0, result.output
    assert "random_69" in result.output
    assert "proofreading" in result.output


def test_simulate_rejects_zero_length():
    result = runner.invoke(app, ["simulate", "0"])
    assert result.exit_code != 0


def test_simulate_rejects_zero_step_budget():
    result = runner.invoke(app, ["simulate", "10", "--max-steps", "0"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "max_steps must be positive" in result.output


def test_run_rejects_zero_step_budget(templates_fasta):
    result = runner.invoke(app, ["run", str(templates_fasta), "--max-steps", "0"])
    assert result.exit_code == 1
    assert "max_steps must be positive" in result.output


def test_unknown_log_level():
    result = runner.invoke(app, ["simulate", "10", "--log-level", "chatty"])
    assert result.exit_code == 1
    assert "Unknown log level 'chatty'" in result.output
