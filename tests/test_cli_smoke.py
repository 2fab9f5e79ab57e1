"""Smoke tests for CLI commands.

Uses Click's CliRunner with a settings file under tmp_path so the user's
~/.chromaseq is never touched.
"""

import json

import pytest
from click.testing import CliRunner

from chromaseq.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, config_path):
    """Invoke the CLI with an isolated settings file."""
    def _invoke(*args, input=None):
        return runner.invoke(cli, ["--config", str(config_path), *args], input=input)
    return _invoke


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'low-discrepancy color sequences' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ["generate", "invert", "check", "compare", "request", "serve", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestGenerateCommand:
    """Test the generate command."""

    def test_plastic_colors(self, invoke):
        result = invoke("generate", "plastic", "-n", "3", "--seed", "42")
        assert result.exit_code == 0
        assert "#851BE4" in result.output

    def test_json_output(self, invoke):
        result = invoke("generate", "plastic", "-n", "2", "--seed", "42", "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["colors"][0] == "#851BE4"
        assert data["start"] == 1

    def test_method_params(self, invoke):
        result = invoke("generate", "halton", "-n", "1", "-p", "bases=[2,3,5]", "-p", "mode=rgb", "--json")
        assert result.exit_code == 0
        assert json.loads(result.stdout)["colors"] == ["#805533"]

    def test_huge_seed(self, invoke):
        result = invoke("generate", "halton", "-n", "2", "--seed", str(10 ** 40))
        assert result.exit_code == 0

    def test_stats(self, invoke):
        result = invoke("generate", "plastic", "-n", "100", "--stats", "--json")
        assert result.exit_code == 0
        stats = json.loads(result.stdout)["stats"]
        assert stats["mean_pairwise_distance"] > 0.3

    def test_default_method_from_config(self, invoke):
        invoke("config", "set", "default_seed", "42")
        result = invoke("generate", "-n", "1", "--json")
        assert json.loads(result.stdout)["colors"] == ["#851BE4"]

    def test_unknown_method(self, invoke):
        result = invoke("generate", "spiral")
        assert result.exit_code == 1
        assert "Unknown sequence method" in result.output

    def test_bad_param_syntax(self, invoke):
        result = invoke("generate", "plastic", "-p", "lightness")
        assert result.exit_code == 1
        assert "KEY=VALUE" in result.output

    @pytest.mark.parametrize("seed", ["inf", "nan", "Infinity"])
    def test_non_finite_seed_rejected(self, invoke, seed):
        result = invoke("generate", "halton", "--seed", seed)
        assert result.exit_code == 2
        assert "not a finite number" in result.output


@pytest.mark.integration
class TestInvertCommand:
    """Test invert and check commands."""

    def test_invert(self, invoke):
        result = invoke("invert", "#D4832B", "plastic", "--seed", "42")
        assert result.exit_code == 0
        assert "index 69" in result.output

    def test_invert_json_with_workers(self, invoke):
        result = invoke("invert", "851BE4", "plastic", "--seed", "42", "--workers", "3", "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["index"] == 1
        assert data["verification"] == "#851BE4"

    def test_invert_not_found(self, invoke):
        result = invoke("invert", "#FFFFFF", "plastic", "--max-search", "20")
        assert result.exit_code == 0
        assert "not found" in result.output

    def test_invert_malformed(self, invoke):
        result = invoke("invert", "#12345", "plastic")
        assert result.exit_code == 1
        assert "Malformed color" in result.output

    def test_invalid_strategy(self, invoke):
        result = invoke("invert", "#851BE4", "plastic", "--strategy", "best")
        assert result.exit_code != 0

    def test_check_match(self, invoke):
        result = invoke("check", "69", "#D4832B", "plastic", "--seed", "42")
        assert result.exit_code == 0
        assert "[MATCH]" in result.output

    def test_check_mismatch(self, invoke):
        result = invoke("check", "1", "#00FF00", "plastic", "--seed", "42")
        assert result.exit_code == 0
        assert "[MISMATCH]" in result.output


@pytest.mark.integration
class TestCompareCommand:
    """Test the compare command."""

    def test_compare_default_methods(self, invoke):
        result = invoke("compare", "-n", "200")
        assert result.exit_code == 0
        assert "Best:" in result.output
        for name in ["golden", "plastic", "halton", "kronecker", "sobol"]:
            assert name in result.output

    def test_compare_json(self, invoke):
        result = invoke("compare", "-n", "100", "-m", "golden", "-m", "cf", "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert set(data["discrepancy"]) == {"golden", "continued_fraction"}


@pytest.mark.integration
class TestToolCommands:
    """Test request and serve."""

    def test_request(self, invoke):
        result = invoke("request", "generate", '{"method": "plastic", "seed": 42, "count": 1}')
        assert result.exit_code == 0
        assert json.loads(result.stdout)["colors"] == ["#851BE4"]

    def test_request_from_stdin(self, invoke):
        result = invoke("request", "invert", "-", input='{"hex": "#851BE4", "method": "plastic", "seed": 42}')
        assert result.exit_code == 0
        assert json.loads(result.stdout)["index"] == 1

    def test_request_error(self, invoke):
        result = invoke("request", "invert", '{"hex": "#XYZ", "method": "plastic"}')
        assert result.exit_code == 1
        assert json.loads(result.stdout)["error_type"] == "MalformedColorError"

    def test_request_invalid_json(self, invoke):
        result = invoke("request", "generate", "{not json")
        assert result.exit_code == 1
        assert json.loads(result.stdout)["error_type"] == "InvalidParameterError"

    def test_serve(self, invoke):
        lines = "\n".join([
            json.dumps({"tool": "generate", "params": {"method": "plastic", "seed": 42, "count": 1}}),
            "",
            json.dumps({"tool": "invert", "params": {"hex": "#D4832B", "method": "plastic", "seed": 42}}),
            "not json",
            json.dumps({"tool": "nope"}),
        ]) + "\n"
        result = invoke("serve", input=lines)
        assert result.exit_code == 0

        responses = [json.loads(line) for line in result.stdout.splitlines()]
        assert len(responses) == 4
        assert responses[0]["colors"] == ["#851BE4"]
        assert responses[1]["index"] == 69
        assert responses[2]["error_type"] == "InvalidParameterError"
        assert responses[3]["tool"] == "nope"

    def test_serve_survives_non_finite_seeds(self, invoke):
        lines = "\n".join([
            json.dumps({"tool": "generate", "params": {"method": "halton", "seed": float("inf")}}),
            json.dumps({"tool": "invert", "params": {"hex": "#851BE4", "seed": float("nan")}}),
            json.dumps({"tool": "generate", "params": {"method": "plastic", "seed": 42, "count": 1}}),
        ]) + "\n"
        result = invoke("serve", input=lines)
        assert result.exit_code == 0

        responses = [json.loads(line) for line in result.stdout.splitlines()]
        assert len(responses) == 3
        assert responses[0]["error_type"] == "InvalidParameterError"
        assert "seed" in responses[1]["error"]
        assert responses[2]["colors"] == ["#851BE4"]

    def test_serve_reports_unexpected_errors(self, invoke, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("chromaseq.services.sequence_service.compare_sequences", broken)
        lines = "\n".join([
            json.dumps({"tool": "compare", "params": {"n": 10}}),
            json.dumps({"tool": "generate", "params": {"method": "plastic", "seed": 42, "count": 1}}),
        ]) + "\n"
        result = invoke("serve", input=lines)
        assert result.exit_code == 0

        responses = [json.loads(line) for line in result.stdout.splitlines()]
        assert responses[0] == {"error": "Internal error: boom", "error_type": "RuntimeError", "tool": "compare"}
        assert responses[1]["colors"] == ["#851BE4"]


@pytest.mark.integration
class TestConfigCommand:
    """Test the config command group."""

    def test_path(self, invoke, config_path):
        result = invoke("config", "path")
        assert result.exit_code == 0
        assert str(config_path) in result.output

    def test_show_defaults(self, invoke):
        result = invoke("config", "show", "--json")
        assert result.exit_code == 0
        assert json.loads(result.stdout)["default_method"] == "plastic"

    def test_set_persists(self, invoke, config_path):
        result = invoke("config", "set", "default_method", "cf")
        assert result.exit_code == 0
        assert "continued_fraction" in result.output
        assert json.loads(config_path.read_text())["default_method"] == "continued_fraction"

    def test_set_invalid_value(self, invoke, config_path):
        result = invoke("config", "set", "tolerance", "-1")
        assert result.exit_code == 1
        assert "tolerance" in result.output
        assert not config_path.exists()

    def test_set_unknown_key(self, invoke):
        result = invoke("config", "set", "colour", "red")
        assert result.exit_code != 0

    def test_reset_replaces_broken_file(self, invoke, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{ broken", encoding="utf-8")

        result = invoke("config", "show")
        assert result.exit_code == 1
        assert "invalid syntax" in result.output

        result = invoke("config", "reset", "--yes")
        assert result.exit_code == 0
        assert json.loads(config_path.read_text())["default_seed"] == 0

    def test_envvar_config_path(self, runner, config_path):
        runner.invoke(cli, ["--config", str(config_path), "config", "set", "default_seed", "7"])
        result = runner.invoke(cli, ["config", "show", "--json"], env={"CHROMASEQ_CONFIG": str(config_path)})
        assert json.loads(result.stdout)["default_seed"] == 7
