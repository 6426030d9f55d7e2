import json

from click.testing import CliRunner

from cli import cli


def test_press_prints_display():
    result = CliRunner().invoke(cli, ["press", "1", "2", "+", "3", "="])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "15"


def test_press_accepts_minus_and_unary_buttons():
    result = CliRunner().invoke(cli, ["press", "5", "-", "1", "=", "x!"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "24"


def test_press_reports_calculator_errors():
    result = CliRunner().invoke(cli, ["press", "8", "÷", "0", "="])
    assert result.exit_code == 0
    assert result.stdout.strip() == "0"


def test_press_rejects_unknown_buttons():
    result = CliRunner().invoke(cli, ["press", "1", "%"])
    assert result.exit_code == 2
    assert "Unknown button: %" in result.output


def test_press_persists_memory(tmp_path):
    state_file = tmp_path / "state.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["press", "--state-file", str(state_file), "7", "M+"])
    assert result.exit_code == 0
    assert json.loads(state_file.read_text()) == {"memory": 7.0, "isDarkMode": False}

    result = runner.invoke(cli, ["press", "--state-file", str(state_file), "MR"])
    assert result.stdout.strip() == "7"


def test_keys_lists_keyboard_map():
    result = CliRunner().invoke(cli, ["keys"])
    assert result.exit_code == 0
    assert "Enter" in result.stdout
    assert "Escape" in result.stdout


def test_info():
    result = CliRunner().invoke(cli, ["info"])
    assert result.exit_code == 0
    assert "Application: calculator" in result.stdout
