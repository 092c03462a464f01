"""Step definitions for simulator configuration scenarios."""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when


def run_command(command_args, cwd):
    """Run the config command and capture its result."""
    try:
        result = subprocess.run(
            command_args,
            capture_output=True,
            text=True,
            timeout=30,
            cwd=cwd,
        )
    except subprocess.TimeoutExpired:
        pytest.fail("Command timed out")
    return {
        "returncode": result.returncode,
        "stdout": result.stdout,
        "stderr": result.stderr,
    }


def printed_config(command_result):
    """Parse the JSON configuration printed on stdout."""
    try:
        return json.loads(command_result["stdout"])
    except json.JSONDecodeError as e:
        pytest.fail(
            f"Failed to parse JSON from output: {e}. stdout: {command_result['stdout']}"
        )


# Load scenarios from the feature file
scenarios("../features/simulator_configuration.feature")


@pytest.fixture
def project_root():
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


@pytest.fixture
def fixtures_dir():
    """Get the path to test fixtures directory."""
    return Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def command_result():
    """Store the result of running a command."""
    return {}


@pytest.fixture
def temp_settings_file(tmp_path):
    """Store the temporary settings file path."""
    return {"path": tmp_path / "config.yml"}


# Given steps
@given("I have a settings file with content:")
def create_temp_settings_file(temp_settings_file, docstring):
    """Create a temporary settings file with the given content."""
    temp_settings_file["path"].write_text(docstring, encoding="utf-8")


# When steps
@when(parsers.parse('I run the config command with settings file "{settings_file}"'))
def run_with_fixture_settings(project_root, fixtures_dir, command_result, settings_file):
    """Run the config command with a settings file from the fixtures directory."""
    command_result.update(
        run_command(
            [
                sys.executable,
                "-m",
                "simulator.main",
                "--config",
                str(fixtures_dir / settings_file),
            ],
            cwd=project_root,
        )
    )


@when("I run the config command with this settings file")
def run_with_temp_settings(project_root, temp_settings_file, command_result):
    """Run the config command with the temporary settings file."""
    command_result.update(
        run_command(
            [
                sys.executable,
                "-m",
                "simulator.main",
                "--config",
                str(temp_settings_file["path"]),
            ],
            cwd=project_root,
        )
    )


# Then steps
@then(parsers.parse("the exit code must be {code:d}"))
def check_exit_code(command_result, code):
    """Check the exit code of the command."""
    assert command_result["returncode"] == code, (
        f"Expected exit code {code}, got {command_result['returncode']}. "
        f"stdout: {command_result['stdout']}, stderr: {command_result['stderr']}"
    )


@then(parsers.parse('the config value "{key}" must be "{expected_value}"'))
def check_config_value(command_result, key, expected_value):
    """Check a top-level value of the printed configuration."""
    config_data = printed_config(command_result)
    actual_value = str(config_data.get(key, ""))
    assert actual_value == expected_value, (
        f"Expected {key}='{expected_value}', got {key}='{actual_value}'. "
        f"Full config: {config_data}"
    )


@then(parsers.parse('the first plugin args kind must be "{kind}"'))
def check_first_plugin_args_kind(command_result, kind):
    """Check the kind of the first plugin args of the first profile."""
    config_data = printed_config(command_result)
    profile = config_data["initial_scheduler_cfg"]["profiles"][0]
    assert profile["pluginConfig"][0]["args"]["kind"] == kind


@then(parsers.parse('the log must contain: "{expected_text}"'))
def check_log_contains_text(command_result, expected_text):
    """Check that the log output contains the expected text."""
    combined_output = command_result["stdout"] + command_result["stderr"]
    assert expected_text in combined_output, (
        f"Expected text '{expected_text}' not found in output. "
        f"stdout: {command_result['stdout']}, stderr: {command_result['stderr']}"
    )
