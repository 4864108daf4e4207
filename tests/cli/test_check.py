# SPDX-License-Identifier: MIT
"""
Tests for the check subcommand.
"""
import io
import json
import logging

import pytest

from pwstrength import __version__
from pwstrength import cli
from pwstrength.cli import main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every CLI test from an empty directory so no config is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestVersionAndHelp:
    """Test top-level commands."""

    def test_version_flag(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_version_subcommand(self, capsys):
        assert main(["version"]) == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_no_subcommand_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: pwstrength" in capsys.readouterr().out

    def test_init_prints_template(self, capsys):
        assert main(["init"]) == 0
        out = capsys.readouterr().out
        assert "locale: en" in out
        assert "fail_below:" in out


class TestCheckText:
    """Test text output."""

    def test_one_line_per_password(self, capsys):
        assert main(["check", "abc12", "abc123", "a1b2c3d4e5!"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "****  Weak",
            "****  Medium",
            "a1****5!  Strong",
        ]

    def test_explain_shows_rule(self, capsys):
        assert main(["check", "--explain", "abcdefgh"]) == 0
        assert capsys.readouterr().out.strip() == "****  Weak  [letters_only]"

    def test_portuguese_locale(self, capsys):
        assert main(["check", "--locale", "pt", "abc12", "abc123", "a1b2c3d4e5!"]) == 0
        labels = [line.split("  ")[1] for line in capsys.readouterr().out.splitlines()]
        assert labels == ["Fraca", "Média", "Forte"]

    def test_no_plaintext_in_output(self, capsys):
        secret = "Correct1Horse!Battery"
        main(["check", "--explain", secret])
        captured = capsys.readouterr()
        assert secret not in captured.out
        assert secret not in captured.err


class TestCheckJson:
    """Test JSON output."""

    def test_json_structure(self, capsys):
        assert main(["check", "--format", "json", "abc123", "12345678901!"]) == 0
        output = json.loads(capsys.readouterr().out)

        assert output["gate"] is None
        first, second = output["results"]
        assert first == {
            "password": "****",
            "category": "Medium",
            "label": "Medium",
            "rule": "medium_band",
            "features": {
                "length": 6,
                "has_letters": True,
                "has_digits": True,
                "has_symbols": False,
            },
        }
        assert second["category"] == "Medium"
        assert second["rule"] == "long_with_symbols"
        assert second["password"] == "12****1!"

    def test_empty_password_has_no_features(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
        assert main(["check", "--stdin", "--format", "json"]) == 0
        result = json.loads(capsys.readouterr().out)["results"][0]
        assert result["rule"] == "invalid_input"
        assert result["features"] is None


class TestInputSources:
    """Test where passwords are read from."""

    def test_stdin_one_per_line(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("abc123\r\nabcdefgh\na1b2c3d4e5!\n"))
        assert main(["check", "--stdin", "--explain"]) == 0
        rules = [line.rsplit("[", 1)[1].rstrip("]") for line in capsys.readouterr().out.splitlines()]
        assert rules == ["medium_band", "letters_only", "strong_band"]

    def test_stdin_keeps_surrounding_spaces(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("  abc1  \n"))
        assert main(["check", "--stdin", "--explain"]) == 0
        assert "[medium_band]" in capsys.readouterr().out

    def test_prompt_when_no_passwords(self, capsys, monkeypatch):
        prompts = []

        def fake_getpass(prompt=""):
            prompts.append(prompt)
            return "a1b2c3d4e5!"

        monkeypatch.setattr(cli.getpass, "getpass", fake_getpass)
        assert main(["check"]) == 0
        assert prompts == ["Password: "]
        assert capsys.readouterr().out.strip() == "a1****5!  Strong"


class TestGate:
    """Test --fail-below gating."""

    def test_gate_passes(self, capsys):
        assert main(["check", "--fail-below", "medium", "abc123", "a1b2c3d4e5!"]) == 0
        assert "Minimum Medium: PASSED" in capsys.readouterr().out

    def test_gate_fails(self, capsys):
        assert main(["check", "--fail-below", "strong", "abc123", "a1b2c3d4e5!", "abc"]) == 1
        assert "Minimum Strong: FAILED (2 of 3 below minimum)" in capsys.readouterr().out

    def test_gate_in_json(self, capsys):
        assert main(["check", "--format", "json", "--fail-below", "medium", "abc"]) == 1
        gate = json.loads(capsys.readouterr().out)["gate"]
        assert gate["minimum"] == "Medium"
        assert gate["passed"] is False
        assert gate["failures"] == [0]


class TestConfigFile:
    """Test config discovery from the working directory."""

    def test_config_in_cwd(self, capsys, isolated_cwd):
        (isolated_cwd / ".pwstrength.yml").write_text(
            "locale: pt\nlabels:\n  strong: Excelente\nfail_below: medium\n",
            encoding="utf-8",
        )
        assert main(["check", "abc123", "a1b2c3d4e5!"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "****  Média"
        assert out[1] == "a1****5!  Excelente"
        assert out[2] == "Minimum Medium: PASSED"

    def test_flags_override_config(self, capsys, isolated_cwd):
        (isolated_cwd / ".pwstrength.yml").write_text("format: json\nlocale: pt\n")
        assert main(["check", "--format", "text", "--locale", "en", "abc123"]) == 0
        assert capsys.readouterr().out.strip() == "****  Medium"


class TestLogging:
    """Test debug logging."""

    def test_verbose_logs_without_plaintext(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pwstrength")
        secret = "Abcdef123456!"
        assert main(["check", "--verbose", secret]) == 0

        assert "Read 1 password(s) from arguments" in caplog.text
        assert "Using default config" in caplog.text
        assert secret not in caplog.text
