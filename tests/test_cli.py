"""Tests for the tunelink CLI."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from tunelink.cli import main


def _run(argv):
    with patch("sys.argv", ["tunelink", *argv]):
        main()


class TestParseCommand:
    def test_parse_prints_fields(self, capsys):
        _run(["parse", "https://soundcloud.com/art/sets/pl/s-TOK?si=1"])
        out = capsys.readouterr().out
        assert "Provider: soundcloud" in out
        assert "Type: playlist" in out
        assert "Private: yes" in out
        assert "Sanitized: https://soundcloud.com/art/sets/pl/s-TOK" in out
        assert "secret_token: s-TOK" in out

    def test_parse_json(self, capsys):
        _run(["parse", "soundcloud.com/art/trk?in=art/sets/pl", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["contentType"] == "track"
        assert data["sanitizedUrl"] == "https://soundcloud.com/art/trk"
        assert data["originalUrl"] == "soundcloud.com/art/trk?in=art/sets/pl"

    def test_parse_invalid_exits_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(["parse", "https://soundcloud.com/"])
        assert exc_info.value.code == 1
        assert "Invalid SoundCloud URL format" in capsys.readouterr().err


class TestOtherCommands:
    def test_sanitize(self, capsys):
        _run(["sanitize", "http://soundcloud.com/a/b?utm_source=clipboard"])
        assert capsys.readouterr().out.strip() == "https://soundcloud.com/a/b"

    def test_sanitize_unsupported(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(["sanitize", "https://example.com/a"])
        assert exc_info.value.code == 1
        assert "No parser available" in capsys.readouterr().err

    def test_providers(self, capsys):
        _run(["providers"])
        assert "+ soundcloud: SoundCloud (soundcloud.com)" in capsys.readouterr().out

    def test_providers_empty(self, capsys, monkeypatch):
        monkeypatch.setenv("TUNELINK_PROVIDERS", "spotify")
        _run(["providers"])
        assert "No providers registered." in capsys.readouterr().out

    def test_bad_config_exits_one(self, capsys, monkeypatch):
        monkeypatch.setenv("TUNELINK_PROVIDERS", "tidal")
        with pytest.raises(SystemExit) as exc_info:
            _run(["providers"])
        assert exc_info.value.code == 1
        assert "Unknown provider 'tidal'" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        _run([])
        assert "usage:" in capsys.readouterr().out


class TestValidateConfigCommand:
    """Tests for tunelink validate-config."""

    def test_no_config_file_exits_zero(self, capsys):
        with (
            patch("tunelink.config.loader._find_project_config", return_value=None),
            patch(
                "tunelink.config.loader._get_user_config_path",
                return_value=Path("/nonexistent/config.yaml"),
            ),
            pytest.raises(SystemExit) as exc_info,
        ):
            _run(["validate-config"])

        assert exc_info.value.code == 0
        assert "No config file found" in capsys.readouterr().out

    def test_valid_config_exits_zero(self, tmp_path, capsys):
        config_file = tmp_path / ".tunelink" / "config.yaml"
        config_file.parent.mkdir()
        config_file.write_text("parsers:\n  enabled: [soundcloud]\n")

        with pytest.raises(SystemExit) as exc_info:
            _run(["validate-config"])

        assert exc_info.value.code == 0
        assert "Config is valid." in capsys.readouterr().out

    def test_warnings_exit_zero(self, tmp_path, capsys):
        config_file = tmp_path / ".tunelink" / "config.yaml"
        config_file.parent.mkdir()
        config_file.write_text("parsers:\n  enabled: [soundcloud, spotify]\n")

        with pytest.raises(SystemExit) as exc_info:
            _run(["validate-config"])

        assert exc_info.value.code == 0
        assert "valid with 1 warning(s)" in capsys.readouterr().out

    def test_invalid_config_exits_one(self, tmp_path, capsys):
        config_file = tmp_path / ".tunelink" / "config.yaml"
        config_file.parent.mkdir()
        config_file.write_text("parsers:\n  enabled: [tidal]\n")

        with pytest.raises(SystemExit) as exc_info:
            _run(["validate-config"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Unknown provider 'tidal'" in out
        assert "Config is invalid" in out

    def test_unparseable_config_exits_one(self, tmp_path, capsys):
        config_file = tmp_path / ".tunelink" / "config.yaml"
        config_file.parent.mkdir()
        config_file.write_text("- not\n- a mapping\n")

        with pytest.raises(SystemExit) as exc_info:
            _run(["validate-config"])

        assert exc_info.value.code == 1
        assert "Failed to parse config file" in capsys.readouterr().out

    def test_broken_project_config_fails_even_with_valid_user_config(
        self, tmp_path, capsys
    ):
        project_file = tmp_path / ".tunelink" / "config.yaml"
        project_file.parent.mkdir()
        project_file.write_text("parsers: [unclosed\n")
        user_file = tmp_path / "tunelink-root" / "config.yaml"
        user_file.parent.mkdir()
        user_file.write_text("parsers:\n  enabled: [soundcloud]\n")

        with pytest.raises(SystemExit) as exc_info:
            _run(["validate-config"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "(project)" in out
        assert "Failed to parse config file" in out
        assert "(user)" in out
        assert "Config is valid." in out

    def test_checks_user_config_behind_project_config(self, tmp_path, capsys):
        project_file = tmp_path / ".tunelink" / "config.yaml"
        project_file.parent.mkdir()
        project_file.write_text("parsers:\n  enabled: [soundcloud]\n")
        user_file = tmp_path / "tunelink-root" / "config.yaml"
        user_file.parent.mkdir()
        user_file.write_text("parsers:\n  strict_host: sometimes\n")

        with pytest.raises(SystemExit) as exc_info:
            _run(["validate-config"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Config is valid." in out
        assert "Config is invalid" in out
