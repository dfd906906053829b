"""Unit tests for settings and project config loading."""

from pathlib import Path

from quick_check.config import Settings, config_file_paths, load_project_config


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default settings."""
        monkeypatch.delenv("QUICK_CHECK_DEBUG", raising=False)
        settings = Settings(_env_file=None)

        assert settings.DEFAULT_BASE_BRANCHES == ["main", "master"]
        assert settings.REMOTE_NAME == "origin"
        assert settings.CONFIG_FILE_NAME == ".quick_check.yml"
        assert settings.DEBUG is False

    def test_environment_override(self, monkeypatch):
        """Test QUICK_CHECK_ prefixed variables override settings."""
        monkeypatch.setenv("QUICK_CHECK_DEBUG", "true")
        monkeypatch.setenv("QUICK_CHECK_REMOTE_NAME", "upstream")

        settings = Settings(_env_file=None)

        assert settings.DEBUG is True
        assert settings.REMOTE_NAME == "upstream"


class TestProjectConfig:
    """Test cases for config file discovery and loading."""

    def test_config_file_paths(self):
        """Test working directory comes before repository root."""
        paths = config_file_paths(Path("/repo/app"), Path("/repo"), ".quick_check.yml")

        assert paths == [Path("/repo/app/.quick_check.yml"), Path("/repo/.quick_check.yml")]

    def test_config_file_paths_same_directory(self):
        """Test the same directory is listed once."""
        paths = config_file_paths(Path("/repo"), Path("/repo"), ".quick_check.yml")

        assert paths == [Path("/repo/.quick_check.yml")]

    def test_load_missing(self, tmp_path):
        """Test missing files are skipped."""
        assert load_project_config([tmp_path / ".quick_check.yml"]) is None

    def test_load_mapping(self, tmp_path):
        """Test a valid config file."""
        path = tmp_path / ".quick_check.yml"
        path.write_text("base_branch: develop\n")

        assert load_project_config([path]) == {"base_branch": "develop"}

    def test_load_skips_invalid(self, tmp_path):
        """Test malformed and empty files are skipped in favour of the next."""
        broken = tmp_path / "broken.yml"
        broken.write_text("base_branch: 'unterminated\n")
        empty = tmp_path / "empty.yml"
        empty.write_text("")
        valid = tmp_path / "valid.yml"
        valid.write_text("base_branch: trunk\n")

        assert load_project_config([broken, empty, valid]) == {"base_branch": "trunk"}
