"""Tests for core.config."""

import sys

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, read_env_file, write_user_env_vars


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, settings):
        assert settings.precision == 10
        assert settings.grid_symbols == "FC98J327K456LMPT"
        assert settings.max_grid_radius == 100
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DIGIPIN_PRECISION", "8")
        monkeypatch.setenv("DIGIPIN_MAX_GRID_RADIUS", "20")
        settings = AppSettings(_env_file=None)
        assert settings.precision == 8
        assert settings.max_grid_radius == 20

    def test_project_env_file(self, tmp_path):
        env_file = tmp_path / "project.env"
        env_file.write_text("DIGIPIN_CODE_SEPARATOR=.\n", encoding="utf-8")
        settings = AppSettings(_env_file=env_file)
        assert settings.code_separator == "."

    def test_inverted_domain_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, domain_min_lat=40.0, domain_max_lat=10.0)

    def test_bad_alphabet_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, grid_symbols="ABCDE")

    def test_grid_spec(self, settings):
        spec = settings.grid_spec()
        assert spec.size == 4
        assert spec.precision == 10
        assert spec.bounds == settings.domain_bounds()
        assert spec.bounds.southwest.latitude == 2.5

    def test_custom_domain(self):
        settings = AppSettings(
            _env_file=None,
            domain_min_lat=0.0,
            domain_max_lat=8.0,
            domain_min_lon=0.0,
            domain_max_lon=8.0,
            grid_symbols="ABCD",
            precision=3,
        )
        assert settings.grid_spec().alphabet.size == 2


class TestUserEnv:
    """Tests for the per-user .env helpers."""

    @pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout only")
    def test_config_dir_follows_xdg(self, tmp_path):
        assert get_user_config_dir() == tmp_path / "config" / "digipin-codec"

    def test_write_merges_values(self, tmp_path):
        env_path = tmp_path / "user" / ".env"
        write_user_env_vars({"DIGIPIN_PRECISION": "8"}, env_path)
        write_user_env_vars({"DIGIPIN_LOG_LEVEL": "INFO"}, env_path)

        text = env_path.read_text(encoding="utf-8")
        assert text.startswith("# digipin-codec user config")
        assert "DIGIPIN_PRECISION=8" in text
        assert "DIGIPIN_LOG_LEVEL=INFO" in text

    def test_written_file_is_readable(self, tmp_path):
        env_path = write_user_env_vars({"DIGIPIN_PRECISION": "7"}, tmp_path / ".env")
        assert AppSettings(_env_file=env_path).precision == 7

    def test_read_env_file_skips_noise(self, tmp_path):
        env_path = tmp_path / ".env"
        env_path.write_text('# comment\n\nDIGIPIN_A="1"\nnot a pair\nDIGIPIN_B = two\n', encoding="utf-8")
        assert read_env_file(env_path) == {"DIGIPIN_A": "1", "DIGIPIN_B": "two"}

    def test_read_missing_env_file(self, tmp_path):
        assert read_env_file(tmp_path / "missing.env") == {}
