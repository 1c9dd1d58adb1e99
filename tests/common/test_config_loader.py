"""Tests for shopclone/common/config_loader.py"""

import pytest

from shopclone.common.config_loader import CloneSettings, load_clone_settings, load_config


class TestCloneSettings:
    def test_defaults_match_auto_limit(self):
        settings = CloneSettings()
        assert settings.rate_limit_interval == 1.5
        assert settings.rate_limit_bucket_size == 40
        assert settings.rate_limit_calls == 1

    def test_list_params(self):
        assert CloneSettings().list_params() == {"limit": 250, "published_status": "published"}

    def test_count_params(self):
        assert CloneSettings().count_params() == {"published_status": "published"}


class TestLoadCloneSettings:
    def test_loads_explicit_file(self, tmp_path):
        path = tmp_path / "clone.yaml"
        path.write_text(
            "rate_limit:\n"
            "  interval_seconds: 0.5\n"
            "  bucket_size: 10\n"
            "  calls: 2\n"
            "pagination:\n"
            "  page_size: 50\n",
            encoding="utf-8",
        )

        settings = load_clone_settings(path)

        assert settings.rate_limit_interval == 0.5
        assert settings.rate_limit_bucket_size == 10
        assert settings.rate_limit_calls == 2
        assert settings.page_size == 50
        assert settings.published_status == "published"

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "clone.yaml"
        path.write_text("", encoding="utf-8")
        assert load_clone_settings(path) == CloneSettings()

    def test_bundled_config(self):
        settings = load_clone_settings()
        assert settings == CloneSettings()


class TestLoadConfig:
    def test_loads_bundled_file(self):
        config = load_config("clone.yaml")
        assert config["rate_limit"]["bucket_size"] == 40

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("does_not_exist.yaml")
