"""Tests for api/settings module."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from api.settings import Settings


class TestSettingsDefaults:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app_name == "paramguard-api"
        assert settings.reject_status_code == 400
        assert settings.log_level == "INFO"
        assert settings.allowed_origins == ["http://localhost:3000", "http://localhost:5173"]


class TestSettingsFromEnvironment:
    def test_allowed_origins_parsed(self):
        with patch.dict("os.environ", {"ALLOWED_ORIGINS": "https://a.example, ,https://b.example"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.allowed_origins == ["https://a.example", "https://b.example"]

    def test_log_level_normalized(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "chatty"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_reject_status_code_override(self):
        with patch.dict("os.environ", {"REJECT_STATUS_CODE": "422"}, clear=True):
            assert Settings(_env_file=None).reject_status_code == 422

    @pytest.mark.parametrize("code", ["200", "500", "399"])
    def test_reject_status_code_must_be_4xx(self, code):
        with patch.dict("os.environ", {"REJECT_STATUS_CODE": code}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)
