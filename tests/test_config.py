"""Tests for environment-driven settings."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from ts_stager.core.config import Settings, load_settings

_VARS = ["TS_STAGER_LOG_LEVEL", "TS_STAGER_LOG_FORMAT", "TS_STAGER_STRICT_SOURCE_MAPS"]


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=False):
        for k in _VARS:
            os.environ.pop(k, None)
        yield


class TestLoadSettings:
    def test_defaults(self, clean_env):
        assert load_settings() == Settings()

    def test_log_level_upper_cased(self, clean_env):
        os.environ["TS_STAGER_LOG_LEVEL"] = "debug"
        assert load_settings().log_level == "DEBUG"

    def test_json_format(self, clean_env):
        os.environ["TS_STAGER_LOG_FORMAT"] = "JSON"
        assert load_settings().log_format == "json"

    def test_unknown_format_falls_back_to_console(self, clean_env):
        os.environ["TS_STAGER_LOG_FORMAT"] = "xml"
        assert load_settings().log_format == "console"

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_strict_truthy(self, clean_env, value: str):
        os.environ["TS_STAGER_STRICT_SOURCE_MAPS"] = value
        assert load_settings().strict_source_maps is True

    @pytest.mark.parametrize("value", ["", "0", "false", "off"])
    def test_strict_falsy(self, clean_env, value: str):
        os.environ["TS_STAGER_STRICT_SOURCE_MAPS"] = value
        assert load_settings().strict_source_maps is False
