"""AppConfig 테스트."""

import os
from unittest.mock import patch

import pytest

from core.domain.exceptions import ConfigurationError
from interface.config import AppConfig
from interface.dependencies import build_report_service


def test_from_env_reads_values():
    env = {
        "DART_API_KEY": " abc ",
        "DART_API_TIMEOUT": "12.5",
        "PORT": "8080",
        "LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, env, clear=True):
        config = AppConfig.from_env(load_env_file=False)

    assert config.dart_api_key == "abc"
    assert config.api_timeout == 12.5
    assert config.port == 8080
    assert config.log_level == "DEBUG"
    assert config.account_keywords_path is None


def test_from_env_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig.from_env(load_env_file=False)

    assert config.dart_api_key is None
    assert config.api_timeout == 30.0
    assert config.port == 3000


def test_build_report_service_requires_api_key():
    with pytest.raises(ConfigurationError):
        build_report_service(AppConfig(dart_api_key=None))


def test_build_report_service():
    service = build_report_service(AppConfig(dart_api_key="dummy_key"))

    assert service.list_companies()[0].corp_code == "00334624"
