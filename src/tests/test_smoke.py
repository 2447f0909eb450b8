"""Smoke tests.

We keep early tests super simple to ensure:
- project imports work
- the public API is exported from the package root
"""

import validated_actions
from validated_actions.config.settings import Settings, settings


def test_public_api_exports():
    for name in validated_actions.__all__:
        assert hasattr(validated_actions, name), name


def test_settings_defaults():
    assert settings.issue_path_separator == "."
    assert Settings().preserve_upstream_failures is False
    assert Settings().log_payloads is False


def test_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("PRESERVE_UPSTREAM_FAILURES", "true")
    monkeypatch.setenv("VALIDATED_ACTIONS_LOG_PAYLOADS", "true")
    s = Settings()
    assert s.preserve_upstream_failures is True
    assert s.log_payloads is True
