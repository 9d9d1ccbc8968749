"""Shared pytest fixtures for termsplit tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_ui_config(tmp_path, monkeypatch):
    """Point the UI config at a temp file so tests never touch ~/.config."""
    config_path = tmp_path / "ui_config.json"
    monkeypatch.setattr(
        "termsplit.config.ui_config.get_ui_config_path",
        lambda: config_path,
    )
    monkeypatch.delenv("TERMSPLIT_STRICT_POSITIONS", raising=False)
    return config_path
