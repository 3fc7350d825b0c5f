"""Tests for the ``python -m server`` entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cattree.config import CATTREE_LOG_LEVEL
from server.__main__ import main


def test_runs_uvicorn_with_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("RELOAD", "TRUE")

    with patch("server.__main__.uvicorn.run") as mock_run:
        main()

    mock_run.assert_called_once_with(
        "server.main:app",
        host="127.0.0.1",
        port=9001,
        reload=True,
        log_config=None,
        log_level=CATTREE_LOG_LEVEL.lower(),
    )


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("HOST", "PORT", "RELOAD"):
        monkeypatch.delenv(name, raising=False)

    with patch("server.__main__.uvicorn.run") as mock_run:
        main()

    kwargs = mock_run.call_args.kwargs
    assert kwargs["host"] == "0.0.0.0"  # noqa: S104
    assert kwargs["port"] == 8000
    assert kwargs["reload"] is False
