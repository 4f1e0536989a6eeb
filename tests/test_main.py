"""Tests for running the application as a script."""

import runpy
from pathlib import Path
from unittest.mock import patch

from fastapi import FastAPI

from app.config import get_settings

MAIN_PATH = Path(__file__).resolve().parent.parent / "main.py"


def test_script_serves_app_with_uvicorn():
    settings = get_settings()
    with patch("uvicorn.run") as run:
        runpy.run_path(str(MAIN_PATH), run_name="__main__")

    run.assert_called_once()
    args, kwargs = run.call_args
    assert isinstance(args[0], FastAPI)
    assert kwargs == {"host": settings.HOST, "port": settings.PORT}
