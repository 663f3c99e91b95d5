from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.app import create_app
from app.config.settings import Settings
from app.processor.processor import ExtractionPipeline


def _test_settings(tmp_path: Path, **overrides: object) -> Settings:
    values: dict[str, object] = {
        "uploads_dir": tmp_path / "uploads",
        "ocr_engine": "none",
        "extraction_provider": "none",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    """Settings rooted in tmp_path with OCR and extraction disabled by default."""

    def _make(**overrides: object) -> Settings:
        return _test_settings(tmp_path, **overrides)

    return _make


@pytest.fixture()
def make_client(
    make_settings: Callable[..., Settings],
) -> Callable[..., tuple[TestClient, FastAPI]]:
    def _make(
        pipeline: ExtractionPipeline | None = None, **overrides: object
    ) -> tuple[TestClient, FastAPI]:
        app = create_app(make_settings(**overrides), pipeline=pipeline)
        return TestClient(app), app

    return _make
