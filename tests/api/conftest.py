from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_document_service
from app.core.config import Config
from app.features.documents import DocumentService
from main import app


@pytest.fixture()
def make_client(make_config: Callable[..., Config]) -> Iterator[Callable[..., TestClient]]:
    """TestClient whose document service uses a temporary web root; kwargs become env vars."""

    def _make(**env: str) -> TestClient:
        service = DocumentService(make_config(**env))
        app.dependency_overrides[get_document_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture()
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
