"""Configuração do pytest para o cliente SMS.RU."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz do projeto ao PYTHONPATH para imports absolutos
project_root = Path(__file__).parent.parent
for path in (project_root / "src", project_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from smsru.domain.auth import Auth  # noqa: E402
from tests.fakes.fake_transport import FakeTransport  # noqa: E402


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def api_id_auth() -> Auth:
    return Auth.api_id("test-api-id")
