import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from api.state import ServerSession
from core.config import Settings
from core.state import RuntimeState
from tools.executor import ToolExecutor
from tools.registry import default_registry


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.delenv("AWS_LAMBDA_FUNCTION_NAME", raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def state():
    return RuntimeState()


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def executor(registry, state, settings):
    return ToolExecutor(registry=registry, state=state, settings=settings)


@pytest.fixture
def session(settings):
    return ServerSession(settings=settings)


@pytest.fixture
def client(settings, session):
    app = create_app(settings=settings, session=session)
    with TestClient(app) as test_client:
        yield test_client
