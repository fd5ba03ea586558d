from fastapi.testclient import TestClient

from agentpro.config import Settings
from agentpro.container import AppContainer
from agentpro.main import create_app


def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "environment" in data
    assert "version" in data
    assert data["session_state"] == "onboarding"


def test_health_reflects_session_state(client: TestClient) -> None:
    client.post("/api/session/onboarding/complete")

    assert client.get("/health").json()["session_state"] == "role_selection"


def test_explicit_container_is_used() -> None:
    """A pre-built container is installed instead of a fresh one."""
    settings = Settings(seed_data=False, login_delay_seconds=0)
    container = AppContainer(settings)

    with TestClient(create_app(settings, container=container)) as client:
        assert client.get("/api/chats").json() == []
        client.post("/api/session/onboarding/complete")

    assert container.session_manager.state.value == "role_selection"
