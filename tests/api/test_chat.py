from fastapi.testclient import TestClient
from pydantic_ai.messages import ModelResponse
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.models.test import TestModel as ScriptedModel

from apps.api.main import app
from apps.api.routes import chat as chat_module
from packages.core.agent import MENU_SYSTEM_PROMPT, build_agent
from packages.core.tools.registry import build_menu_tool_registry


def test_chat_route(monkeypatch):
    agent = build_agent(
        build_menu_tool_registry(),
        MENU_SYSTEM_PROMPT,
        model=ScriptedModel(custom_output_text="Lunch is Sangati and chicken curry."),
    )
    monkeypatch.setattr(chat_module, "_AGENT", agent)
    client = TestClient(app)

    response = client.post("/chat", json={"message": "What's for lunch?"})
    assert response.status_code == 200
    assert response.json() == {"response": "Lunch is Sangati and chicken curry."}


def test_chat_route_agent_failure(monkeypatch):
    def broken(messages, info: AgentInfo) -> ModelResponse:
        raise RuntimeError("model unavailable")

    agent = build_agent(build_menu_tool_registry(), MENU_SYSTEM_PROMPT, model=FunctionModel(broken))
    monkeypatch.setattr(chat_module, "_AGENT", agent)
    client = TestClient(app)

    response = client.post("/chat", json={"message": "hello"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process request"}


def test_chat_route_agent_build_failure(monkeypatch):
    monkeypatch.setattr(chat_module, "_AGENT", None)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    client = TestClient(app)

    response = client.post("/chat", json={"message": "hello"})
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to process request"


def test_chat_route_requires_message():
    client = TestClient(app)

    response = client.post("/chat", json={})
    assert response.status_code == 422
