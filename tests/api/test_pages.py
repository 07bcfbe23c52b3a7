from fastapi.testclient import TestClient

from apps.api.main import app


def test_index_serves_chat_page():
    client = TestClient(app)

    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'fetch("/chat"' in response.text
