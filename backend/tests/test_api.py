import pytest
from fastapi.testclient import TestClient

from core.database import get_db
from main import app


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(client):
    response = client.post("/api/templates/seed")
    assert response.status_code == 200
    return response.json()


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_seed_and_list(client, seeded):
    assert seeded["templates_created"] > 0

    templates = client.get("/api/templates").json()

    assert len(templates) == seeded["templates_created"]
    assert templates[0]["greek_template"] == "Βλέπω {article} {form}"


def test_get_template(client, seeded):
    first = client.get("/api/templates").json()[0]
    assert client.get(f"/api/templates/{first['id']}").json() == first


def test_get_template_missing(client):
    response = client.get("/api/templates/999")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "E4010_NOT_FOUND"


def test_practice_by_difficulty(client, seeded):
    response = client.get("/api/practice", params={"difficulty": "beginner", "count": 3})

    assert response.status_code == 200
    exercises = response.json()
    assert len(exercises) == 3
    for exercise in exercises:
        assert exercise["difficulty_phase"] == 1
        assert "{" not in exercise["target_text"]


def test_practice_singular_only(client, seeded):
    response = client.get(
        "/api/practice",
        params={"difficulty": "beginner", "include_plural": "false", "count": 4},
    )
    assert {e["number"] for e in response.json()} == {"singular"}


def test_practice_requires_difficulty_or_phase(client):
    response = client.get("/api/practice")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "E2000_VALIDATION_GENERIC"


def test_practice_without_vocabulary(client):
    response = client.get("/api/practice", params={"phase": 1})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "E5104_NO_VOCABULARY"


def test_check_answer(client, seeded):
    exercise = client.get("/api/practice", params={"phase": 1, "count": 1}).json()[0]

    right = client.post("/api/practice/check", json={"exercise": exercise, "answer": exercise["correct_answer"]})
    wrong = client.post("/api/practice/check", json={"exercise": exercise, "answer": "λάθος"})

    assert right.json() == {"correct": True, "expected": exercise["correct_answer"]}
    assert wrong.json()["correct"] is False


def test_migration_endpoint(client, stored_sentences):
    first = client.post("/api/migration").json()
    second = client.post("/api/migration").json()

    assert first["status"] == "committed"
    assert first["templates_created"] == 3
    assert second["status"] == "already_migrated"


def test_correlation_id_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc123"})
    assert response.headers["X-Correlation-ID"] == "abc123"


def test_correlation_id_generated(client):
    assert len(client.get("/health").headers["X-Correlation-ID"]) == 8
