"""
Tests for the /api/users routes.
"""
from unittest.mock import patch

from api.routes import users as users_router

HARRY = "harry@hogwarts.edu"


def _verify(client, email, body):
    return client.post(f"/api/users/{email}/verify-security-question", json=body)


def test_list_users(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    data = resp.json()
    assert [u["email"] for u in data] == [
        "harry@hogwarts.edu",
        "hermione@hogwarts.edu",
        "ron@hogwarts.edu",
    ]
    assert data[0]["securityQuestions"][0] == {
        "question": "What is your pet's name?",
        "answer": "Hedwig",
    }


def test_list_users_store_failure(client, users_repo, monkeypatch):
    def boom():
        raise RuntimeError("store exploded")

    monkeypatch.setattr(users_repo, "list_users", boom)
    resp = client.get("/api/users")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Server error while retrieving users"}


def test_verify_correct_answers(client):
    body = [
        {"answer": "Hedwig"},
        {"answer": "Quidditch Through the Ages"},
        {"answer": "Evans"},
    ]
    resp = _verify(client, HARRY, body)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Security questions successfully answered"


def test_verify_schema_failure(client):
    body = [{"answer": "Hedwig"}, {"incorrectField": "invalid"}]
    resp = _verify(client, HARRY, body)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Bad Request"


def test_verify_non_array_body(client):
    resp = _verify(client, HARRY, {"answer": "Hedwig"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Bad Request"


def test_verify_invalid_json(client):
    resp = client.post(
        f"/api/users/{HARRY}/verify-security-question",
        content=b"[{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 500
    assert resp.json() == {"message": "Something went wrong, please try again later"}


def test_verify_incorrect_answer(client):
    body = [
        {"answer": "IncorrectAnswer"},
        {"answer": "Quidditch Through the Ages"},
        {"answer": "Evans"},
    ]
    resp = _verify(client, HARRY, body)
    assert resp.status_code == 401
    assert resp.json()["message"] == "Unauthorized"


def test_verify_too_few_answers(client):
    resp = _verify(client, HARRY, [{"answer": "Hedwig"}])
    assert resp.status_code == 401
    assert resp.json()["message"] == "Unauthorized"


def test_verify_unknown_user(client):
    body = [
        {"answer": "SomeAnswer"},
        {"answer": "SomeOtherAnswer"},
        {"answer": "YetAnotherAnswer"},
    ]
    resp = _verify(client, "nonexistent@hogwarts.edu", body)
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


def test_verify_unexpected_failure(client):
    with patch.object(users_router, "verify_security_answers", side_effect=RuntimeError("boom")):
        resp = _verify(client, HARRY, [{"answer": "Hedwig"}])
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error"}
