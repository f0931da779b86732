from fastapi.testclient import TestClient

PASSWORD = "secret123"


def signup(client: TestClient, username: str, password: str = PASSWORD, **extra) -> dict:
    body = {
        "name": username.title(),
        "age": 30,
        "username": username,
        "email": f"{username}@example.com",
        "password": password,
    }
    body.update(extra)
    response = client.post("/api/auth/signup", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def create_task(client: TestClient, **fields) -> dict:
    body = {"title": "Write report", "date": "2030-01-15"}
    body.update(fields)
    response = client.post("/api/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()
