from fastapi.testclient import TestClient


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, username: str, password: str = "secret-pw", email: str | None = None, full_name: str | None = None):
    return client.post(
        "/auth/register",
        json={
            "username": username,
            "password": password,
            "email": email or f"{username}@example.com",
            "fullName": full_name or username.title(),
        },
    )
