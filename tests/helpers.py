from fastapi.testclient import TestClient

COOKIE_NAME = "session_id"


def auth_headers(token: str) -> dict:
    return {"Cookie": f"{COOKIE_NAME}={token}"}


def login(client: TestClient, email: str, password: str = "pw1", user_agent: str | None = None) -> str:
    headers = {"User-Agent": user_agent} if user_agent else None
    response = client.post("/login", json={"email": email, "password": password}, headers=headers)
    assert response.status_code == 200, response.text
    token = response.cookies.get(COOKIE_NAME)
    assert token
    # Tests address sessions explicitly through headers, not through the jar.
    client.cookies.clear()
    return token


def signup_and_login(client: TestClient, email: str, password: str = "pw1", user_agent: str | None = None) -> str:
    """Create an account, log in and return the session token from the cookie."""
    response = client.post("/signup", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return login(client, email, password, user_agent=user_agent)
