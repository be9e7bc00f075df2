from __future__ import annotations

from fastapi.testclient import TestClient

from uritmix.api.deps import get_logout_session_use_case, get_refresh_session_use_case
from uritmix.application.dto.auth import LoggedPersonOutput
from uritmix.domain.entities.person import AuthRole
from uritmix.domain.errors import ErrorCode, app_error
from uritmix.domain.result import Failure, Success
from uritmix.main import app


class FakeUseCase:
    def __init__(self, result):
        self.result = result
        self.commands = []

    async def execute(self, command):
        self.commands.append(command)
        return self.result


def _provider(use_case):
    return lambda: use_case


def _logged_person() -> LoggedPersonOutput:
    return LoggedPersonOutput(
        person_id=1,
        first_name="Anna",
        last_name="Petrova",
        role=AuthRole.ADMIN,
        email="anna@example.com",
        access_token="access",
        refresh_token="refresh",
    )


def test_refresh_returns_new_credentials():
    use_case = FakeUseCase(Success(_logged_person()))
    app.dependency_overrides[get_refresh_session_use_case] = lambda: use_case

    response = TestClient(app).post("/v1/auth/refresh", json={"refresh_token": "old"})

    app.dependency_overrides.clear()
    assert response.status_code == 200
    body = response.json()
    assert body["access_token"] == "access"
    assert body["refresh_token"] == "refresh"
    assert body["role"] == "admin"
    assert use_case.commands[0].refresh_token == "old"


def test_refresh_maps_token_errors_to_status_codes():
    cases = [
        (ErrorCode.REFRESH_TOKEN_INVALID, 401),
        (ErrorCode.REFRESH_TOKEN_REVOKED, 401),
        (ErrorCode.ACCOUNT_BLOCKED, 403),
    ]
    for code, status_code in cases:
        app.dependency_overrides[get_refresh_session_use_case] = _provider(FakeUseCase(Failure(app_error(code))))

        response = TestClient(app).post("/v1/auth/refresh", json={"refresh_token": "old"})

        assert response.status_code == status_code
        assert response.json()["detail"]["code"] == code.value
    app.dependency_overrides.clear()


def test_logout_always_reports_ok():
    use_case = FakeUseCase(Success(None))
    app.dependency_overrides[get_logout_session_use_case] = lambda: use_case

    response = TestClient(app).post("/v1/auth/logout", json={"refresh_token": "old"})

    app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json() == {"ok": True}
