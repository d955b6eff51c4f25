from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from waduk_app.common.logging import create_logger
from waduk_app.container import Container
from waduk_app.core.enums import Role
from waduk_app.database.connection import DatabaseConnection, DBConfig
from waduk_app.main import create_app
from waduk_app.users.model import User
from waduk_app.users.service import CurrentUserService


@dataclass
class InMemoryUsers:
    users_by_id: dict[int, User] = field(default_factory=dict)
    calls: int = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        self.calls += 1
        return self.users_by_id.get(user_id)


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


@pytest.fixture
def users() -> InMemoryUsers:
    return InMemoryUsers(
        users_by_id={
            1: User(id=1, username="admin", role=Role.ADMIN, waduk_id=None),
            2: User(id=2, username="petugas", role=Role.PETUGAS, waduk_id=7),
        }
    )


@pytest.fixture
def container(users) -> Container:
    conn = DatabaseConnection(
        DBConfig(connection="mysql", host="localhost", port=3306, database="waduk_test", username="root", password="")
    )
    return Container(
        conn=conn,
        logger=create_logger("waduk-test"),
        users_repo=users,
        current_user_service=CurrentUserService(users),
    )


@pytest.fixture
def app(container):
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
