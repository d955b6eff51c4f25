from __future__ import annotations

import logging
from dataclasses import dataclass

from .common.logging import create_logger
from .database.connection import DatabaseConnection, DBConfig
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import CurrentUserService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    logger: logging.Logger

    users_repo: UserRepository

    current_user_service: CurrentUserService


def build_container(*, db_config: dict, logger_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))
    logger = create_logger(
        str(logger_config.get("name", "App")),
        path=str(logger_config.get("path", "stdout")),
        level=str(logger_config.get("level", "DEBUG")),
    )

    users_repo = MySQLUserRepository(conn)
    current_user_service = CurrentUserService(users_repo)

    return Container(
        conn=conn,
        logger=logger,
        users_repo=users_repo,
        current_user_service=current_user_service,
    )
