from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector

from ..core.exceptions import ConfigurationError, DatabaseConnectionError

SUPPORTED_DRIVERS = {"mysql"}


@dataclass
class DBConfig:
    connection: str
    host: str
    port: int
    database: str
    username: str
    password: str

    @classmethod
    def from_settings(cls, db_config: dict) -> "DBConfig":
        return cls(
            connection=str(db_config.get("connection") or "mysql").lower(),
            host=str(db_config.get("host") or "localhost"),
            port=int(db_config.get("port") or 3306),
            database=str(db_config.get("database") or ""),
            username=str(db_config.get("username") or ""),
            password=str(db_config.get("password") or ""),
        )


class DatabaseConnection:
    """Process-wide DB connection factory.

    Note: each repository call opens a short-lived connection. A failure to
    connect is fatal for the request and is never retried.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        if config.connection not in SUPPORTED_DRIVERS:
            raise ConfigurationError(f"Unsupported DB_CONNECTION: {config.connection!r}")
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def dsn(self) -> str:
        c = self._config
        return f"{c.connection}:host={c.host};port={c.port};dbname={c.database}"

    def connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.username,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as e:
            raise DatabaseConnectionError(str(e), int(e.errno or 0)) from e
