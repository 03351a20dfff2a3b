from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Optional

from mysql.connector import errors, pooling

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT, POOL_RETRY_SECONDS


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    # seconds a request waits for a free pooled connection
    pool_timeout: float = DEFAULT_POOL_TIMEOUT


class DatabaseConnection:
    """Singleton-like DB connection factory backed by a mysql-connector pool.

    Note: The pool is created on first use, so building the app does not need
    a reachable database. ``connect()`` hands out a pooled connection whose
    ``close()`` returns it to the pool. When every connection is checked out,
    ``connect()`` waits up to ``pool_timeout`` seconds for one to come back.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._pool_lock = threading.Lock()

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is None:
            with self._pool_lock:
                if self._pool is None:
                    self._pool = pooling.MySQLConnectionPool(
                        pool_name="txlog",
                        pool_size=int(self._config.pool_size),
                        pool_reset_session=True,
                        host=self._config.host,
                        port=int(self._config.port),
                        user=self._config.user,
                        password=self._config.password,
                        database=self._config.database,
                        autocommit=False,
                    )
        return self._pool

    def connect(self):
        pool = self._get_pool()
        deadline = time.monotonic() + float(self._config.pool_timeout)
        while True:
            try:
                return pool.get_connection()
            except errors.PoolError:
                # pool exhausted
                if time.monotonic() >= deadline:
                    raise
                time.sleep(POOL_RETRY_SECONDS)
