from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # The bundled schema has no ';' inside literals, a plain split is enough.
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def ensure_database_exists(config: DBConfig) -> None:
    conn = mysql.connector.connect(**config.connect_kwargs(with_database=False))
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: Optional[Path] = None) -> int:
    """Create missing tables (idempotent). Returns the number of statements run."""
    config = DBConfig.from_dict(db_config)
    ensure_database_exists(config)

    sql = Path(schema_path or SCHEMA_PATH).read_text(encoding="utf-8")
    conn = mysql.connector.connect(**config.connect_kwargs())
    count = 0
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()

    logger.info("Schema applied to %s (%s statements)", config.database, count)
    return count
