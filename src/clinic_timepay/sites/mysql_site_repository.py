from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import WorkSite
from .repository import SiteRepository


class MySQLSiteRepository(SiteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_sites(self, *, active_only: bool = True) -> Sequence[WorkSite]:
        sql = "SELECT site_id, name, code, is_active FROM work_sites"
        if active_only:
            sql += " WHERE is_active=1"
        sql += " ORDER BY site_id"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            return [
                WorkSite(
                    site_id=int(r["site_id"]),
                    name=r["name"],
                    code=r.get("code"),
                    is_active=bool(r["is_active"]),
                )
                for r in fetchall(cur)
            ]
