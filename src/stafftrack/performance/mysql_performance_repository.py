from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ReviewRow
from .repository import PerformanceRepository


class MySQLPerformanceRepository(PerformanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_reviews(self) -> Sequence[ReviewRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT p.review_id, p.employee_id, p.review_date, p.rating, p.comments,
                       e.employee_number, e.department, e.position,
                       u.full_name, rv.full_name AS reviewer_name
                FROM performance_reviews p
                JOIN employees e ON e.employee_id = p.employee_id
                JOIN users u ON u.user_id = e.user_id
                LEFT JOIN users rv ON rv.user_id = p.reviewer_id
                ORDER BY p.review_date DESC, p.review_id DESC
                """
            )
            return [
                ReviewRow(
                    review_id=int(r["review_id"]),
                    employee_id=int(r["employee_id"]),
                    employee_number=r["employee_number"],
                    full_name=r["full_name"],
                    department=r["department"],
                    position=r["position"],
                    review_date=r["review_date"],
                    rating=int(r["rating"]) if r.get("rating") is not None else None,
                    comments=r.get("comments"),
                    reviewer_name=r.get("reviewer_name"),
                )
                for r in fetchall(cur)
            ]

    def list_ratings(self) -> Sequence[Optional[int]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT rating FROM performance_reviews")
            return [int(r["rating"]) if r.get("rating") is not None else None for r in fetchall(cur)]
