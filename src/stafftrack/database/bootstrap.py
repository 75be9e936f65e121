from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parent
DEMO_PASSWORD = "stafftrack123"

# (full_name, email, role, employee_number, department, position, hire_date)
DEMO_ACCOUNTS = (
    ("Admin Demo", "admin@stafftrack.local", "admin", "EMP-0001", "Administration", "System Administrator", "2020-01-06"),
    ("Hannah Reyes", "hr@stafftrack.local", "hr", "EMP-0002", "Human Resources", "HR Manager", "2020-03-02"),
    ("Daniel Okafor", "head@stafftrack.local", "department_head", "EMP-0003", "Engineering", "Head of Engineering", "2021-05-17"),
    ("Mia Lindqvist", "employee@stafftrack.local", "employee", "EMP-0004", "Engineering", "Software Engineer", "2023-09-11"),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql_file(conn_factory: DatabaseConnection, path: str | Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = conn_factory.connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _exec_sql_file(DatabaseConnection(DBConfig.from_dict(db_config)), schema_path)
    logger.info("Applied %s (%d statements)", Path(schema_path).name, count)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _exec_sql_file(DatabaseConnection(DBConfig.from_dict(db_config)), seed_path)
    logger.info("Applied %s (%d statements)", Path(seed_path).name, count)


def ensure_demo_users(db_config: dict) -> None:
    """Upsert one account per role, each linked to an employee record."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)
        password_hash = generate_password_hash(DEMO_PASSWORD)

        for full_name, email, role, number, department, position, hire_date in DEMO_ACCOUNTS:
            cur.execute("SELECT user_id FROM users WHERE email=%s", (email,))
            existing = cur.fetchone()
            if existing:
                user_id = int(existing["user_id"])
                cur.execute(
                    """
                    UPDATE users
                    SET full_name=%s, password_hash=%s, role=%s, is_active=1
                    WHERE user_id=%s
                    """,
                    (full_name, password_hash, role, user_id),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO users(full_name, email, password_hash, role)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (full_name, email, password_hash, role),
                )
                user_id = int(cur.lastrowid)

            cur.execute("SELECT employee_id FROM employees WHERE user_id=%s", (user_id,))
            if not cur.fetchone():
                cur.execute(
                    """
                    INSERT INTO employees(user_id, employee_number, department, position, hire_date)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (user_id, number, department, position, hire_date),
                )

        conn.commit()
    finally:
        conn.close()
    logger.info("Demo accounts ready (%d)", len(DEMO_ACCOUNTS))


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
