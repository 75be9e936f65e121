"""Apply the bundled schema.sql to the configured database."""

from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from stafftrack.config import get_settings_module
from stafftrack.database.bootstrap import SQL_DIR, apply_schema, list_tables


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
    tables = list_tables(db_config)
    print(
        "OK: schema applied -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
