"""Create one demo account per role, then load the bundled seed.sql.

Run scripts/init_db.py first.
"""

from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from stafftrack.config import get_settings_module
from stafftrack.database.bootstrap import DEMO_ACCOUNTS, DEMO_PASSWORD, SQL_DIR, apply_seed_sql, ensure_demo_users


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    # seed.sql looks employees up by demo employee number
    ensure_demo_users(db_config)
    apply_seed_sql(db_config, seed_path=SQL_DIR / "seed.sql")

    print(
        "OK: seeded -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )
    for _, email, role, *_ in DEMO_ACCOUNTS:
        print(f"  {role:<16} {email} / {DEMO_PASSWORD}")


if __name__ == "__main__":
    main()
