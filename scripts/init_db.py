from __future__ import annotations

import importlib

from dotenv import load_dotenv

from hrms.database.bootstrap import apply_schema, list_tables
from hrms.database.connection import DatabaseConnection, DBConfig
from hrms.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection(config)

    apply_schema(conn)
    tables = list_tables(conn)
    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
