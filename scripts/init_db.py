from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from txlog.config import get_settings_module
from txlog.database.bootstrap import ensure_schema, list_tables

logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_schema(db_config)
    tables = list_tables(db_config)
    print(
        "OK: Schema ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
