from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from fortunewheel.db.engine import make_engine

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def upgrade_db(target_revision: str = "head") -> None:
    """Run the alembic migrations that create the spin and cache tables."""
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    command.upgrade(alembic_cfg, target_revision)


def main() -> None:
    upgrade_db()
    engine = make_engine()
    tables = sorted(inspect(engine).get_table_names())
    print("Tables:", ", ".join(tables))
    engine.dispose()


if __name__ == "__main__":
    main()
