from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from labmice.database import Base
from labmice import models  # noqa: F401

SCRIPT_LOCATION = Path(__file__).resolve().parents[2] / "alembic"


def test_upgrade_creates_every_model_table(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = Config()
    cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert set(Base.metadata.tables) <= tables

    command.downgrade(cfg, "base")
    engine = create_engine(url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()


def test_timestamps_keep_their_offset():
    stamped = [t for t in Base.metadata.sorted_tables if "created_at" in t.c]
    assert {t.name for t in stamped} >= {"users", "labs", "mice", "log_entries"}
    for table in stamped:
        assert table.c.created_at.type.timezone, table.name
    assert models._utcnow().tzinfo is not None
