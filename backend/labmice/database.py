from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv
from loguru import logger
import os

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./labmice.db")

if DATABASE_URL.startswith("sqlite"):
    sqlite_args = {"check_same_thread": False, "timeout": 30}
else:
    sqlite_args = {}

engine = create_engine(DATABASE_URL, connect_args=sqlite_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None):
    """Create any missing tables on the given engine."""

    from . import models  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("database ready at {}", bind.url.render_as_string(hide_password=True))


def dispose_engine(bind=None):
    (bind or engine).dispose()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
