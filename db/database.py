# db/database.py
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool

import config
from errors import StorageError

logger = logging.getLogger("garden.db")

if not config.DATABASE_URL:
    raise RuntimeError("DATABASE_URL is not set in environment variables")


def build_engine(url: str, echo: bool = False):
    """
    URL からエンジンを作る
    - SQLite はスレッドをまたいで接続を使えるようにする
    - インメモリ SQLite は全セッションで同じDBを見るよう StaticPool
    """
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(config.DATABASE_URL, echo=config.SQL_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def upsert(db: Session, model):
    """
    ON CONFLICT 句が使える INSERT をセッションの方言に合わせて返す
    (PostgreSQL / SQLite)
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise RuntimeError(f"upsert is not supported on {dialect}")


@contextmanager
def storage_guard(db: Session, action: str):
    """
    SQLAlchemy の例外だけを捕まえて rollback し StorageError にする
    ドメインエラー (NotFoundError など) はそのまま通す
    """
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception("storage failure: could not %s", action)
        raise StorageError(f"Server error: could not {action}")
