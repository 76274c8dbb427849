"""
Relational table storage backed by SQLAlchemy (Postgres in production,
SQLite for tests).
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Float,
    Integer,
    String,
    create_engine,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from artcheck.storage import StorageError

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for any SQLAlchemy URL.

    In-memory SQLite gets a single shared connection so every request thread
    sees the same database.
    """
    if not database_url:
        raise ValueError("DATABASE_URL is required for the database backend")
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_engine(
            database_url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        future=True,
        pool_pre_ping=True,
        pool_recycle=1800,
    )


class SqlTableStorage:
    """
    Storage backend addressing one table (`users` or `cases`) by column filters.
    """

    def __init__(self, engine: Union[Engine, str], table: str):
        if isinstance(engine, str):
            engine = build_engine(engine)
        if table not in ROW_TYPES:
            raise ValueError(f"Unknown table: {table}")
        self.engine = engine
        self.table = table
        self.row_type = ROW_TYPES[table]
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def _to_dict(self, row) -> dict:
        return {
            column.name: getattr(row, column.name)
            for column in self.row_type.__table__.columns
            if column.name != "seq"
        }

    def read_all(self) -> Optional[list[dict]]:
        try:
            with self.Session() as session:
                rows = session.execute(
                    select(self.row_type).order_by(self.row_type.seq.asc())
                ).scalars()
                return [self._to_dict(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.warning("Select on %s failed: %s", self.table, exc)
            return None

    def find_by_id(self, record_id: str) -> Optional[dict]:
        try:
            with self.Session() as session:
                row = session.execute(
                    select(self.row_type).where(self.row_type.id == str(record_id))
                ).scalar_one_or_none()
                return self._to_dict(row) if row else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Lookup on {self.table} failed: {exc}") from exc

    def insert(self, record: dict) -> dict:
        columns = {
            column.name for column in self.row_type.__table__.columns
        } - {"seq"}
        values = {key: value for key, value in record.items() if key in columns}
        try:
            with self.Session() as session:
                row = self.row_type(**values)
                session.add(row)
                session.commit()
                session.refresh(row)
                return self._to_dict(row)
        except SQLAlchemyError as exc:
            raise StorageError(f"Insert into {self.table} failed: {exc}") from exc

    def delete_by_id(self, record_id: str) -> Optional[dict]:
        # Lookup and delete share one transaction.
        try:
            with self.Session() as session, session.begin():
                row = session.execute(
                    select(self.row_type).where(self.row_type.id == str(record_id))
                ).scalar_one_or_none()
                if not row:
                    return None
                removed = self._to_dict(row)
                session.delete(row)
            return removed
        except SQLAlchemyError as exc:
            raise StorageError(f"Delete from {self.table} failed: {exc}") from exc


Base = declarative_base()


class UserRow(Base):
    __tablename__ = "users"

    # Insertion order for read_all; never exposed.
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, unique=True, index=True)
    email = Column(String, nullable=True)
    password = Column(String, nullable=True)
    name = Column(String, nullable=True)
    admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(String, nullable=True)


class CaseRow(Base):
    __tablename__ = "cases"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, unique=True, index=True)
    user_id = Column(String, nullable=True, index=True)
    title = Column(String, nullable=True)
    storage_path = Column(String, nullable=True)
    feedback = Column(String, nullable=True)
    score = Column(Float, nullable=True)
    raw = Column(JSON, nullable=True)
    time_stamps = Column(JSON, nullable=True)
    user_comment = Column(String, nullable=True)


ROW_TYPES = {
    UserRow.__tablename__: UserRow,
    CaseRow.__tablename__: CaseRow,
}
