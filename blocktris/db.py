# blocktris/db.py
from sqlalchemy import Column, DateTime, Integer, MetaData, Table, create_engine
from sqlalchemy.engine import Engine

from blocktris.core.config import load_settings

metadata = MetaData()

scores = Table(
    "scores",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("score", Integer, nullable=False),
    Column("created_at", DateTime, nullable=False),
)


def make_engine(database_url: str | None = None) -> Engine:
    url = database_url or load_settings().database_url
    return create_engine(
        url,
        pool_pre_ping=True,
        future=True,
    )


def init_schema(engine: Engine) -> None:
    metadata.create_all(engine)
