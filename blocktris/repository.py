# blocktris/repository.py
import datetime as dt
import logging
from typing import List, Protocol

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .core.constants import LEADERBOARD_LIMIT
from .db import init_schema

logger = logging.getLogger(__name__)


class LeaderboardStore(Protocol):
    def record_score(self, score: int) -> None: ...

    def fetch_top_scores(self, limit: int = LEADERBOARD_LIMIT) -> List[int]: ...


class ScoreRepository:
    """
    Placar persistido em SQL. Guarda só as `keep` melhores pontuações;
    falhas de banco vão pro log e viram placar vazio.
    """

    def __init__(self, engine: Engine, keep: int = LEADERBOARD_LIMIT):
        self.engine = engine
        self.keep = keep
        self._ready = False

    def _ensure_schema(self) -> None:
        if not self._ready:
            init_schema(self.engine)
            self._ready = True

    # ---------- escrita ----------

    def record_score(self, score: int) -> None:
        sql_insert = text("""
            INSERT INTO scores (score, created_at)
            VALUES (:score, :at)
        """)
        sql_keep = text("""
            SELECT id FROM scores
            ORDER BY score DESC, id ASC
            LIMIT :keep
        """)
        sql_prune = text(
            "DELETE FROM scores WHERE id NOT IN :ids"
        ).bindparams(bindparam("ids", expanding=True))

        now = dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)
        try:
            self._ensure_schema()
            with self.engine.connect() as conn:
                conn.execute(sql_insert, {"score": int(score), "at": now})
                # mantém só o top N
                ids = [row[0] for row in conn.execute(sql_keep, {"keep": self.keep})]
                conn.execute(sql_prune, {"ids": ids})
                conn.commit()
        except SQLAlchemyError as e:
            logger.warning("[DB] record_score falhou: %s", e)

    # ---------- leitura ----------

    def fetch_top_scores(self, limit: int = LEADERBOARD_LIMIT) -> List[int]:
        sql = text("""
            SELECT score FROM scores
            ORDER BY score DESC, id ASC
            LIMIT :lim
        """)
        try:
            self._ensure_schema()
            with self.engine.connect() as conn:
                rows = conn.execute(sql, {"lim": limit}).all()
                return [int(r[0]) for r in rows]
        except SQLAlchemyError as e:
            logger.warning("[DB] fetch_top_scores falhou: %s", e)
            return []
