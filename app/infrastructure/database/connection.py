"""Database engine and session factory for the PostgreSQL deployment."""
import logging
import os
import re

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

log = logging.getLogger("towerdefense.database")

_engine = None
_SessionLocal = None

# Matches a postgres(ql):// URL anywhere inside a string.
_PG_URL_RE = re.compile(r"(postgres(?:ql)?://\S+)")


def _resolve_database_url(env_var: str = "DATABASE_URL") -> str:
    """Read a database URL from environment and return a clean SQLAlchemy URL.

    Handles robustly:
    - Leading/trailing whitespace or newlines from copy-paste.
    - Literal surrounding quotes pasted in dashboards.
    - Full ``psql`` command pasted instead of just the URL.
    - ``postgres://`` scheme that SQLAlchemy rejects (needs ``postgresql://``).
    """
    raw = os.environ.get(env_var, "").strip()

    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ('"', "'"):
        raw = raw[1:-1].strip()

    match = _PG_URL_RE.search(raw)
    url = match.group(1) if match else raw
    url = url.rstrip("'\"").strip()

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    # psycopg 3 driver
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)

    return url


def _masked_host(url: str) -> str:
    if "@" not in url:
        return "<no-host>"
    return url.split("@")[-1].split("?")[0]


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": 3,
        "max_overflow": 5,
        "pool_timeout": 15,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }


def init_engine(url: str | None = None) -> None:
    """Create the engine and sessionmaker from ``url`` or DATABASE_URL."""
    global _engine, _SessionLocal

    url = url or _resolve_database_url("DATABASE_URL")
    if not url:
        log.warning("DATABASE_URL is empty -- skipping database init.")
        return

    log.info("Initialising database engine -> %s", _masked_host(url))
    _engine = create_engine(url, echo=False, **_engine_options(url))
    _SessionLocal = sessionmaker(bind=_engine, expire_on_commit=False)


def get_session_factory():
    """Return the sessionmaker. Raises RuntimeError before init_engine()."""
    if _SessionLocal is None:
        raise RuntimeError("Database engine not initialised. Call init_engine() first.")
    return _SessionLocal


def create_tables() -> None:
    """Create all tables (idempotent)."""
    from app.infrastructure.database.models import Base

    if _engine is None:
        raise RuntimeError("Database engine not initialised. Call init_engine() first.")
    Base.metadata.create_all(bind=_engine)
    log.info("Tables verified.")


def check_health() -> bool:
    """Lightweight connectivity probe."""
    if _engine is None:
        return False
    try:
        with _engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        log.warning("Database health check failed: %s", exc)
        return False
