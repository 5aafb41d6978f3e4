from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ..config import CartConfig, load_env
from ..models.base import Base
from ..services.logging import set_log_level


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _ensure_sqlite_dir(database_url: str) -> None:
    # Ensure sqlite file parent directory exists to avoid 'unable to open database file'
    if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
        db_path = database_url.split("sqlite:///")[-1]
        try:
            parent = Path(db_path).expanduser().resolve().parent
            parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            # real error will surface on connect if still invalid
            pass


def make_engine(config: Optional[CartConfig] = None) -> Engine:
    cfg = config or load_env()
    _ensure_sqlite_dir(cfg.database_url)
    return create_engine(cfg.database_url, echo=cfg.echo_sql, future=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


def init_schema(engine: Engine) -> None:
    """Create visitor_shopping_cart and member_shopping_cart if missing."""
    Base.metadata.create_all(engine)


def configure(config: Optional[CartConfig] = None) -> sessionmaker:
    """Bind the module-level engine and session factory used by get_session()."""
    global _engine, _session_factory
    cfg = config or load_env()
    set_log_level(cfg.log_level)
    _engine = make_engine(cfg)
    _session_factory = make_session_factory(_engine)
    return _session_factory


def get_engine() -> Engine:
    if _engine is None:
        configure()
    return _engine


@contextmanager
def get_session():
    """Unit of work for callers of the cart stores: commit on success, roll back on error."""
    if _session_factory is None:
        configure()
    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
