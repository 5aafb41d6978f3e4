import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from shopping_cart.config import CartConfig
from shopping_cart.db.session import init_schema, make_engine, make_session_factory
from shopping_cart.services import MemberCartStore, VisitorCartStore
from shopping_cart.services import logging as cart_logging


@pytest.fixture(scope='function')
def engine():
    """In-memory SQLite engine with both cart tables."""
    config = CartConfig(
        database_url='sqlite://',
        log_level='INFO',
        strict_errors=False,
        echo_sql=False,
    )
    engine = make_engine(config)
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope='function')
def session(engine):
    """Database session for one test; rolled back afterwards."""
    session = make_session_factory(engine)()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(scope='function')
def visitor_store(session):
    return VisitorCartStore(session, strict=False)


@pytest.fixture(scope='function')
def member_store(session):
    return MemberCartStore(session, strict=False)


@pytest.fixture(scope='function')
def unreachable_session(tmp_path):
    """Session whose database file cannot be opened, so every statement fails."""
    url = f"sqlite:///{tmp_path / 'missing-dir' / 'cart.db'}"
    engine = create_engine(url, future=True)
    session = Session(bind=engine)
    yield session
    session.close()
    engine.dispose()


@pytest.fixture(autouse=True)
def reset_log_level():
    cart_logging.set_log_level('INFO')
    yield
    cart_logging.set_log_level('INFO')
