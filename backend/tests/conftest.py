import pytest
from sqlalchemy import create_engine, event, func, select
from sqlalchemy.orm import sessionmaker

from app.models.base import Base
from app.models.profile import Profile
from app.models.like import Like  # noqa: F401
from app.models.match import Match  # noqa: F401


def enable_sqlite_savepoints(engine):
    """Let SQLAlchemy drive BEGIN/SAVEPOINT itself instead of pysqlite.

    Recipe from the SQLAlchemy SQLite dialect docs; works for the sync engine
    of an aiosqlite AsyncEngine too.
    """

    @event.listens_for(engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "kinnect.db"


@pytest.fixture
def engine(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    enable_sqlite_savepoints(engine)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def make_profile(session):
    def _make(**fields):
        profile = Profile(**fields)
        session.add(profile)
        session.commit()
        return profile

    return _make


@pytest.fixture
def count_rows(session_factory):
    def _count(model):
        with session_factory() as s:
            return s.execute(select(func.count()).select_from(model)).scalar()

    return _count


@pytest.fixture
def client(engine, db_path):
    """TestClient with get_db bound to the same SQLite file through aiosqlite."""
    from fastapi.testclient import TestClient
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import NullPool

    from app.main import app
    from app.models.base import get_db

    async_engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    enable_sqlite_savepoints(async_engine.sync_engine)
    TestSessionLocal = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with TestSessionLocal() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
