import pytest

from invite_builder.storage.database import init_db, make_engine, make_session_factory


@pytest.fixture
def session_factory(tmp_path):
    """Factory de sessions sur une DB SQLite temporaire."""
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()
