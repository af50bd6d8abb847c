# tests/conftest.py
import os, sys, pathlib
from datetime import datetime, timedelta, timezone

import pytest

# добавить корень проекта в sys.path
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# безопасное значение по умолчанию, чтобы ничего не писать в рабочую БД
os.environ.setdefault("DB_URL", "sqlite:///:memory:")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pynotes import config
from pynotes.db import Base, init_db

@pytest.fixture(scope="function")
def session():
    # Изолированная In-Memory SQLite
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    init_db(engine)
    s = TestingSession()
    try:
        yield s
    finally:
        s.close()
        Base.metadata.drop_all(bind=engine)

class StepClock:
    """Часы, которые сдвигаются на минуту при каждом вызове."""

    def __init__(self, start=datetime(2026, 10, 17, 5, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now += timedelta(minutes=1)
        return current

@pytest.fixture
def clock():
    return StepClock()

@pytest.fixture
def db_env(tmp_path, monkeypatch):
    # файл, а не :memory:, чтобы данные жили между вызовами CLI
    monkeypatch.setenv("DB_URL", f"sqlite:///{tmp_path / 'notes.db'}")
    monkeypatch.setenv("TIMEZONE", "Asia/Novosibirsk")
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)
