# tests/test_init_db.py
from sqlalchemy import create_engine, inspect

from memberhub.core.settings import get_settings
from memberhub.scripts import init_db


def test_init_db_creates_schema(monkeypatch, tmp_path) -> None:
    db_file = tmp_path / "memberhub.db"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("PORT", "8000")
    monkeypatch.setenv("SECRET_KEY", "init-db-secret")
    get_settings.cache_clear()
    try:
        init_db.main([])
        init_db.main(["--drop"])
    finally:
        get_settings.cache_clear()

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        assert set(inspect(engine).get_table_names()) == {"users", "role", "community", "member"}
    finally:
        engine.dispose()
