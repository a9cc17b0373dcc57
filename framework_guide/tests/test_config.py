from __future__ import annotations

from framework_guide.config import DEFAULT_DATABASE_URL
from framework_guide.persistence.database import DatabaseManager


def test_default_database_is_relative_to_working_directory():
    assert DEFAULT_DATABASE_URL == "sqlite:///data/framework_guide.db"


def test_relative_sqlite_path_created_under_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = DatabaseManager("sqlite:///data/guide.db")
    manager.init_db()
    manager.engine.dispose()
    assert (tmp_path / "data" / "guide.db").exists()
