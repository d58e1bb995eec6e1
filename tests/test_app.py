import asyncio

from sqlalchemy import inspect

from haca import main
from haca.db.postgres import engine
from haca.db.schema import metadata


def test_startup_creates_missing_tables(monkeypatch):
    monkeypatch.setattr(main, "init_mongo_indexes", lambda: None)
    metadata.drop_all(bind=engine)

    asyncio.run(main.startup_event())

    tables = set(inspect(engine).get_table_names())
    assert {"users", "students", "skills", "student_skills", "admin_login"} <= tables


def test_routes_work_after_startup(client, monkeypatch):
    monkeypatch.setattr(main, "init_mongo_indexes", lambda: None)
    asyncio.run(main.startup_event())

    response = client.get("/api/skills")

    assert response.status_code == 200
    assert response.json() == []
