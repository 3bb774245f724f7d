from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from employee_api.db import repositories as repo
from scripts.seed_data import SAMPLE_EMPLOYEES, seed_employees

PROJECT_ROOT = Path(__file__).resolve().parents[1]


async def test_seed_employees_is_repeatable(db_session) -> None:
    first_run = await seed_employees(db_session)
    second_run = await seed_employees(db_session)

    assert first_run == len(SAMPLE_EMPLOYEES)
    assert second_run == 0
    assert len(await repo.list_employees(db_session)) == len(SAMPLE_EMPLOYEES)


def test_migration_creates_employees_table(tmp_path) -> None:
    db_file = tmp_path / "migrated.db"
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_file}")

    command.upgrade(config, "head")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        inspector = inspect(engine)
        columns = {c["name"] for c in inspector.get_columns("employees")}
        unique_indexes = [i for i in inspector.get_indexes("employees") if i["unique"]]
    finally:
        engine.dispose()

    assert columns == {"id", "first_name", "last_name", "email"}
    assert [i["column_names"] for i in unique_indexes] == [["email"]]
