"""Repository functions against a real (SQLite) database."""

import pytest
from sqlalchemy.exc import IntegrityError

from employee_api.db import repositories as repo


async def _seed(db_session):
    first = await repo.create_employee(
        db_session, first_name="Mohammad", last_name="Ranjbar", email="mohammadranjbar@gmail.com"
    )
    second = await repo.create_employee(
        db_session, first_name="Hossein", last_name="Aslani", email="hosseinaslani@gmail.com"
    )
    return first, second


async def test_create_assigns_id(db_session) -> None:
    employee = await repo.create_employee(
        db_session, first_name="Mohammad", last_name="Ranjbar", email="mohammadranjbar@gmail.com"
    )

    assert employee.id is not None
    assert employee.id > 0


async def test_list_employees_in_insertion_order(db_session) -> None:
    first, second = await _seed(db_session)

    employees = await repo.list_employees(db_session)

    assert [e.id for e in employees] == [first.id, second.id]


async def test_list_employees_empty(db_session) -> None:
    assert await repo.list_employees(db_session) == []


async def test_get_employee_by_id(db_session) -> None:
    first, _ = await _seed(db_session)

    found = await repo.get_employee_by_id(db_session, first.id)

    assert found is not None
    assert found.email == "mohammadranjbar@gmail.com"
    assert await repo.get_employee_by_id(db_session, 9999) is None


async def test_get_employee_by_email(db_session) -> None:
    _, second = await _seed(db_session)

    found = await repo.get_employee_by_email(db_session, "hosseinaslani@gmail.com")

    assert found is not None
    assert found.id == second.id
    assert await repo.get_employee_by_email(db_session, "nobody@gmail.com") is None


async def test_find_employee_by_name(db_session) -> None:
    first, _ = await _seed(db_session)

    found = await repo.find_employee_by_name(db_session, "Mohammad", "Ranjbar")

    assert found is not None
    assert found.id == first.id
    assert await repo.find_employee_by_name(db_session, "Mohammad", "Aslani") is None


async def test_update_employee(db_session) -> None:
    first, _ = await _seed(db_session)

    updated = await repo.update_employee(
        db_session, first, first_name="Hossein", email="hosseinranjbar.mmr91@gmail.com"
    )

    assert updated.id == first.id
    assert updated.first_name == "Hossein"
    assert updated.last_name == "Ranjbar"
    assert updated.email == "hosseinranjbar.mmr91@gmail.com"


async def test_delete_employee(db_session) -> None:
    first, second = await _seed(db_session)

    removed = await repo.delete_employee(db_session, first.id)

    assert removed == 1
    assert await repo.get_employee_by_id(db_session, first.id) is None
    assert [e.id for e in await repo.list_employees(db_session)] == [second.id]


async def test_delete_missing_employee_removes_nothing(db_session) -> None:
    assert await repo.delete_employee(db_session, 9999) == 0


async def test_email_unique_constraint(db_session) -> None:
    await repo.create_employee(
        db_session, first_name="Mohammad", last_name="Ranjbar", email="mohammadranjbar@gmail.com"
    )

    with pytest.raises(IntegrityError):
        await repo.create_employee(
            db_session, first_name="Other", last_name="Person", email="mohammadranjbar@gmail.com"
        )
