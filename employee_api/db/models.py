"""
Database Models (SQLAlchemy ORM)
=============================================================================
CONCEPT: ORM Models

Each class below maps to a database table. SQLAlchemy translates:
  - Class attributes → Table columns
  - Python types → SQL types (str → VARCHAR, int → INTEGER)

TABLE DESIGN OVERVIEW:
  - employees: one row per employee, keyed by a store-assigned integer id.
    The UNIQUE constraint on email is the real guarantee that no two rows
    share an address; the service layer only checks first so it can answer
    with a friendly 409 in the common case.
=============================================================================
"""

from sqlalchemy import Column, Integer, String

from employee_api.db.engine import Base


class Employee(Base):
    __tablename__ = "employees"

    # Surrogate key: assigned by the database on first INSERT, never changed
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
