"""
Seed Data Script — Populate the database with sample employees
=============================================================================
CONCEPT: Data Seeding

Seeding fills the database with realistic test data so you can:
  1. Try the API endpoints without manual data entry
  2. Demo the system with meaningful examples

Employees are inserted through EmployeeService, so the email uniqueness
rule applies here too: running the script twice creates nothing new.

Run: python -m scripts.seed_data
=============================================================================
"""

import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from employee_api.db.engine import async_session_maker, engine, init_models
from employee_api.services.employee_service import EmployeeService


SAMPLE_EMPLOYEES = [
    {"first_name": "Mohammad", "last_name": "Ranjbar", "email": "mohammadranjbar@gmail.com"},
    {"first_name": "Hossein", "last_name": "Aslani", "email": "hosseinaslani@gmail.com"},
    {"first_name": "Sara", "last_name": "Karimi", "email": "sara.karimi@gmail.com"},
    {"first_name": "Amina", "last_name": "Benali", "email": "amina.benali@gmail.com"},
    {"first_name": "Lucas", "last_name": "Moreau", "email": "lucas.moreau@gmail.com"},
]


async def seed_employees(session, employees=SAMPLE_EMPLOYEES) -> int:
    """Create each sample employee whose email isn't taken yet. Returns how many were created."""
    service = EmployeeService(session)
    created = 0
    for emp_data in employees:
        result = await service.create(**emp_data)
        if result.ok:
            created += 1
        else:
            print(f"  Skipping {emp_data['email']}: {result.detail}")
    return created


async def main():
    print("Seeding database...")
    print("=" * 50)

    await init_models()

    async with async_session_maker() as session:
        created = await seed_employees(session)

    print(f"  Created {created} employees")
    print("=" * 50)
    print("Seeding complete!")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
