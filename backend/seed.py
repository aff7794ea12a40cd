"""Seed script for the HRM employee service.

Populates the database with a handful of sample employees. Employees whose
employee ID already exists are skipped, so the script can be re-run safely.

Usage:
    cd backend && python seed.py
    # Or inside Docker:
    docker-compose exec backend python seed.py
"""

import asyncio
import os
import sys

# Ensure the backend directory is on the path when running from backend/
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hrm.core.config import settings
from hrm.core.database import async_session_factory, engine, init_models
from hrm.schemas.employees import EmployeeRequest
from hrm.services.employee_service import EmployeeService
from hrm.services.errors import DuplicateEmployeeIdError


# ── Seed Data Definitions ────────────────────────────────────────────────────

EMPLOYEES_DATA = [
    {"employeeId": "EMP001", "name": "John Doe", "department": "Engineering",
     "role": "Software Engineer", "skills": "JavaScript React Node.js",
     "skillLevel": 8, "experience": 5, "category": "Full-time",
     "availability": "Available", "performanceRating": 8.5},
    {"employeeId": "EMP002", "name": "Jane Smith", "department": "Engineering",
     "role": "Backend Developer", "skills": "Python Django SQL",
     "skillLevel": 7, "experience": 3, "category": "Full-time",
     "availability": "Available", "performanceRating": 7.8},
    {"employeeId": "EMP003", "name": "Priya Patel", "department": "Marketing",
     "role": "Marketing Manager", "skills": "SEO Content Strategy Analytics",
     "skillLevel": 6, "experience": 4.5, "category": "Full-time",
     "availability": "Busy", "performanceRating": 8.1},
    {"employeeId": "EMP004", "name": "David Kim", "department": "Finance",
     "role": "Financial Analyst", "skills": "Excel Forecasting SQL",
     "skillLevel": 5, "experience": 2, "category": "Part-time",
     "availability": "Available", "performanceRating": 7.2},
    {"employeeId": "EMP005", "name": "Maria Garcia", "department": "Sales",
     "role": "Account Executive", "skillLevel": 4, "experience": 1,
     "category": "Contract", "availability": "Unavailable", "status": "Absent"},
]


# ── Main Seed Function ────────────────────────────────────────────────────────

async def seed():
    """Seed the database with sample employees."""
    if settings.DB_CREATE_ALL:
        await init_models()

    service = EmployeeService(async_session_factory)
    created = skipped = 0

    print("🌱 Starting database seed...\n")
    print("👥 Creating employees...")
    for data in EMPLOYEES_DATA:
        try:
            employee = await service.create_employee(EmployeeRequest.model_validate(data))
        except DuplicateEmployeeIdError:
            print(f"   ⚠️  {data['employeeId']}: already exists, skipped")
            skipped += 1
            continue
        print(f"   ✅ {employee.employee_id}: {employee.name} (id={employee.id})")
        created += 1

    await engine.dispose()

    print("\n" + "=" * 60)
    print("✅ Database seeding complete!")
    print("=" * 60)
    print(f"   • {created} employees created")
    print(f"   • {skipped} employees skipped")
    print()


# ── Entry Point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    print("=" * 60)
    print("🌱 HRM Employee Seed Script")
    print("=" * 60)
    asyncio.run(seed())
