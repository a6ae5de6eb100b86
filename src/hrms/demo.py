"""Demo employees so a fresh instance has someone to log in as."""

from __future__ import annotations

import logging

from .container import Container

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    {
        "full_name": "Dhruv Admin",
        "email": "admin@hrms.local",
        "department": "Management",
        "position": "HR Administrator",
        "role": "admin",
        "base_salary": "90000",
        "hire_date": "2022-01-10",
    },
    {
        "full_name": "Priya Sharma",
        "email": "priya@hrms.local",
        "department": "Human Resources",
        "position": "HR Executive",
        "role": "hr",
        "base_salary": "52000",
        "hire_date": "2023-04-03",
    },
    {
        "full_name": "Arjun Mehta",
        "email": "arjun@hrms.local",
        "department": "Engineering",
        "position": "Software Engineer",
        "role": "employee",
        "base_salary": "66000",
        "hire_date": "2024-07-15",
    },
)


def seed_demo_employees(container: Container) -> int:
    """Create the demo employees that are missing; returns how many were added."""
    added = 0
    for row in DEMO_EMPLOYEES:
        if container.employees_repo.get_by_email(row["email"]):
            continue
        container.employee_service.create(**row)
        added += 1
    if added:
        logger.info("Seeded %d demo employee(s)", added)
    return added
