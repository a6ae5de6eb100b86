"""Dhruv HRMS package.

Organized by feature modules (auth, employees, attendance, leave, payroll,
reports) with a thin Flask controller layer over service/repository layers.
"""

__version__ = "1.0.0"
