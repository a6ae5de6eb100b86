from decimal import Decimal

import pytest

from hrms.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_unpaid_days_deducted_from_net_pay():
    calc = StandardPayrollCalculator(working_days_per_month=22)

    b = calc.calculate(
        base_salary=Decimal("22000"),
        allowances=Decimal("500"),
        deductions=Decimal("200"),
        unpaid_leave_days=2,
    )

    assert b.deductions == Decimal("2200.00")
    assert b.net_pay == Decimal("20300.00")
    assert b.unpaid_leave_days == 2


def test_net_pay_never_negative():
    calc = StandardPayrollCalculator(working_days_per_month=22)

    b = calc.calculate(
        base_salary=Decimal("1000"),
        allowances=Decimal("0"),
        deductions=Decimal("5000"),
        unpaid_leave_days=0,
    )

    assert b.net_pay == Decimal("0.00")


def test_leave_deduction_rounds_once():
    calc = StandardPayrollCalculator(working_days_per_month=22)

    # 50000 * 3 / 22 = 6818.1818...; a rounded day rate (2272.73) would give 6818.19
    assert calc.leave_deduction(Decimal("50000"), 3) == Decimal("6818.18")


def test_full_month_of_unpaid_leave_pays_nothing():
    calc = StandardPayrollCalculator(working_days_per_month=22)

    b = calc.calculate(
        base_salary=Decimal("1000"),
        allowances=Decimal("0"),
        deductions=Decimal("0"),
        unpaid_leave_days=22,
    )

    assert b.deductions == Decimal("1000.00")
    assert b.net_pay == Decimal("0.00")


def test_working_days_must_be_positive():
    with pytest.raises(ValueError):
        StandardPayrollCalculator(working_days_per_month=0)
