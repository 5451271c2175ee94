"""Pure aguinaldo calculation.

The statutory formula is total earnings over the period divided by twelve.
The divisor is fixed: employees with fewer months of data (partial-year
employment) still divide by twelve. No rounding happens here.
"""

from dataclasses import dataclass

from aguinaldo.domain.models import Money
from aguinaldo.domain.payroll import Employee

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class AguinaldoResult:
    """Immutable calculation result."""

    total_earnings: Money
    aguinaldo: Money


def calculate_aguinaldo(employee: Employee) -> AguinaldoResult:
    """Calculate total earnings and aguinaldo for an employee.

    Args:
        employee: Employee with monthly earnings in colones.

    Returns:
        AguinaldoResult with the sum of earnings and that sum divided by 12.
    """
    total = Money(sum(employee.monthly_earnings, 0.0))
    return AguinaldoResult(
        total_earnings=total,
        aguinaldo=Money(total / MONTHS_PER_YEAR),
    )
