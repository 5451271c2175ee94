"""Aguinaldo calculation core.

Payroll models, the total/12 calculation and receipt text rendering live
here. Nothing in this package touches files, the console or the clock;
callers pass the issue date in.
"""

from aguinaldo.domain.models import EmployeeId, Money

__all__ = ["Money", "EmployeeId"]
