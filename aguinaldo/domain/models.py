"""Domain type definitions for aguinaldo.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in colones (fractional units allowed)
- EmployeeId: Identifier of an employee in the payroll file
"""

from typing import NewType

# Money amounts are colones as given in the payroll file, no rounding applied
Money = NewType("Money", float)

# Employee identifier, compared verbatim
EmployeeId = NewType("EmployeeId", str)
