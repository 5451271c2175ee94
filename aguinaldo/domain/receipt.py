"""Receipt text generation.

Pure functions that turn an employee, the company and the period into the
fixed-layout receipt. The issue date comes in as a parameter so output is
deterministic; currency formatting reads the platform locale database and
falls back to a plain colón rendering when the locale is not installed.
"""

import locale
from datetime import datetime

from aguinaldo.domain.calculator import calculate_aguinaldo
from aguinaldo.domain.models import Money
from aguinaldo.domain.payroll import Company, Employee, Period

DEFAULT_LOCALE = "es_CR.UTF-8"
RECEIPT_WIDTH = 65
HEAVY_RULE = "=" * RECEIPT_WIDTH
LIGHT_RULE = "-" * RECEIPT_WIDTH
RECEIPT_TITLE = "Recibo de aguinaldo (Ley Laboral Costa Rica)"
SIGNATURE_LINE = "Firma RRHH: ________________________________"


def fallback_currency(value: Money | float) -> str:
    """Format colones without locale data, e.g. ₡1200.50."""
    return f"₡{value:.2f}"


def format_currency(value: Money | float, locale_name: str = DEFAULT_LOCALE) -> str:
    """Format an amount as Costa Rican colones.

    Uses the monetary conventions of ``locale_name`` when the platform has
    them, otherwise ``fallback_currency``. The process locale is restored
    before returning.

    Args:
        value: Amount in colones.
        locale_name: Locale to format with.

    Returns:
        Formatted amount. Never raises for a bad or missing locale.
    """
    previous = locale.setlocale(locale.LC_MONETARY)
    try:
        locale.setlocale(locale.LC_MONETARY, locale_name)
        return locale.currency(value, grouping=True)
    except (locale.Error, ValueError):
        return fallback_currency(value)
    finally:
        locale.setlocale(locale.LC_MONETARY, previous)


def format_issue_date(now: datetime) -> str:
    return now.strftime("%d/%m/%Y")


def format_month_line(index: int, amount: Money | float, locale_name: str = DEFAULT_LOCALE) -> str:
    """Format one earnings line; index is 1-based."""
    return f"  Mes {index:02d}: {format_currency(amount, locale_name)}"


def format_company_header(company: Company) -> list[str]:
    """Header lines for the company; phone and email only when present."""
    lines = [
        f"{company.name} | Cédula jurídica: {company.legal_id}",
        company.address,
    ]
    if company.phone is not None:
        lines.append(f"Tel: {company.phone}")
    if company.email is not None:
        lines.append(f"Correo: {company.email}")
    return lines


def format_receipt(
    employee: Employee,
    company: Company,
    period: Period,
    now: datetime,
    locale_name: str = DEFAULT_LOCALE,
) -> str:
    """Render the printable aguinaldo receipt for one employee.

    Args:
        employee: Employee to render.
        company: Employer shown in the header.
        period: Calculation period, printed as given.
        now: Timestamp used for the issue date line.
        locale_name: Locale used for currency amounts.

    Returns:
        Receipt text, lines joined with newlines, no trailing newline.
    """
    result = calculate_aguinaldo(employee)

    lines = [HEAVY_RULE]
    lines.extend(format_company_header(company))
    lines.append(f"Periodo de cálculo: {period.start} al {period.end}")
    lines.append(f"Fecha de emisión: {format_issue_date(now)}")
    lines.append(LIGHT_RULE)
    lines.append(RECEIPT_TITLE)
    lines.append(f"Empleado: {employee.name} | ID: {employee.id}")
    lines.append(f"Puesto: {employee.position}")
    lines.append(LIGHT_RULE)

    lines.append("Ingresos considerados en el período:")
    for index, amount in enumerate(employee.monthly_earnings, 1):
        lines.append(format_month_line(index, amount, locale_name))

    lines.append(LIGHT_RULE)
    lines.append(f"Total devengado: {format_currency(result.total_earnings, locale_name)}")
    lines.append(f"Aguinaldo (total/12): {format_currency(result.aguinaldo, locale_name)}")

    if employee.notes is not None:
        lines.append(LIGHT_RULE)
        lines.append(f"Notas: {employee.notes}")

    lines.append(LIGHT_RULE)
    lines.append(SIGNATURE_LINE)
    lines.append(HEAVY_RULE)

    return "\n".join(lines)
