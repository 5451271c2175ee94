"""Receipt command: load a payroll file, print and save aguinaldo receipts."""

import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from aguinaldo.config import get_locale, get_output_dir, load_config
from aguinaldo.domain.models import EmployeeId
from aguinaldo.domain.payroll import Employee, PayrollInput, find_employee
from aguinaldo.domain.receipt import DEFAULT_LOCALE, format_receipt
from aguinaldo.errors import AguinaldoError, EmployeeNotFoundError, MissingInputError
from aguinaldo.store import load_payroll, write_receipt

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

USAGE = """Uso:
  aguinaldo --input <archivo.json> [--employee <id_empleado>] [--output <directorio>]

Ejemplos:
  aguinaldo --input samples/aguinaldo-ejemplo.json
  aguinaldo --input samples/aguinaldo-ejemplo.json --employee E001 --output recibos

Si se omite --employee se imprimen los aguinaldos calculados de todos los empleados.
Al indicar --output se genera un recibo listo para imprimir por cada empleado procesado."""


def print_usage() -> None:
    console.print(USAGE, markup=False)


def report_error(message: str) -> None:
    """Print a recognized failure followed by the usage text."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    print_usage()


def print_receipt(receipt: str) -> None:
    """Write the receipt verbatim, exactly as it is saved to disk."""
    console.file.write(receipt + "\n")


def render_receipt(employee: Employee, payroll: PayrollInput, locale_name: str) -> str:
    """Render one receipt with the current date as issue date."""
    return format_receipt(employee, payroll.company, payroll.period, datetime.now(), locale_name)


def save_receipt(receipt: str, employee_id: str, output_dir: str) -> Path:
    """Write a receipt and report where it went."""
    receipt_path = write_receipt(receipt, employee_id, output_dir)
    console.print(f"[green]✓[/green] Recibo generado en {escape(str(receipt_path))}")
    return receipt_path


def process_all_employees(
    payroll: PayrollInput,
    output_dir: str | None,
    locale_name: str = DEFAULT_LOCALE,
) -> None:
    """Print (and optionally save) a receipt for every employee, in input order.

    A failure writing one employee's receipt is reported and the rest are
    still processed.
    """
    for employee in payroll.employees:
        receipt = render_receipt(employee, payroll, locale_name)
        print_receipt(receipt)
        if output_dir:
            try:
                save_receipt(receipt, employee.id, output_dir)
            except (OSError, RuntimeError, ValueError) as e:
                err_console.print(
                    f"[red]No se pudo guardar el recibo para {escape(employee.id)}: {escape(str(e))}[/red]"
                )


def process_single_employee(
    payroll: PayrollInput,
    employee_id: EmployeeId,
    output_dir: str | None,
    locale_name: str = DEFAULT_LOCALE,
) -> None:
    """Print (and optionally save) the receipt of one employee.

    Raises:
        EmployeeNotFoundError: If no employee has the given id.
        OSError: If the receipt cannot be written.
    """
    employee = find_employee(payroll, employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)

    receipt = render_receipt(employee, payroll, locale_name)
    print_receipt(receipt)

    if output_dir:
        save_receipt(receipt, employee.id, output_dir)


def generate_receipts(
    input_path: str | None,
    employee_id: str | None = None,
    output_dir: str | None = None,
    config_path: Path | None = None,
) -> None:
    """Load the payroll and dispatch to single or all-employee processing.

    Raises:
        AguinaldoError: For recognized failures.
        OSError: If the single requested receipt cannot be written.
    """
    if input_path is None:
        raise MissingInputError()

    config = load_config(config_path)
    output_dir = output_dir or get_output_dir(config)
    locale_name = get_locale(config)

    payroll = load_payroll(input_path)

    if employee_id is not None:
        process_single_employee(payroll, EmployeeId(employee_id), output_dir, locale_name)
    else:
        process_all_employees(payroll, output_dir, locale_name)


def receipts_command(
    input_path: str | None,
    employee_id: str | None = None,
    output_dir: str | None = None,
    config_path: str | None = None,
) -> None:
    """Generate aguinaldo receipts, exiting with status 1 on failure."""
    try:
        generate_receipts(
            input_path,
            employee_id,
            output_dir,
            Path(config_path).expanduser() if config_path else None,
        )
    except AguinaldoError as e:
        report_error(e.message)
        sys.exit(1)
    except Exception as e:
        err_console.print(f"[red]Error inesperado:[/red] {escape(str(e))}")
        sys.exit(1)
