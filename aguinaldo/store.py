"""Flat file access: reading payroll files and writing receipts."""

from pathlib import Path

from aguinaldo.domain.payroll import PayrollInput, decode_payroll
from aguinaldo.errors import UnableToReadFileError


def receipt_filename(employee_id: str) -> str:
    return f"recibo_aguinaldo_{employee_id}.txt"


def load_payroll(path: str) -> PayrollInput:
    """Read and decode a payroll JSON file.

    Args:
        path: Path to the payroll file.

    Returns:
        Decoded PayrollInput.

    Raises:
        UnableToReadFileError: If the file cannot be read.
        UnableToDecodeError: If the contents are not a valid payroll.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise UnableToReadFileError(path) from e
    return decode_payroll(data)


def write_receipt(receipt: str, employee_id: str, directory: str) -> Path:
    """Write a receipt into ``directory``, creating it if needed.

    An existing receipt for the same employee is overwritten.

    Args:
        receipt: Receipt text.
        employee_id: Employee id used in the file name.
        directory: Output directory.

    Returns:
        Path of the written file.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    output_dir = Path(directory).expanduser()
    output_dir.mkdir(parents=True, exist_ok=True)

    receipt_path = output_dir / receipt_filename(employee_id)
    receipt_path.write_text(receipt, encoding="utf-8")
    return receipt_path
