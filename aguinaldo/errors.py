"""Error types for aguinaldo.

Every recognized failure is an AguinaldoError subclass carrying a single-line
message. Only the CLI shell prints them and picks the exit code.
"""


class AguinaldoError(Exception):
    """Base class for recognized aguinaldo failures."""

    @property
    def message(self) -> str:
        return str(self)


class MissingInputError(AguinaldoError):
    """No --input path was given."""

    def __init__(self) -> None:
        super().__init__("Debe indicar la ruta del archivo JSON con --input <ruta>.")


class UnableToReadFileError(AguinaldoError):
    """The payroll file does not exist or cannot be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No se pudo leer el archivo en la ruta: {path}.")


class UnableToDecodeError(AguinaldoError):
    """The payroll file is not valid JSON or does not match the schema."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"No se pudo interpretar el archivo JSON. Detalle: {reason}.")


class EmployeeNotFoundError(AguinaldoError):
    """The requested employee id is not in the payroll file."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"No se encontró el empleado con id {employee_id}.")


class ConfigError(AguinaldoError):
    """The configuration file exists but is not valid TOML."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"No se pudo leer la configuración en {path}. Detalle: {reason}.")
