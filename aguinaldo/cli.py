"""CLI entry point for aguinaldo."""

import click
import typer
from typer.core import TyperCommand

from aguinaldo.commands.receipts import print_usage, receipts_command, report_error

# Options whose value is the following argument
VALUE_OPTIONS = ("--input", "--employee", "--output", "--config")

app = typer.Typer(
    name="aguinaldo",
    help="Cálculo de aguinaldo y recibos listos para imprimir",
    add_completion=False,
)


class ReceiptsCommand(TyperCommand):
    """Parses arguments leniently and reports bad usage in Spanish with exit code 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # A trailing option with no value is dropped, so a bare --input ends up as missing input
        if args and args[-1] in VALUE_OPTIONS:
            args = args[:-1]
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            report_error(e.format_message())
            ctx.exit(1)


def show_usage(value: bool) -> None:
    """Print the usage text and stop before any other processing."""
    if value:
        print_usage()
        raise typer.Exit()


@app.command(
    cls=ReceiptsCommand,
    context_settings={
        "help_option_names": [],
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    },
)
def main(
    input_path: str = typer.Option(None, "--input", help="Archivo JSON con empresa, periodo y empleados"),
    employee_id: str = typer.Option(None, "--employee", help="Procesar solo el empleado con este id"),
    output_dir: str = typer.Option(None, "--output", help="Directorio donde guardar los recibos"),
    config_path: str = typer.Option(None, "--config", help="Archivo de configuración (default: XDG)"),
    show_help: bool = typer.Option(
        False, "--help", "-h", callback=show_usage, is_eager=True, help="Mostrar la ayuda y salir"
    ),
) -> None:
    """Calculate aguinaldo for your employees and print their receipts."""
    receipts_command(input_path, employee_id, output_dir, config_path)


if __name__ == "__main__":
    app()
