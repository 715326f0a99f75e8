# rostering/cli/main_cli.py
import typer
from . import admin_cli
from . import entity_cli
from . import tenant_cli

# Main CLI application with help enabled when no arguments are provided
app = typer.Typer(
    name="rostering",
    help="Rostering backend command line interface.",
    no_args_is_help=True
)

app.add_typer(admin_cli.app, name="admin")
app.add_typer(tenant_cli.app, name="tenant")
app.add_typer(entity_cli.app, name="entity")


@app.callback()
def main_callback():
    """
    Rostering backend CLI.
    Use 'rostering entity --help' for the tenant-scoped entity commands.
    """
    pass


def cli_entry_point():
    """Entry point function for console script registration in pyproject.toml"""
    app()


if __name__ == "__main__":
    cli_entry_point()
