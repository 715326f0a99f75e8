# rostering/cli/admin_cli.py
import typer

from .utils_cli import make_api_request

app = typer.Typer(
    name="admin",
    help="Rostering administrative commands.",
    no_args_is_help=True
)


@app.command("reset")
def reset_application(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt.")
):
    """Delete every tenant and every tenant-scoped entity."""
    if not yes:
        typer.confirm("This wipes ALL data for ALL tenants. Continue?", abort=True)
    make_api_request("POST", "/admin/reset", expect_json_response=False)


if __name__ == "__main__":
    app()
