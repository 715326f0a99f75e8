# rostering/cli/tenant_cli.py
import typer
from typing_extensions import Annotated

from .utils_cli import make_api_request

app = typer.Typer(
    name="tenant",
    help="Manage tenants via the REST API.",
    no_args_is_help=True
)


@app.command("create")
def create_tenant(
    name: Annotated[str, typer.Option(prompt="Tenant Name", help="Unique display name for the tenant.")]
):
    """Create a new tenant."""
    make_api_request("POST", "/tenant/add", json_payload={"name": name})


@app.command("get")
def get_tenant(
    tenant_id: Annotated[int, typer.Argument(help="The ID of the tenant to retrieve.")]
):
    """Get details for a specific tenant."""
    make_api_request("GET", f"/tenant/{tenant_id}")


@app.command("list")
def list_tenants():
    """List tenants."""
    make_api_request("GET", "/tenant/")


@app.command("delete")
def delete_tenant(
    tenant_id: Annotated[int, typer.Argument(help="The ID of the tenant to delete.")]
):
    """Delete a tenant and everything it owns."""
    make_api_request("POST", f"/tenant/remove/{tenant_id}")


if __name__ == "__main__":
    app()
