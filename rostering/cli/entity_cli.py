# rostering/cli/entity_cli.py
import typer
from typing import Any, Dict
from typing_extensions import Annotated
import json

from .utils_cli import make_api_request
from ..registry import ENTITY_KINDS, get_entity_kind

app = typer.Typer(
    name="entity",
    help="Manage tenant-scoped entities (" + ", ".join(k.path for k in ENTITY_KINDS) + ").",
    no_args_is_help=True
)

KindArg = Annotated[str, typer.Argument(help="Entity kind, e.g. 'skill'.")]
TenantArg = Annotated[int, typer.Argument(help="The tenant the call is scoped to.")]
IdArg = Annotated[int, typer.Argument(help="The id of the entity.")]
DataOption = Annotated[
    str,
    typer.Option("--data", help="JSON object with the entity fields (e.g. '{\"name\": \"Nurse\"}').")
]


def _base_path(kind: str, tenant_id: int) -> str:
    try:
        entity_kind = get_entity_kind(kind)
    except KeyError:
        typer.secho(
            f"Error: Unknown entity kind '{kind}'. Known kinds: "
            + ", ".join(k.path for k in ENTITY_KINDS),
            fg=typer.colors.RED
        )
        raise typer.Exit(code=1)
    return f"/tenant/{tenant_id}/{entity_kind.path}"


def _parse_data(data: str) -> Dict[str, Any]:
    try:
        payload = json.loads(data)
    except json.JSONDecodeError:
        typer.secho(f"Error: Invalid JSON string provided for --data: {data}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    if not isinstance(payload, dict):
        typer.secho("Error: --data must be a JSON object.", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    return payload


@app.command("list")
def list_entities(kind: KindArg, tenant_id: TenantArg):
    """List the entities of a kind owned by a tenant."""
    make_api_request("GET", f"{_base_path(kind, tenant_id)}/")


@app.command("get")
def get_entity(kind: KindArg, tenant_id: TenantArg, entity_id: IdArg):
    """Get one entity."""
    make_api_request("GET", f"{_base_path(kind, tenant_id)}/{entity_id}")


@app.command("add")
def add_entity(kind: KindArg, tenant_id: TenantArg, data: DataOption):
    """Create an entity in the tenant."""
    base_path = _base_path(kind, tenant_id)
    payload = _parse_data(data)
    payload["tenantId"] = tenant_id
    make_api_request("POST", f"{base_path}/add", json_payload=payload)


@app.command("update")
def update_entity(kind: KindArg, tenant_id: TenantArg, entity_id: IdArg, data: DataOption):
    """Replace the fields of an existing entity. Omitted optional fields are reset to their defaults."""
    base_path = _base_path(kind, tenant_id)
    payload = _parse_data(data)
    payload["tenantId"] = tenant_id
    payload["id"] = entity_id
    make_api_request("POST", f"{base_path}/update", json_payload=payload)


@app.command("delete")
def delete_entity(kind: KindArg, tenant_id: TenantArg, entity_id: IdArg):
    """Delete an entity. Prints false if it did not exist."""
    make_api_request("DELETE", f"{_base_path(kind, tenant_id)}/{entity_id}")


if __name__ == "__main__":
    app()
