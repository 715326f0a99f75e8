# rostering/cli/utils_cli.py
import requests
import typer
import json
from typing import Optional, Dict, Any

from . import config


def make_api_request(
    method: str,
    endpoint: str,
    json_payload: Optional[Dict[str, Any]] = None,
    expect_json_response: bool = True
) -> Any:
    """
    Makes an HTTP request against the rostering REST API and echoes the outcome.

    ``endpoint`` is relative to the API prefix. Every endpoint answers 200 on success;
    any other response is rendered from its ``exceptionMessage``/``exceptionClass`` body
    and ends the command with exit code 1.
    """
    full_url = f"{config.ROSTERING_CLI_API_BASE_URL}{config.ROSTERING_CLI_API_PREFIX}{endpoint}"

    typer.echo(f"CLI: {method.upper()} {full_url}")
    if json_payload:
        typer.echo(f"CLI: JSON Payload: {json.dumps(json_payload, indent=2)}")

    try:
        response = requests.request(method, full_url, json=json_payload, timeout=30)
    except requests.exceptions.ConnectionError as e:
        typer.secho(
            f"CLI: Connection Error - Could not connect to API at {full_url}. Is the server running? Error: {e}",
            fg=typer.colors.RED
        )
        raise typer.Exit(code=1)
    except requests.exceptions.RequestException as e:
        typer.secho(f"CLI: Request Error - {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(f"CLI: Response Status: {response.status_code}")

    if response.status_code != 200:
        err_msg = f"CLI: API Error - Status {response.status_code}."
        try:
            err_data = response.json()
            err_msg += (
                f" {err_data.get('exceptionClass', 'Error')}: "
                f"{err_data.get('exceptionMessage', response.text)}"
            )
        except ValueError:
            err_msg += f" Raw response: {response.text}"
        typer.secho(err_msg, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not expect_json_response or not response.content:
        typer.echo(typer.style(f"CLI: Success (Status {response.status_code}).", fg=typer.colors.GREEN))
        return None

    try:
        data = response.json()
    except ValueError:
        typer.secho(
            f"CLI: Error - Could not decode JSON response. Raw text: {response.text}",
            fg=typer.colors.RED
        )
        raise typer.Exit(code=1)
    typer.echo(typer.style("CLI: Response JSON:", fg=typer.colors.CYAN))
    typer.echo(json.dumps(data, indent=2))
    return data
