"""CLI principal (Typer).

Comandos:
- `grns`, `pos`, `inventory`: agregan la colección completa (`--sync` refresca antes).
- `suppliers`: directorio completo de proveedores.
- `lots`: búsqueda de lotes vendibles.
- `login`: obtiene un token y lo guarda en el .env de usuario.
- `doctor`: diagnóstico del entorno.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import Any, Optional, TypeVar

import httpx
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console

from adapters.http_client import build_async_client
from adapters.inventory_sources import AuthSource, SalesOrderSource
from adapters.json_exporter import export_collection_json
from cli import doctor
from cli.ui_components import (
    GRN_COLUMNS,
    INVENTORY_COLUMNS,
    PURCHASE_ORDER_COLUMNS,
    SELLABLE_LOT_COLUMNS,
    SUPPLIER_COLUMNS,
    build_collection_table,
    print_banner,
)
from core.config import AppSettings, write_user_env_vars
from core.domain.models import SellableLotQuery
from core.log import configure_logging
from core.services.collections import (
    CollectionResult,
    fetch_all_grn_summaries,
    fetch_all_inventory_summaries,
    fetch_all_purchase_order_summaries,
    fetch_all_suppliers,
)

R = TypeVar("R")

app = typer.Typer(no_args_is_help=True, help="Admin client for the retail inventory/ordering backend.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR."),
    banner: bool = typer.Option(False, "--banner", help="Show the banner before running."),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)
    if banner:
        print_banner(_console)


def _run(factory: Callable[[], Awaitable[R]]) -> R:
    """Run a coroutine and turn transport or payload failures into a clean exit."""

    try:
        return asyncio.run(factory())
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        if status == 401:
            _console.print("[red]Unauthorized.[/red] Run `retail-admin login <username>` first.")
        else:
            _console.print(f"[red]HTTP {status}[/red] {exc.request.method} {exc.request.url}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _console.print(f"[red]Request failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        _console.print(f"[red]Unexpected response from the backend[/red] ({exc.error_count()} errors)")
        for error in exc.errors():
            where = ".".join(str(part) for part in error["loc"]) or "<root>"
            _console.print(f"  [yellow]{where}[/yellow]: {error['msg']}")
        raise typer.Exit(code=1) from exc


def _show(
    *,
    title: str,
    columns: Sequence[tuple[str, str]],
    items: Sequence[BaseModel],
    json_path: Path | None,
    max_rows: int | None,
) -> None:
    _console.print(build_collection_table(title, columns, items, max_rows=max_rows))
    if json_path is not None:
        out = export_collection_json(items=items, output_path=json_path)
        _console.print(f"[green]Exported {len(items)} rows to:[/green] {out}")


def _collection_command(
    fetch: Callable[..., Awaitable[CollectionResult[Any]]],
    *,
    title: str,
    columns: Sequence[tuple[str, str]],
    json_path: Path | None,
    max_rows: int | None,
    **kwargs: Any,
) -> None:
    settings = AppSettings()

    async def _go() -> CollectionResult[Any]:
        async with build_async_client(settings) as client:
            return await fetch(settings=settings, client=client, **kwargs)

    result = _run(_go)
    if result.synced:
        _console.print("[dim]Server-side sync requested before reading.[/dim]")
    _show(title=title, columns=columns, items=result.items, json_path=json_path, max_rows=max_rows)


_SYNC_OPTION = typer.Option(False, "--sync", help="Ask the backend to refresh the collection first.")
_JSON_OPTION = typer.Option(None, "--json", help="Export every row to a JSON file.")
_MAX_ROWS_OPTION = typer.Option(50, "--max-rows", min=1, help="Rows to print (export is never truncated).")


@app.command()
def grns(
    sync: bool = _SYNC_OPTION,
    json_path: Optional[Path] = _JSON_OPTION,
    max_rows: int = _MAX_ROWS_OPTION,
) -> None:
    """Goods-receipt note summaries (whole collection)."""

    _collection_command(
        fetch_all_grn_summaries,
        title="Goods receipts",
        columns=GRN_COLUMNS,
        json_path=json_path,
        max_rows=max_rows,
        sync_first=sync,
    )


@app.command()
def pos(
    sync: bool = _SYNC_OPTION,
    json_path: Optional[Path] = _JSON_OPTION,
    max_rows: int = _MAX_ROWS_OPTION,
) -> None:
    """Purchase-order summaries (whole collection)."""

    _collection_command(
        fetch_all_purchase_order_summaries,
        title="Purchase orders",
        columns=PURCHASE_ORDER_COLUMNS,
        json_path=json_path,
        max_rows=max_rows,
        sync_first=sync,
    )


@app.command()
def inventory(
    sync: bool = _SYNC_OPTION,
    json_path: Optional[Path] = _JSON_OPTION,
    max_rows: int = _MAX_ROWS_OPTION,
) -> None:
    """Inventory summaries per product (whole collection)."""

    _collection_command(
        fetch_all_inventory_summaries,
        title="Inventory",
        columns=INVENTORY_COLUMNS,
        json_path=json_path,
        max_rows=max_rows,
        sync_first=sync,
    )


@app.command()
def suppliers(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Free-text supplier search."),
    json_path: Optional[Path] = _JSON_OPTION,
    max_rows: int = _MAX_ROWS_OPTION,
) -> None:
    """Supplier directory (whole collection)."""

    _collection_command(
        fetch_all_suppliers,
        title="Suppliers",
        columns=SUPPLIER_COLUMNS,
        json_path=json_path,
        max_rows=max_rows,
        query=query,
    )


@app.command()
def lots(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Product name, SKU or lot code."),
    parent_category: Optional[list[int]] = typer.Option(None, "--parent-category", help="Repeatable."),
    category: Optional[list[int]] = typer.Option(None, "--category", help="Repeatable."),
    supplier: Optional[list[int]] = typer.Option(None, "--supplier", help="Repeatable."),
    limit: Optional[int] = typer.Option(None, "--limit", min=1),
    json_path: Optional[Path] = _JSON_OPTION,
    max_rows: int = _MAX_ROWS_OPTION,
) -> None:
    """Search sellable lots for a sales order."""

    settings = AppSettings()
    lot_query = SellableLotQuery(
        query=query,
        parent_category_ids=parent_category or None,
        category_ids=category or None,
        supplier_ids=supplier or None,
        limit=limit,
    )

    async def _go() -> list[Any]:
        async with build_async_client(settings) as client:
            return await SalesOrderSource(settings, client=client).search_sellable_lots(lot_query)

    items = _run(_go)
    _show(title="Sellable lots", columns=SELLABLE_LOT_COLUMNS, items=items, json_path=json_path, max_rows=max_rows)


@app.command()
def login(
    username: str = typer.Argument(..., help="Backend username."),
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Log in and store the access token in the user config .env."""

    settings = AppSettings()

    async def _go() -> Any:
        async with build_async_client(settings) as client:
            return await AuthSource(settings, client=client).login(username, password)

    result = _run(_go)
    env_path = write_user_env_vars(
        {
            "RETAIL_ADMIN_API_TOKEN": result.access_token,
            "RETAIL_ADMIN_TOKEN_TYPE": result.token_type,
        }
    )
    who = result.user.full_name or result.user.username if result.user else username
    _console.print(f"[green]Logged in as {who}.[/green] Token saved to: {env_path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
