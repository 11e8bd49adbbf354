"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# (cabecera, atributo del modelo)
GRN_COLUMNS = (
    ("GRN", "grn_id"),
    ("PO", "po_id"),
    ("Supplier", "supplier_name"),
    ("Received", "received_at"),
    ("Status", "status"),
    ("Qty", "total_qty"),
    ("Cost", "total_cost"),
)
PURCHASE_ORDER_COLUMNS = (
    ("PO", "po_id"),
    ("Supplier", "supplier_name"),
    ("Status", "status"),
    ("Created", "created_at"),
    ("Qty", "total_qty"),
    ("Cost", "total_cost"),
)
INVENTORY_COLUMNS = (
    ("Product", "product_id"),
    ("Name", "product_name"),
    ("SKU", "sku_code"),
    ("UoM", "uom"),
    ("On hand", "on_hand"),
)
SUPPLIER_COLUMNS = (
    ("ID", "id"),
    ("Name", "name"),
    ("Contact", "contact"),
    ("Lead time (d)", "lead_time_days"),
)
SELLABLE_LOT_COLUMNS = (
    ("Lot", "lot_code"),
    ("Product", "product_name"),
    ("SKU", "sku_code"),
    ("On hand", "qty_on_hand"),
    ("Expiry", "expiry_date"),
    ("Price", "unit_price"),
    ("Discount %", "discount_percent"),
)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("RETAIL-ADMIN", style="bold cyan")
    subtitle = Text("Inventario • Compras • Recepción • Ventas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_collection_table(
    title: str,
    columns: Sequence[tuple[str, str]],
    items: Sequence[Any],
    *,
    max_rows: int | None = None,
) -> Table:
    """Tabla Rich para una colección agregada.

    `max_rows` recorta solo la vista; el título siempre muestra el total real.
    """

    table = Table(title=f"{title} ({len(items)})")
    for index, (header, _) in enumerate(columns):
        table.add_column(header, style="cyan" if index == 0 else "white", no_wrap=index == 0)

    shown = items if max_rows is None else items[:max_rows]
    for item in shown:
        table.add_row(*(_cell(getattr(item, attr, None)) for _, attr in columns))

    if max_rows is not None and len(items) > max_rows:
        table.caption = f"{len(items) - max_rows} more rows not shown (use --json to export all)"
    return table
