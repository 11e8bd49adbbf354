"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida el borde (JSON del backend) sin acoplar el Core a librerías de I/O.
- Los campos de negocio (precios, márgenes, loyalty) viajan sin interpretarse:
  todos son opcionales y los campos desconocidos se conservan (`extra="allow"`).

Nota:
- El backend habla camelCase; en Python usamos snake_case con alias.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

T = TypeVar("T")

# Elementos admitidos en las listas de IDs del filtro. `bool` va primero para
# que pydantic no lo convierta en 1; el serializador lo descarta después.
IdValue = bool | int | float | str | None


class ApiModel(BaseModel):
    """Base para payloads del backend (camelCase en el cable)."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Envelope(ApiModel, Generic[T]):
    """Envoltorio uniforme `{code, message, data}` de respuestas no paginadas."""

    code: str | None = Field(
        default=None,
        description="Código de negocio del backend (no se interpreta aquí).",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje legible del backend.",
    )
    data: T | None = Field(
        default=None,
        description="Carga útil.",
    )


class Page(ApiModel, Generic[T]):
    """Página de una colección `{code, message, pageNum, pageSize, total, data}`.

    `total` es el conteo autoritativo del servidor *en el momento de esta
    request*; puede cambiar entre páginas sucesivas. Si el backend no lo
    envía queda en `None` (desconocido).
    """

    code: str | None = None
    message: str | None = None
    page_num: int = Field(
        default=1,
        ge=1,
        description="Número de página (base 1).",
    )
    page_size: int | None = Field(
        default=None,
        gt=0,
        description="Tamaño de página solicitado.",
    )
    total: int | None = Field(
        default=None,
        ge=0,
        description="Total de elementos de la colección completa.",
    )
    data: list[T] = Field(
        default_factory=list,
        description="Elementos de esta página, en el orden del servidor.",
    )

    @field_validator("data", mode="before")
    @classmethod
    def _null_data_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SellableLotQuery(ApiModel):
    """Filtro para la búsqueda de lotes vendibles.

    Inmutable una vez construido. Las listas admiten elementos "sucios"
    (None, NaN, texto no numérico): el serializador los descarta. Cualquier
    otro tipo de elemento (dicts, objetos) se rechaza al construir.
    """

    model_config = ConfigDict(frozen=True)

    query: str | None = Field(
        default=None,
        description="Texto libre (nombre, SKU, lote).",
    )
    parent_category_ids: tuple[IdValue, ...] | None = Field(
        default=None,
        description="IDs de categorías padre.",
    )
    category_ids: tuple[IdValue, ...] | None = Field(
        default=None,
        description="IDs de categorías hoja.",
    )
    supplier_ids: tuple[IdValue, ...] | None = Field(
        default=None,
        description="IDs de proveedores.",
    )
    limit: int | None = Field(
        default=None,
        description="Máximo de lotes devueltos por el backend.",
    )


# --- Recepción de mercancía (GRN) -------------------------------------------


class GrnItemSummary(ApiModel):
    product_id: int | None = None
    product_name: str | None = None
    qty_received: float | None = None
    unit_cost: float | None = None
    lot_code: str | None = None
    expiry_date: str | None = None
    expected_date: str | None = None
    media_url: str | None = None


class GrnSummary(ApiModel):
    grn_id: int | str | None = None
    po_id: int | str | None = None
    supplier_id: int | str | None = None
    supplier_name: str | None = None
    received_at: str | None = None
    status: str | None = None
    total_qty: float | None = None
    total_cost: float | None = None
    items: list[GrnItemSummary] = Field(default_factory=list)


class GrnItemInput(ApiModel):
    product_id: int
    qty_received: float
    unit_cost: float
    lot_code: str | None = None
    expiry_date: str | None = None


class CreateGrnRequest(ApiModel):
    po_id: int
    received_at: str | None = None
    items: list[GrnItemInput] = Field(default_factory=list)


class GrnDetail(ApiModel):
    id: int | str | None = None
    po_id: int | None = None
    status: str | None = None
    received_at: str | None = None


# --- Órdenes de compra -------------------------------------------------------


class PurchaseOrderSummary(ApiModel):
    po_id: int | str | None = None
    supplier_id: int | str | None = None
    supplier_name: str | None = None
    status: str | None = None
    created_at: str | None = None
    expected_date: str | None = None
    total_qty: float | None = None
    total_cost: float | None = None
    items: list[dict[str, Any]] = Field(default_factory=list)


# --- Inventario --------------------------------------------------------------


class LotSummary(ApiModel):
    lot_id: int | str | None = None
    qty_on_hand: float | None = None
    received_at: str | None = None
    expiry_date: str | None = None


class InventoryProductSummary(ApiModel):
    product_id: int | str | None = None
    product_name: str | None = None
    sku_code: str | None = None
    uom: str | None = None
    on_hand: float | None = None
    lots: list[LotSummary] = Field(default_factory=list)


# --- Proveedores -------------------------------------------------------------


class Supplier(ApiModel):
    id: int | str | None = None
    name: str | None = None
    contact: str | None = None
    lead_time_days: int | None = None
    created_at: str | None = None
    last_modified_at: str | None = None
    deleted: bool = False
    deleted_at: str | None = None


class CreateSupplierRequest(ApiModel):
    name: str = Field(..., min_length=1)
    contact: str | None = None
    lead_time_days: int = Field(default=0, ge=0)


# --- Ventas ------------------------------------------------------------------


class SellableLot(ApiModel):
    lot_id: int | None = None
    lot_code: str | None = None
    product_id: int | None = None
    product_name: str | None = None
    sku_code: str | None = None
    uom: str | None = None
    qty_on_hand: float | None = None
    expiry_date: str | None = None
    received_at: str | None = None
    supplier_name: str | None = None
    category_name: str | None = None
    parent_category_name: str | None = None
    unit_price: float | None = None
    discount_percent: float | None = None


class SalesOrderContext(ApiModel):
    order_code: str | None = None
    generated_at: str | None = None
    cashier_id: int | None = None
    cashier_name: str | None = None


class CreateSalesOrderLineInput(ApiModel):
    product_id: int
    lot_id: int
    quantity: float = Field(..., gt=0)


class CreateSalesOrderRequest(ApiModel):
    order_code: str | None = None
    customer_id: int | None = None
    loyalty_points_to_redeem: int = Field(default=0, ge=0)
    lines: list[CreateSalesOrderLineInput] = Field(default_factory=list)


class CreateSalesOrderResponse(ApiModel):
    status: str | None = None  # CONFIRMED | PENDING
    order: dict[str, Any] | None = None
    pending: dict[str, Any] | None = None


class PendingSalesOrderStatus(ApiModel):
    pending_id: int | None = None
    status: str | None = None
    expires_at: str | None = None
    confirmed_at: str | None = None
    is_confirmed: bool = False


# --- Auth --------------------------------------------------------------------


class AuthenticatedUser(ApiModel):
    user_id: int | None = None
    username: str | None = None
    full_name: str | None = None
    email: str | None = None
    roles: list[str] = Field(default_factory=list)


class LoginResponse(ApiModel):
    access_token: str = Field(..., min_length=1)
    token_type: str = "Bearer"
    expires_at: str | None = None
    expires_in: int | None = None
    user: AuthenticatedUser | None = None


# --- Catálogo: productos y categorías ----------------------------------------


class Product(ApiModel):
    id: int | str | None = None
    sku_code: str | None = None
    name: str | None = None
    category_id: int | str | None = None
    category_name: str | None = None
    is_perishable: bool | None = None
    shelf_life_days: int | None = None
    uom: str | None = None
    price: float | None = None
    min_stock: float | None = None
    lead_time_days: int | None = None
    supplier_id: int | str | None = None
    brand_name: str | None = None
    media_url: str | None = None
    created_at: str | None = None
    last_modified_at: str | None = None


class ProductRequest(ApiModel):
    """Alta o edición completa de un producto (PUT reemplaza todos los campos)."""

    sku_code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category_id: int | str | None = None
    is_perishable: bool = False
    shelf_life_days: int | None = Field(default=None, ge=0)
    uom: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    min_stock: float = Field(default=0, ge=0)
    lead_time_days: int = Field(default=0, ge=0)
    supplier_id: int | str | None = None
    media_url: str | None = None


class ProductImportRow(ApiModel):
    product_id: int | str | None = None
    sku_code: str
    name: str
    uom: str
    price: float
    media_url: str | None = None
    category_name: str | None = None
    brand_name: str | None = None
    is_perishable: bool | None = None
    shelf_life_days: int | None = None
    min_stock: float | None = None
    lead_time_days: int | None = None


class CategoryNode(ApiModel):
    category_id: int | None = None
    code: str | None = None
    name: str | None = None
    parent_category_id: int | None = None
    children: list[CategoryNode] = Field(default_factory=list)


class CategoryImportRow(ApiModel):
    category_id: int | None = None
    code: str
    name: str
    parent_code: str | None = None
    parent_category_id: int | None = None


class ImportResult(ApiModel):
    """Resumen de una importación masiva.

    Cada recurso añade sus propios contadores `skipped*`; llegan como extras.
    """

    created: int = 0
    updated: int = 0
    skipped_invalid: int = 0
    total: int = 0


# --- Clientes ----------------------------------------------------------------


class Customer(ApiModel):
    id: int | str | None = None
    full_name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    loyalty_code: str | None = None
    loyalty_points: int = 0
    created_at: str | None = None
    is_updated: bool | None = None


class CreateCustomerRequest(ApiModel):
    full_name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    email: str
    loyalty_code: str | None = None


# --- Alertas -----------------------------------------------------------------


class LowStockAlert(ApiModel):
    product_id: int | str | None = None
    product_name: str | None = None
    on_hand: float | None = None
    min_stock: float | None = None


class ExpirySoonAlert(ApiModel):
    product_id: int | str | None = None
    lot_id: int | str | None = None
    lot_code: str | None = None
    days_to_expiry: int | None = None


class SlowMoverAlert(ApiModel):
    product_id: int | str | None = None
    window_days: int | None = None
    units_sold: float | None = None


class AlertsAggregate(ApiModel):
    low_stock: list[LowStockAlert] = Field(default_factory=list)
    expiry_soon: list[ExpirySoonAlert] = Field(default_factory=list)
    slow_movers: list[SlowMoverAlert] = Field(default_factory=list)


# --- Márgenes ----------------------------------------------------------------


class MarginProfile(ApiModel):
    id: int | None = None
    parent_category_id: int | None = None
    parent_category_name: str | None = None
    margin_profile: str | None = None
    price_sensitivity: str | None = None
    min_margin_pct: float | None = None
    target_margin_pct: float | None = None
    max_margin_pct: float | None = None
    notes: str | None = None
    created_at: str | None = None
    last_modified_at: str | None = None


class UpdateMarginProfileRequest(ApiModel):
    min_margin_pct: float
    target_margin_pct: float
    max_margin_pct: float

    @model_validator(mode="after")
    def _ordered(self) -> UpdateMarginProfileRequest:
        if not self.min_margin_pct <= self.target_margin_pct <= self.max_margin_pct:
            raise ValueError("expected min_margin_pct <= target_margin_pct <= max_margin_pct")
        return self


class MarginProfileImportRow(ApiModel):
    parent_category_id: int | None = None
    parent_category_name: str | None = None
    margin_profile: str
    price_sensitivity: str
    min_margin_pct: float
    target_margin_pct: float
    max_margin_pct: float
    notes: str | None = None


# --- Rebajas, reposición y mermas --------------------------------------------


class MarkdownRecommendation(ApiModel):
    product_id: int | str | None = None
    lot_id: int | str | None = None
    days_to_expiry: int | None = None
    suggested_discount_pct: float | None = None
    floor_pct_of_cost: float | None = None


class MarkdownApplyRequest(ApiModel):
    product_id: int | str
    lot_id: int | str
    discount_pct: float = Field(..., gt=0, le=100)
    override_floor: bool = False


class MarkdownApplyResult(ApiModel):
    applied: bool = False
    effective_price: float | None = None


class ReplenishmentSuggestion(ApiModel):
    product_id: int | str | None = None
    on_hand: float | None = None
    on_order: float | None = None
    avg_daily: float | None = None
    sigma_daily: float | None = None
    lead_time_days: int | None = None
    safety_stock: float | None = None
    rop: float | None = None
    suggested_qty: float | None = None


class WasteRequest(ApiModel):
    product_id: int | str
    lot_id: int | str
    qty: float = Field(..., gt=0)
    reason: str = Field(..., min_length=1)


class WasteMovement(ApiModel):
    movement_id: int | str | None = None
    type: str | None = None
    qty: float | None = None
