"""Fuentes REST del backend de inventario.

Por qué un paquete:
- Agrupa un módulo por colección/recurso del backend.
- Las fuentes paginadas implementan `core.interfaces.pagination`.
"""

from adapters.inventory_sources.alerts import AlertSource
from adapters.inventory_sources.auth import AuthSource
from adapters.inventory_sources.categories import CategorySource
from adapters.inventory_sources.customers import CustomerSource
from adapters.inventory_sources.grn import GrnSource
from adapters.inventory_sources.inventory import InventorySource
from adapters.inventory_sources.margins import MarginProfileSource
from adapters.inventory_sources.markdowns import MarkdownSource
from adapters.inventory_sources.products import ProductSource
from adapters.inventory_sources.purchase_orders import PurchaseOrderSource
from adapters.inventory_sources.replenishment import ReplenishmentSource
from adapters.inventory_sources.sales_orders import SalesOrderSource
from adapters.inventory_sources.suppliers import SupplierSource
from adapters.inventory_sources.waste import WasteSource

__all__ = [
	"AlertSource",
	"AuthSource",
	"CategorySource",
	"CustomerSource",
	"GrnSource",
	"InventorySource",
	"MarginProfileSource",
	"MarkdownSource",
	"ProductSource",
	"PurchaseOrderSource",
	"ReplenishmentSource",
	"SalesOrderSource",
	"SupplierSource",
	"WasteSource",
]
