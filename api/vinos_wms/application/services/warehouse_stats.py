"""
Estadísticas del almacén y búsqueda de etiquetas.
"""
from dataclasses import dataclass
from typing import Dict, List
from urllib.parse import quote_plus

from vinos_wms.application.services.view_state import ViewState
from vinos_wms.shared.constants.warehouse_constants import IncidentStatus, PalletStatus

LABEL_PLACEHOLDER_URL = "https://via.placeholder.com/400x200.png?text="


@dataclass(frozen=True)
class ProductStock:
    product_id: str
    name: str
    bottles: int


@dataclass(frozen=True)
class LabelSearchResult:
    id: str
    type: str
    description: str
    label_url: str


def available_stock_by_product(state: ViewState) -> List[ProductStock]:
    """Botellas disponibles por producto (solo palets en estado Disponible)."""
    stock = []
    for product in state.products:
        bottles = sum(
            p.total_bottles
            for p in state.pallets
            if p.product_id == product.id and p.status == PalletStatus.AVAILABLE
        )
        stock.append(ProductStock(product_id=product.id, name=product.name, bottles=bottles))
    return stock


def incident_counts_by_status(state: ViewState) -> Dict[str, int]:
    counts = {status.value: 0 for status in IncidentStatus}
    for incidencia in state.incidencias:
        counts[incidencia.status.value] += 1
    return counts


def search_labels(state: ViewState, term: str) -> List[LabelSearchResult]:
    """
    Busca packs (por id, pedido o nombre de producto) y palets (por id).

    La búsqueda no distingue mayúsculas; primero packs, después palets.
    """
    needle = term.strip().lower()
    if not needle:
        return []

    results = []
    for pack in state.packs:
        names = [state.product_name(item.product_id) for item in pack.items]
        if (
            needle in pack.id.lower()
            or needle in pack.customer_order.lower()
            or any(needle in name.lower() for name in names)
        ):
            results.append(LabelSearchResult(
                id=pack.id,
                type="Pack",
                description=f"Pedido: {pack.customer_order} | Contiene: {', '.join(names)}",
                label_url=LABEL_PLACEHOLDER_URL + quote_plus(f"Etiqueta {pack.customer_order}"),
            ))
    for pallet in state.pallets:
        if needle in pallet.id.lower():
            results.append(LabelSearchResult(
                id=pallet.id,
                type="Pallet",
                description=f"Producto: {state.product_name(pallet.product_id)}",
                label_url=LABEL_PLACEHOLDER_URL + quote_plus(f"Etiqueta Pallet {pallet.id}"),
            ))
    return results
