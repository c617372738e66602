"""
Mapeos entidad <-> fila remota, uno por tabla.

Es el único punto de traducción entre atributos Python (inglés) y
columnas remotas (castellano). Las relaciones reconstruidas en cliente
(palets de una entrada, líneas de un pack, packs de una salida) no se
mapean: no existen como columna.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Type

from vinos_wms.domain.entities import (
    Entrada,
    Incidencia,
    Pack,
    PackItem,
    Pallet,
    Product,
    Salida,
    User,
)
from vinos_wms.shared.constants import warehouse_constants as wc
from vinos_wms.shared.utils.date_utils import parse_date, parse_datetime
from .types import FieldMapping, TableMapping


@dataclass(frozen=True)
class SalidaPackLink:
    """Fila de salida_packs."""

    salida_id: str
    pack_id: str


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _to_enum(enum_cls: Type[Enum]):
    return lambda v: enum_cls(v)


def _json_list(value: Any) -> List[str]:
    # Algunas instancias guardan los arrays como texto JSON
    if isinstance(value, str):
        return list(json.loads(value)) if value else []
    return list(value)


def _optional_list(value: Any) -> Any:
    return list(value) if value else None


USERS = TableMapping(
    table=wc.TABLE_PROFILES,
    factory=User,
    primary_key=("id",),
    fields=[
        FieldMapping("id", "id", from_column=int, required=True),
        FieldMapping("name", "name", required=True),
        FieldMapping("email", "email", required=True),
        FieldMapping("password_hash", "password_hash"),
        FieldMapping("role", "role", to_column=_enum_value, from_column=_to_enum(wc.UserRole), required=True),
    ],
)

PRODUCTS = TableMapping(
    table=wc.TABLE_PRODUCTS,
    factory=Product,
    primary_key=("id",),
    fields=[
        FieldMapping("id", "id", required=True),
        FieldMapping("name", "name", required=True),
        FieldMapping("bottle_ean", "ean_botella"),
        FieldMapping("case_ean", "ean_caja"),
    ],
)

ENTRADAS = TableMapping(
    table=wc.TABLE_ENTRADAS,
    factory=Entrada,
    primary_key=("id",),
    fields=[
        FieldMapping("id", "id", required=True),
        FieldMapping("delivery_note_id", "albaran_id", required=True),
        FieldMapping("truck_plate", "camion_matricula"),
        FieldMapping("carrier", "transportista"),
        FieldMapping("driver", "conductor"),
        FieldMapping("timestamp", "fecha_hora", to_column=parse_datetime, from_column=parse_datetime, required=True),
        FieldMapping("declared_pallets", "numero_palets", from_column=int),
        FieldMapping("incident", "incidencia"),
        FieldMapping("incident_images", "incidencia_imagenes", to_column=_optional_list, from_column=_json_list),
        FieldMapping("pallet_label_images", "pallet_label_imagenes", to_column=_optional_list, from_column=_json_list),
    ],
)

PALLETS = TableMapping(
    table=wc.TABLE_PALLETS,
    factory=Pallet,
    primary_key=("id",),
    fields=[
        FieldMapping("id", "id", required=True),
        FieldMapping("intake_id", "entrada_id"),
        FieldMapping("product_id", "product_id", required=True),
        FieldMapping("lot", "lote", required=True),
        FieldMapping("sscc", "sscc"),
        FieldMapping("cases_per_pallet", "cajas_por_palet", from_column=int),
        FieldMapping("bottles_per_case", "botellas_por_caja", from_column=int),
        FieldMapping("entry_date", "fecha_entrada", to_column=parse_date, from_column=parse_date),
        FieldMapping("status", "estado", to_column=_enum_value, from_column=_to_enum(wc.PalletStatus)),
    ],
)

PACKS = TableMapping(
    table=wc.TABLE_PACKS,
    factory=Pack,
    primary_key=("id",),
    fields=[
        FieldMapping("id", "id", required=True),
        FieldMapping("customer_order", "pedido_cliente", required=True),
        FieldMapping("created_at", "fecha_creacion", to_column=parse_datetime, from_column=parse_datetime, required=True),
        FieldMapping("status", "estado", to_column=_enum_value, from_column=_to_enum(wc.PackStatus)),
        FieldMapping("label_url", "etiqueta_url"),
    ],
)

PACK_ITEMS = TableMapping(
    table=wc.TABLE_PACK_PRODUCTOS,
    factory=PackItem,
    primary_key=("pack_id", "product_id", "lote"),
    fields=[
        FieldMapping("pack_id", "pack_id", required=True),
        FieldMapping("product_id", "product_id", required=True),
        FieldMapping("lot", "lote", required=True),
        FieldMapping("quantity", "cantidad", from_column=int, required=True),
    ],
)

SALIDAS = TableMapping(
    table=wc.TABLE_SALIDAS,
    factory=Salida,
    primary_key=("id",),
    fields=[
        FieldMapping("id", "id", required=True),
        FieldMapping("delivery_note_id", "albaran_salida_id", required=True),
        FieldMapping("client", "cliente", required=True),
        FieldMapping("timestamp", "fecha_hora", to_column=parse_datetime, from_column=parse_datetime, required=True),
        FieldMapping("driver", "conductor"),
        FieldMapping("truck_plate", "camion_matricula"),
        FieldMapping("carrier", "transportista"),
    ],
)

SALIDA_PACKS = TableMapping(
    table=wc.TABLE_SALIDA_PACKS,
    factory=SalidaPackLink,
    primary_key=("salida_id", "pack_id"),
    fields=[
        FieldMapping("salida_id", "salida_id", required=True),
        FieldMapping("pack_id", "pack_id", required=True),
    ],
)

INCIDENCIAS = TableMapping(
    table=wc.TABLE_INCIDENCIAS,
    factory=Incidencia,
    primary_key=("id",),
    fields=[
        FieldMapping("id", "id", required=True),
        FieldMapping("category", "tipo", to_column=_enum_value, from_column=_to_enum(wc.IncidentCategory), required=True),
        FieldMapping("description", "descripcion", required=True),
        FieldMapping("date", "fecha", to_column=parse_date, from_column=parse_date, required=True),
        FieldMapping("status", "estado", to_column=_enum_value, from_column=_to_enum(wc.IncidentStatus)),
        FieldMapping("reported_by", "usuario_reporta"),
    ],
)

MAPPINGS_BY_TABLE: Dict[str, TableMapping] = {
    m.table: m
    for m in (USERS, PRODUCTS, ENTRADAS, PALLETS, PACKS, PACK_ITEMS, SALIDAS, SALIDA_PACKS, INCIDENCIAS)
}


def get_table_mapping(table: str) -> TableMapping:
    """Retorna el mapeo de la tabla indicada."""
    try:
        return MAPPINGS_BY_TABLE[table]
    except KeyError:
        raise KeyError(f"No hay mapeo para la tabla '{table}'") from None
