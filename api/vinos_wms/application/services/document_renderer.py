"""
Documentos HTML imprimibles: reportes, CMR y etiquetas.

Cada documento es una página completa con estilos de impresión en línea.
Se regeneran en cada petición; no se guardan.
"""
from datetime import datetime
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

from vinos_wms.application.services.report_builder import filter_incidencias, filter_movements
from vinos_wms.application.services.view_state import ViewState
from vinos_wms.shared.constants.warehouse_constants import ALL_STATUSES
from vinos_wms.shared.exceptions.domain import EntityNotFoundException, ValidationException
from vinos_wms.shared.utils.date_utils import DateLike, format_es, parse_date

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
QR_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"
SENDER_NAME = "Mi Solución en Vinos"


def qr_code_url(content: str, size: str = "150x150") -> str:
    """URL de imagen QR (servicio externo) para el contenido indicado."""
    return f"{QR_SERVICE_URL}?data={quote(content, safe='')}&size={size}&qzone=1"


def _thousands(value: int) -> str:
    return f"{int(value):,}".replace(",", ".")


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["fecha"] = format_es
    env.filters["miles"] = _thousands
    return env


templates_env = build_environment()


class DocumentRenderer:
    """Genera el HTML de cada documento a partir del estado de vista."""

    def __init__(self, state: ViewState, env: Optional[Environment] = None):
        self.state = state
        self.env = env or templates_env

    def _render(self, template: str, **context) -> str:
        context.setdefault("generated_at", datetime.now())
        context.setdefault("product_name", self.state.product_name)
        return self.env.get_template(template).render(**context)

    def inventory_report(self) -> str:
        return self._render(
            "inventory_report.html",
            pallets=self.state.pallets,
            packs=self.state.packs,
        )

    def movements_report(self, start: Optional[DateLike], end: Optional[DateLike]) -> str:
        entradas, salidas = filter_movements(self.state, start, end)
        return self._render(
            "movements_report.html",
            entradas=entradas,
            salidas=salidas,
            start_label=parse_date(start).isoformat(),
            end_label=parse_date(end).isoformat(),
        )

    def incidents_report(self, status: str = ALL_STATUSES) -> str:
        return self._render(
            "incidents_report.html",
            incidencias=filter_incidencias(self.state, status),
            status=status,
        )

    def cmr(self, salida_id: str) -> str:
        """Carta de porte de una salida con el contenido de sus packs."""
        salida = self.state.find_salida(salida_id)
        if salida is None:
            raise EntityNotFoundException("Salida", salida_id)
        return self._render(
            "cmr.html",
            salida=salida,
            sender=SENDER_NAME,
            total_bottles=sum(p.total_bottles for p in salida.packs),
        )

    def generic_label(self, title: str, line1: str = "", line2: str = "", qr_content: str = "") -> str:
        if not (title or "").strip() or not (qr_content or "").strip():
            raise ValidationException("El título y el contenido del QR son obligatorios.")
        return self._render(
            "label.html",
            window_title=f"Etiqueta Genérica: {title}",
            title=title,
            lines=[line1, line2],
            qr_url=qr_code_url(qr_content),
        )

    def label_reprint(self, kind: str, entity_id: str) -> str:
        """Etiqueta de un pack o de un palet ya existente."""
        if kind.lower() == "pack":
            pack = self.state.find_pack(entity_id)
            if pack is None:
                raise EntityNotFoundException("Pack", entity_id)
            lines = [f"Pedido: {pack.customer_order}"] + [
                f"{self.state.product_name(i.product_id)} - Lote {i.lot} ({_thousands(i.quantity)} bot.)"
                for i in pack.items
            ]
            title = pack.id
        elif kind.lower() == "pallet":
            pallet = self.state.find_pallet(entity_id)
            if pallet is None:
                raise EntityNotFoundException("Pallet", entity_id)
            lines = [
                self.state.product_name(pallet.product_id),
                f"Lote: {pallet.lot}",
                f"SSCC: {pallet.sscc}",
            ]
            title = pallet.id
        else:
            raise ValidationException(f"Tipo de etiqueta no valido: {kind}", field="kind")

        return self._render(
            "label.html",
            window_title=f"Etiqueta {kind.capitalize()} {title}",
            title=title,
            lines=lines,
            qr_url=qr_code_url(title),
        )
