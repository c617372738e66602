"""
Casos de uso de reportes, etiquetas, estadísticas y consultas de solo lectura
(auditoría y notificaciones).

Nada de lo que se genera aquí se guarda: cada petición regenera el
documento desde el estado de vista.
"""
from typing import List, Optional

from vinos_wms.application.dto.system_dto import (
    AuditLogEntryDTO,
    DashboardStatsDTO,
    GenericLabelRequestDTO,
    LabelSearchResultDTO,
    NotificationDTO,
    ProductStockDTO,
)
from vinos_wms.application.dto.warehouse_dto import PackResponseDTO, PalletDTO, StockOverviewDTO
from vinos_wms.application.services.document_renderer import DocumentRenderer
from vinos_wms.application.services.report_builder import CsvReport, ReportBuilder
from vinos_wms.application.services.warehouse_stats import (
    available_stock_by_product,
    incident_counts_by_status,
    search_labels,
)
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.shared.constants.warehouse_constants import ALL_STATUSES
from vinos_wms.shared.exceptions.domain import ValidationException
from vinos_wms.shared.utils.date_utils import DateLike

REPORT_NAMES = {
    "inventory": "inventario",
    "movements": "movimientos",
    "incidents": "incidencias",
}


class ReportUseCases(WarehouseUseCases):

    def _announce(self, report: str, fmt: str) -> None:
        self.notifications.info(f"Generando reporte de {REPORT_NAMES[report]} en formato {fmt}...")

    # ------------------------------------------------------------------
    # CSV
    # ------------------------------------------------------------------

    def inventory_csv(self) -> CsvReport:
        self._announce("inventory", "Excel")
        return ReportBuilder(self.state).inventory_csv()

    def movements_csv(self, start: Optional[DateLike], end: Optional[DateLike]) -> CsvReport:
        try:
            report = ReportBuilder(self.state).movements_csv(start, end)
        except ValidationException as e:
            self.notifications.error(e.message)
            raise
        self._announce("movements", "Excel")
        return report

    def incidents_csv(self, status: str = ALL_STATUSES) -> CsvReport:
        self._announce("incidents", "Excel")
        return ReportBuilder(self.state).incidents_csv(status)

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------

    def inventory_html(self) -> str:
        self._announce("inventory", "PDF")
        return DocumentRenderer(self.state).inventory_report()

    def movements_html(self, start: Optional[DateLike], end: Optional[DateLike]) -> str:
        try:
            html = DocumentRenderer(self.state).movements_report(start, end)
        except ValidationException as e:
            self.notifications.error(e.message)
            raise
        self._announce("movements", "PDF")
        return html

    def incidents_html(self, status: str = ALL_STATUSES) -> str:
        self._announce("incidents", "PDF")
        return DocumentRenderer(self.state).incidents_report(status)

    def cmr(self, salida_id: str) -> str:
        return DocumentRenderer(self.state).cmr(salida_id)

    def generic_label(self, dto: GenericLabelRequestDTO) -> str:
        try:
            return DocumentRenderer(self.state).generic_label(dto.title, dto.line1, dto.line2, dto.qr_content)
        except ValidationException as e:
            self.notifications.error(e.message)
            raise

    def label_reprint(self, kind: str, entity_id: str) -> str:
        return DocumentRenderer(self.state).label_reprint(kind, entity_id)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    def search_labels(self, term: str) -> List[LabelSearchResultDTO]:
        return [LabelSearchResultDTO.model_validate(r) for r in search_labels(self.state, term)]

    def dashboard_stats(self) -> DashboardStatsDTO:
        return DashboardStatsDTO(
            stock_by_product=[ProductStockDTO.model_validate(s) for s in available_stock_by_product(self.state)],
            incidents_by_status=incident_counts_by_status(self.state),
        )

    def stock_overview(self) -> StockOverviewDTO:
        return StockOverviewDTO(
            pallets=[PalletDTO.model_validate(p) for p in self.state.pallets],
            packs=[PackResponseDTO.model_validate(p) for p in self.state.packs],
        )

    def audit_entries(self) -> List[AuditLogEntryDTO]:
        return [AuditLogEntryDTO.model_validate(e) for e in self.audit_log.entries]

    def notifications_visible(self) -> List[NotificationDTO]:
        return [NotificationDTO.model_validate(n) for n in self.notifications.visible()]

    def dismiss_notification(self, notification_id: int) -> bool:
        return self.notifications.dismiss(notification_id)
