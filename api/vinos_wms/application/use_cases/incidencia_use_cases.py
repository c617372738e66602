"""
Casos de uso de incidencias.
"""
from dataclasses import replace
from datetime import date
from typing import List

from vinos_wms.application.dto.warehouse_dto import (
    IncidenciaCreateDTO,
    IncidenciaResponseDTO,
    IncidenciaUpdateDTO,
)
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.domain.entities import Incidencia, User
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.shared.constants.warehouse_constants import AuditAction, ID_PREFIX_INCIDENCIA
from vinos_wms.shared.exceptions.domain import EntityNotFoundException
from vinos_wms.shared.utils.ids import generate_entity_id


class IncidenciaUseCases(WarehouseUseCases):

    def list_incidencias(self) -> List[IncidenciaResponseDTO]:
        return [IncidenciaResponseDTO.model_validate(i) for i in self.state.incidencias]

    def _get(self, incidencia_id: str) -> Incidencia:
        incidencia = self.state.find_incidencia(incidencia_id)
        if incidencia is None:
            raise EntityNotFoundException("Incidencia", incidencia_id)
        return incidencia

    async def create_incidencia(self, dto: IncidenciaCreateDTO, user: User) -> IncidenciaResponseDTO:
        """La fecha es la de hoy y quien reporta es el usuario actual."""
        incidencia = Incidencia(
            id=generate_entity_id(ID_PREFIX_INCIDENCIA),
            category=dto.category,
            description=dto.description,
            date=date.today(),
            status=dto.status,
            reported_by=user.name,
        )
        result = await self.client.insert(tm.INCIDENCIAS.table, [tm.INCIDENCIAS.to_row(incidencia)])
        result.raise_for_error("No se pudo reportar la incidencia")

        self.state.incidencias.insert(0, incidencia)
        self._record(user, AuditAction.CREATE, "Incidencia", incidencia.id)
        self.notifications.success("Incidencia reportada con éxito.")
        return IncidenciaResponseDTO.model_validate(incidencia)

    async def update_incidencia(
        self, incidencia_id: str, dto: IncidenciaUpdateDTO, user: User
    ) -> IncidenciaResponseDTO:
        current = self._get(incidencia_id)
        updated = replace(current, **dto.model_dump(exclude_unset=True))

        result = await self.client.update(
            tm.INCIDENCIAS.table,
            tm.INCIDENCIAS.to_row(updated, exclude_pk=True),
            {"id": incidencia_id},
        )
        result.raise_for_error("No se pudo actualizar la incidencia")
        if not result.data:
            raise EntityNotFoundException("Incidencia", incidencia_id)

        self.state.incidencias[self.state.incidencias.index(current)] = updated
        self._record(user, AuditAction.UPDATE, "Incidencia", incidencia_id)
        self.notifications.success(f"Incidencia {incidencia_id} actualizada.")
        return IncidenciaResponseDTO.model_validate(updated)

    async def delete_incidencia(self, incidencia_id: str, user: User) -> None:
        current = self._get(incidencia_id)

        result = await self.client.delete(tm.INCIDENCIAS.table, {"id": incidencia_id})
        result.raise_for_error("No se pudo eliminar la incidencia")

        self.state.incidencias.remove(current)
        self._record(user, AuditAction.DELETE, "Incidencia", incidencia_id)
        self.notifications.success("Incidencia eliminada.")
