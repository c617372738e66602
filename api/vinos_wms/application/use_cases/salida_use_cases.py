"""
Casos de uso de salidas (expediciones).
"""
from dataclasses import replace
from typing import List

from loguru import logger

from vinos_wms.application.dto.warehouse_dto import (
    SalidaCreateDTO,
    SalidaResponseDTO,
    SalidaUpdateDTO,
)
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.domain.entities import Pack, Salida, User
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.infrastructure.remote.types import raise_data_error
from vinos_wms.shared.constants.warehouse_constants import AuditAction, ID_PREFIX_SALIDA
from vinos_wms.shared.exceptions.domain import EntityNotFoundException
from vinos_wms.shared.utils.ids import generate_entity_id


class SalidaUseCases(WarehouseUseCases):

    def list_salidas(self) -> List[SalidaResponseDTO]:
        return [SalidaResponseDTO.model_validate(s) for s in self.state.salidas]

    def _get(self, salida_id: str) -> Salida:
        salida = self.state.find_salida(salida_id)
        if salida is None:
            raise EntityNotFoundException("Salida", salida_id)
        return salida

    def get_salida(self, salida_id: str) -> SalidaResponseDTO:
        return SalidaResponseDTO.model_validate(self._get(salida_id))

    def _packs(self, pack_ids: List[str]) -> List[Pack]:
        packs = []
        for pack_id in pack_ids:
            pack = self.state.find_pack(pack_id)
            if pack is None:
                raise EntityNotFoundException("Pack", pack_id)
            packs.append(pack)
        return packs

    async def create_salida(self, dto: SalidaCreateDTO, user: User) -> SalidaResponseDTO:
        """
        Registra la salida y sus asociaciones con packs en una transacción.

        La salida guarda una copia de los packs en este momento; cambios
        posteriores en los packs no la modifican.
        """
        packs = self._packs(dto.pack_ids)
        salida = Salida(id=generate_entity_id(ID_PREFIX_SALIDA), **dto.model_dump(exclude={"pack_ids"}))
        salida.attach_snapshot(packs)
        links = [tm.SalidaPackLink(salida.id, p.id) for p in packs]

        async with self.client.transaction() as tx:
            await tx.insert(tm.SALIDAS.table, [tm.SALIDAS.to_row(salida)])
            await tx.insert(tm.SALIDA_PACKS.table, [tm.SALIDA_PACKS.to_row(link) for link in links])
        if tx.error:
            raise_data_error(tx.error, "No se pudo registrar la salida")

        self.state.salidas.insert(0, salida)
        self._record(user, AuditAction.CREATE, "Salida", salida.id)
        self.notifications.success("Salida registrada con éxito.")
        logger.info(f"Salida {salida.id} ({salida.delivery_note_id}) con {len(packs)} packs")
        return SalidaResponseDTO.model_validate(salida)

    async def update_salida(self, salida_id: str, dto: SalidaUpdateDTO, user: User) -> SalidaResponseDTO:
        """Solo cambia la cabecera; los packs asociados se mantienen."""
        current = self._get(salida_id)
        updated = replace(current, **dto.model_dump(exclude_unset=True))

        result = await self.client.update(
            tm.SALIDAS.table,
            tm.SALIDAS.to_row(updated, exclude_pk=True),
            {"id": salida_id},
        )
        result.raise_for_error("No se pudo actualizar la salida")
        if not result.data:
            raise EntityNotFoundException("Salida", salida_id)

        self.state.salidas[self.state.salidas.index(current)] = updated
        self._record(user, AuditAction.UPDATE, "Salida", salida_id)
        self.notifications.success(f"Salida {updated.delivery_note_id} actualizada.")
        return SalidaResponseDTO.model_validate(updated)

    async def delete_salida(self, salida_id: str, user: User) -> None:
        current = self._get(salida_id)

        async with self.client.transaction() as tx:
            await tx.delete(tm.SALIDA_PACKS.table, {"salida_id": salida_id})
            await tx.delete(tm.SALIDAS.table, {"id": salida_id})
        if tx.error:
            raise_data_error(tx.error, "No se pudo eliminar la salida")

        self.state.salidas.remove(current)
        self._record(user, AuditAction.DELETE, "Salida", salida_id)
        self.notifications.success("Salida eliminada.")
