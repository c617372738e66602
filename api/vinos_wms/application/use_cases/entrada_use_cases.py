"""
Casos de uso de entradas de mercancía.
"""
from dataclasses import replace
from typing import List

from loguru import logger

from vinos_wms.application.dto.warehouse_dto import (
    EntradaCreateDTO,
    EntradaResponseDTO,
    EntradaUpdateDTO,
)
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.domain.entities import Entrada, User
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.infrastructure.remote.types import raise_data_error
from vinos_wms.shared.constants.warehouse_constants import AuditAction, ID_PREFIX_ENTRADA, TABLE_PALLETS
from vinos_wms.shared.exceptions.domain import EntityNotFoundException
from vinos_wms.shared.utils.ids import generate_entity_id


class EntradaUseCases(WarehouseUseCases):
    """
    Alta, modificación y baja de entradas.
    Los palets nunca se crean desde aquí: una entrada nueva empieza sin palets.
    """

    def list_entradas(self) -> List[EntradaResponseDTO]:
        return [EntradaResponseDTO.model_validate(e) for e in self.state.entradas]

    def _get(self, entrada_id: str) -> Entrada:
        entrada = self.state.find_entrada(entrada_id)
        if entrada is None:
            raise EntityNotFoundException("Entrada", entrada_id)
        return entrada

    def get_entrada(self, entrada_id: str) -> EntradaResponseDTO:
        return EntradaResponseDTO.model_validate(self._get(entrada_id))

    async def create_entrada(self, dto: EntradaCreateDTO, user: User) -> EntradaResponseDTO:
        """
        Registra una entrada.

        Raises:
            RemoteCallException: Si la base remota rechaza la fila
        """
        entrada = Entrada(
            id=generate_entity_id(ID_PREFIX_ENTRADA),
            pallets=[],
            **dto.model_dump(),
        )
        result = await self.client.insert(tm.ENTRADAS.table, [tm.ENTRADAS.to_row(entrada)])
        result.raise_for_error("No se pudo registrar la entrada")

        self.state.entradas.insert(0, entrada)
        self._record(user, AuditAction.CREATE, "Entrada", entrada.id)
        self.notifications.success("Entrada registrada con éxito.")
        logger.info(f"Entrada {entrada.id} ({entrada.delivery_note_id}) registrada")
        return EntradaResponseDTO.model_validate(entrada)

    async def update_entrada(self, entrada_id: str, dto: EntradaUpdateDTO, user: User) -> EntradaResponseDTO:
        current = self._get(entrada_id)
        updated = replace(current, **dto.model_dump(exclude_unset=True))

        result = await self.client.update(
            tm.ENTRADAS.table,
            tm.ENTRADAS.to_row(updated, exclude_pk=True),
            {"id": entrada_id},
        )
        result.raise_for_error("No se pudo actualizar la entrada")
        if not result.data:
            raise EntityNotFoundException("Entrada", entrada_id)

        self.state.entradas[self.state.entradas.index(current)] = updated
        self._record(user, AuditAction.UPDATE, "Entrada", entrada_id)
        self.notifications.success(f"Entrada {updated.delivery_note_id} actualizada.")
        return EntradaResponseDTO.model_validate(updated)

    async def delete_entrada(self, entrada_id: str, user: User) -> None:
        """
        Elimina la entrada. Sus palets quedan sin entrada (intake_id None),
        en remoto y en el estado de vista.
        """
        current = self._get(entrada_id)

        async with self.client.transaction() as tx:
            await tx.update(TABLE_PALLETS, {"entrada_id": None}, {"entrada_id": entrada_id})
            await tx.delete(tm.ENTRADAS.table, {"id": entrada_id})
        if tx.error:
            raise_data_error(tx.error, "No se pudo eliminar la entrada")

        self.state.entradas.remove(current)
        for pallet in self.state.pallets:
            if pallet.intake_id == entrada_id:
                pallet.intake_id = None
        self._record(user, AuditAction.DELETE, "Entrada", entrada_id)
        self.notifications.success("Entrada eliminada.")
