"""
Casos de uso de packs (preparación de pedidos).

Cabecera y líneas se escriben siempre en una misma transacción: si una
línea falla no queda ninguna cabecera sin contenido.
"""
from datetime import datetime
from typing import List

from loguru import logger

from vinos_wms.application.dto.warehouse_dto import PackCreateDTO, PackResponseDTO, PackUpdateDTO
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.domain.entities import Pack, PackItem, User
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.infrastructure.remote.types import raise_data_error
from vinos_wms.shared.constants.warehouse_constants import AuditAction, ID_PREFIX_PACK, PackStatus
from vinos_wms.shared.exceptions.domain import EntityNotFoundException
from vinos_wms.shared.utils.ids import generate_entity_id


class PackUseCases(WarehouseUseCases):

    def list_packs(self) -> List[PackResponseDTO]:
        return [PackResponseDTO.model_validate(p) for p in self.state.packs]

    def _get(self, pack_id: str) -> Pack:
        pack = self.state.find_pack(pack_id)
        if pack is None:
            raise EntityNotFoundException("Pack", pack_id)
        return pack

    def get_pack(self, pack_id: str) -> PackResponseDTO:
        return PackResponseDTO.model_validate(self._get(pack_id))

    async def create_pack(self, dto: PackCreateDTO, user: User) -> PackResponseDTO:
        """
        Crea un pack con estado Creado, etiqueta '#' y fecha actual.

        Las cantidades no se validan contra el stock disponible.
        """
        pack_id = generate_entity_id(ID_PREFIX_PACK)
        pack = Pack(
            id=pack_id,
            customer_order=dto.customer_order,
            created_at=datetime.now(),
            status=PackStatus.CREATED,
            label_url="#",
            items=[PackItem(pack_id=pack_id, **item.model_dump()) for item in dto.items],
        )

        async with self.client.transaction() as tx:
            await tx.insert(tm.PACKS.table, [tm.PACKS.to_row(pack)])
            await tx.insert(tm.PACK_ITEMS.table, [tm.PACK_ITEMS.to_row(i) for i in pack.items])
        if tx.error:
            raise_data_error(tx.error, "No se pudo crear el pack")

        self.state.packs.insert(0, pack)
        self._record(user, AuditAction.CREATE, "Pack", pack.id)
        self.notifications.success("Pack creado con éxito.")
        logger.info(f"Pack {pack.id} creado para el pedido {pack.customer_order} ({len(pack.items)} líneas)")
        return PackResponseDTO.model_validate(pack)

    async def update_pack(self, pack_id: str, dto: PackUpdateDTO, user: User) -> PackResponseDTO:
        """Actualiza la cabecera; si llegan líneas, sustituyen a las anteriores."""
        current = self._get(pack_id)
        changes = dto.model_dump(exclude_unset=True, exclude={"items"})
        items = current.items
        if dto.items is not None:
            items = [PackItem(pack_id=pack_id, **item.model_dump()) for item in dto.items]
        updated = Pack(
            id=current.id,
            customer_order=changes.get("customer_order", current.customer_order),
            created_at=current.created_at,
            status=changes.get("status", current.status),
            label_url=changes.get("label_url", current.label_url),
            items=items,
        )

        async with self.client.transaction() as tx:
            result = await tx.update(tm.PACKS.table, tm.PACKS.to_row(updated, exclude_pk=True), {"id": pack_id})
            if dto.items is not None:
                await tx.delete(tm.PACK_ITEMS.table, {"pack_id": pack_id})
                await tx.insert(tm.PACK_ITEMS.table, [tm.PACK_ITEMS.to_row(i) for i in items])
        if tx.error:
            raise_data_error(tx.error, "No se pudo actualizar el pack")
        if not result.data:
            raise EntityNotFoundException("Pack", pack_id)

        self.state.packs[self.state.packs.index(current)] = updated
        self._record(user, AuditAction.UPDATE, "Pack", pack_id)
        self.notifications.success(f"Pack {pack_id} actualizado.")
        return PackResponseDTO.model_validate(updated)

    async def delete_pack(self, pack_id: str, user: User) -> None:
        """Elimina el pack junto con sus líneas y sus asociaciones a salidas."""
        current = self._get(pack_id)

        async with self.client.transaction() as tx:
            await tx.delete(tm.SALIDA_PACKS.table, {"pack_id": pack_id})
            await tx.delete(tm.PACK_ITEMS.table, {"pack_id": pack_id})
            await tx.delete(tm.PACKS.table, {"id": pack_id})
        if tx.error:
            raise_data_error(tx.error, "No se pudo eliminar el pack")

        self.state.packs.remove(current)
        for salida in self.state.salidas:
            salida.packs = [p for p in salida.packs if p.id != pack_id]
        self._record(user, AuditAction.DELETE, "Pack", pack_id)
        self.notifications.success("Pack eliminado.")
