"""
Casos de uso del catálogo de productos.
"""
from typing import List

from vinos_wms.application.dto.warehouse_dto import ProductDTO
from vinos_wms.application.use_cases.base import WarehouseUseCases
from vinos_wms.domain.entities import Product, User
from vinos_wms.infrastructure.remote import table_mappings as tm
from vinos_wms.shared.constants.warehouse_constants import AuditAction


class ProductUseCases(WarehouseUseCases):

    def list_products(self) -> List[ProductDTO]:
        return [ProductDTO.model_validate(p) for p in self.state.products]

    async def upsert_product(self, dto: ProductDTO, user: User) -> ProductDTO:
        """
        Alta o modificación por id: siempre queda una sola fila con los
        últimos valores enviados.
        """
        product = Product(**dto.model_dump())
        result = await self.client.upsert(
            tm.PRODUCTS.table,
            [tm.PRODUCTS.to_row(product)],
            on_conflict=tm.PRODUCTS.primary_key,
        )
        result.raise_for_error("No se pudo guardar el producto")

        existing = next((p for p in self.state.products if p.id == product.id), None)
        if existing is None:
            self.state.products.insert(0, product)
            action = AuditAction.CREATE
        else:
            self.state.products[self.state.products.index(existing)] = product
            action = AuditAction.UPDATE
        self._record(user, action, "Product", product.id)
        self.notifications.success(f"Producto {product.name} guardado.")
        return ProductDTO.model_validate(product)
