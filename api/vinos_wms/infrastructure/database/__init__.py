"""
Configuración de base de datos.

Importa todos los modelos para que se registren con Base
antes de crear las tablas.
"""
from vinos_wms.infrastructure.database.models import (
    ProfileModel,
    ProductModel,
    EntradaModel,
    PalletModel,
    PackModel,
    PackProductoModel,
    SalidaModel,
    SalidaPackModel,
    IncidenciaModel,
)
