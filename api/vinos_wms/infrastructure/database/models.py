"""
Modelos de base de datos (ORM).

Reflejan el esquema remoto: nombres de tabla y de columna en castellano,
fijos. Los estados se guardan como texto plano.
"""
from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    JSON,
    String,
    Text,
)

from vinos_wms.infrastructure.database.session import Base


class ProfileModel(Base):
    """Perfiles de usuario."""

    __tablename__ = "profiles"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=True)
    role = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<Profile(id={self.id}, email={self.email}, role={self.role})>"


class ProductModel(Base):
    """Catalogo de productos."""

    __tablename__ = "products"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    ean_botella = Column(String(50), nullable=True)
    ean_caja = Column(String(50), nullable=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name})>"


class EntradaModel(Base):
    """Cabeceras de entradas de mercancia."""

    __tablename__ = "entradas"

    id = Column(String(50), primary_key=True)
    albaran_id = Column(String(100), nullable=False, index=True)
    camion_matricula = Column(String(50), nullable=True)
    transportista = Column(String(255), nullable=True)
    conductor = Column(String(255), nullable=True)
    fecha_hora = Column(DateTime, nullable=False)
    numero_palets = Column(Integer, nullable=False, default=0)
    incidencia = Column(Text, nullable=True)
    incidencia_imagenes = Column(JSON, nullable=True)
    pallet_label_imagenes = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<Entrada(id={self.id}, albaran={self.albaran_id})>"


class PalletModel(Base):
    """Palets en almacen; entrada_id es la referencia a su entrada."""

    __tablename__ = "pallets"

    id = Column(String(50), primary_key=True)
    entrada_id = Column(String(50), ForeignKey("entradas.id", ondelete="SET NULL"), nullable=True, index=True)
    product_id = Column(String(50), nullable=False)
    lote = Column(String(100), nullable=False)
    sscc = Column(String(100), nullable=True)
    cajas_por_palet = Column(Integer, nullable=False, default=0)
    botellas_por_caja = Column(Integer, nullable=False, default=0)
    fecha_entrada = Column(Date, nullable=True)
    estado = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<Pallet(id={self.id}, lote={self.lote}, estado={self.estado})>"


class PackModel(Base):
    """Cabeceras de packs."""

    __tablename__ = "packs"

    id = Column(String(50), primary_key=True)
    pedido_cliente = Column(String(100), nullable=False)
    fecha_creacion = Column(DateTime, nullable=False)
    estado = Column(String(50), nullable=False)
    etiqueta_url = Column(String(500), nullable=True)

    def __repr__(self):
        return f"<Pack(id={self.id}, pedido={self.pedido_cliente})>"


class PackProductoModel(Base):
    """Lineas de pack (clave compuesta pack + producto + lote)."""

    __tablename__ = "pack_productos"

    pack_id = Column(String(50), ForeignKey("packs.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(String(50), primary_key=True)
    lote = Column(String(100), primary_key=True)
    cantidad = Column(Integer, nullable=False)


class SalidaModel(Base):
    """Cabeceras de salidas de mercancia."""

    __tablename__ = "salidas"

    id = Column(String(50), primary_key=True)
    albaran_salida_id = Column(String(100), nullable=False, index=True)
    cliente = Column(String(255), nullable=False)
    fecha_hora = Column(DateTime, nullable=False)
    conductor = Column(String(255), nullable=True)
    camion_matricula = Column(String(50), nullable=True)
    transportista = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<Salida(id={self.id}, albaran={self.albaran_salida_id})>"


class SalidaPackModel(Base):
    """Asociacion salida - pack."""

    __tablename__ = "salida_packs"

    salida_id = Column(String(50), ForeignKey("salidas.id", ondelete="CASCADE"), primary_key=True)
    pack_id = Column(String(50), ForeignKey("packs.id", ondelete="CASCADE"), primary_key=True)


class IncidenciaModel(Base):
    """Incidencias reportadas."""

    __tablename__ = "incidencias"

    id = Column(String(50), primary_key=True)
    tipo = Column(String(50), nullable=False)
    descripcion = Column(Text, nullable=False)
    fecha = Column(Date, nullable=False)
    estado = Column(String(50), nullable=False)
    usuario_reporta = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<Incidencia(id={self.id}, tipo={self.tipo}, estado={self.estado})>"
