# ==============================================================================
# ENTIDADES DEL DOMINIO - Definiciones de dataclasses
# ==============================================================================
# Cada entidad representa un concepto del negocio de la frutería.
# Son independientes del almacén: los repositorios guardan copias propias
# y nunca comparten instancias con los formularios.
# ==============================================================================

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Union


# ==============================================================================
# ENUMERACIONES - Valores válidos
# ==============================================================================

class Categoria(str, Enum):
    """Categorías de producto disponibles."""
    FRUTA = "fruta"
    VERDURA = "verdura"
    OTROS = "otros"


class Unidad(str, Enum):
    """Unidades en las que se despacha una línea de pedido."""
    KG = "kg"
    UNIDAD = "unidad"
    LITRO = "litro"
    CAJA = "caja"


# Campos de cabecera de una boleta (todos obligatorios en el formulario)
BOLETA_HEADER_FIELDS = (
    'cliente',
    'nombre_identidad',
    'ruc',
    'fecha_emision',
    'fecha_traslado',
    'transporte_marca',
    'transporte_placa',
    'num_const_inscripcion',
    'licencia_conducir',
)


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Convierte un valor de formulario en fecha.

    Args:
        value: Fecha ISO (YYYY-MM-DD), objeto date o None

    Returns:
        Objeto date, o None si el valor está vacío

    Raises:
        ValueError: Si el texto no es una fecha ISO válida
    """
    if value is None or isinstance(value, date):
        return value
    value = str(value).strip()
    if not value:
        return None
    return date.fromisoformat(value)


# ==============================================================================
# CATÁLOGO
# ==============================================================================

@dataclass
class Product:
    """
    Producto del catálogo.

    Attributes:
        nombre: Nombre visible del producto
        categoria: Categoría (fruta, verdura, otros)
        precio: Precio unitario, nunca negativo
        id: Identificador asignado por el almacén (vacío hasta agregarse)
    """
    nombre: str
    categoria: Categoria = Categoria.FRUTA
    precio: float = 0.0
    id: str = ''

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario."""
        return {
            'id': self.id,
            'categoria': self.categoria.value if isinstance(self.categoria, Enum) else self.categoria,
            'nombre': self.nombre,
            'precio': self.precio,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        """Crea instancia desde diccionario."""
        return cls(
            id=str(data.get('id', '')),
            categoria=Categoria(data.get('categoria', 'fruta')),
            nombre=data.get('nombre', ''),
            precio=float(data.get('precio', 0.0)),
        )


# ==============================================================================
# BOLETAS
# ==============================================================================

@dataclass
class OrderLine:
    """
    Línea de pedido dentro de una boleta.
    Es una copia del producto en el momento de agregarlo: editar el
    producto después no cambia las boletas existentes.

    Attributes:
        id: ID del producto de origen
        nombre: Nombre del producto
        categoria: Categoría del producto
        precio: Precio unitario al momento de agregarlo
        cantidad: Cantidad pedida (entero positivo)
        unidad: Unidad de despacho
    """
    id: str
    nombre: str
    categoria: Categoria
    precio: float
    cantidad: int = 1
    unidad: Unidad = Unidad.UNIDAD

    @property
    def subtotal(self) -> float:
        """Subtotal de esta línea."""
        return round(self.precio * self.cantidad, 2)

    @classmethod
    def from_product(cls, product: Product, cantidad: int, unidad: Unidad) -> 'OrderLine':
        """Toma una instantánea del producto."""
        return cls(
            id=product.id,
            nombre=product.nombre,
            categoria=product.categoria,
            precio=product.precio,
            cantidad=cantidad,
            unidad=unidad,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario."""
        return {
            'id': self.id,
            'nombre': self.nombre,
            'categoria': self.categoria.value if isinstance(self.categoria, Enum) else self.categoria,
            'precio': self.precio,
            'cantidad': self.cantidad,
            'unidad': self.unidad.value if isinstance(self.unidad, Enum) else self.unidad,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrderLine':
        """Crea instancia desde diccionario."""
        return cls(
            id=str(data.get('id', '')),
            nombre=data.get('nombre', ''),
            categoria=Categoria(data.get('categoria', 'fruta')),
            precio=float(data.get('precio', 0.0)),
            cantidad=int(data.get('cantidad', 1)),
            unidad=Unidad(data.get('unidad', 'unidad')),
        )


@dataclass
class Boleta:
    """
    Boleta de venta / guía de traslado.

    Attributes:
        cliente: Nombre del cliente
        nombre_identidad: Nombre de la persona que se identifica
        ruc: RUC del cliente
        fecha_emision: Fecha de emisión
        fecha_traslado: Fecha de traslado (sin orden respecto a la emisión)
        transporte_marca: Marca del vehículo
        transporte_placa: Placa del vehículo
        num_const_inscripcion: Nº de constancia de inscripción
        licencia_conducir: Licencia del conductor
        pedido: Líneas de pedido en orden de inserción
        id: Identificador asignado por el almacén (B001, B002, ...)
        total: Total derivado de las líneas; lo calcula el almacén
    """
    cliente: str
    nombre_identidad: str
    ruc: str
    fecha_emision: Optional[date]
    fecha_traslado: Optional[date]
    transporte_marca: str
    transporte_placa: str
    num_const_inscripcion: str
    licencia_conducir: str
    pedido: List[OrderLine] = field(default_factory=list)
    id: str = ''
    total: float = 0.0

    def header(self) -> Dict[str, Any]:
        """Campos de cabecera (lo que edita el formulario)."""
        return {name: getattr(self, name) for name in BOLETA_HEADER_FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario (fechas en formato ISO)."""
        d = {'id': self.id}
        for name, value in self.header().items():
            d[name] = value.isoformat() if isinstance(value, date) else value
        d['pedido'] = [line.to_dict() for line in self.pedido]
        d['total'] = self.total
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Boleta':
        """Crea instancia desde diccionario."""
        return cls(
            id=data.get('id', ''),
            cliente=data.get('cliente', ''),
            nombre_identidad=data.get('nombre_identidad', ''),
            ruc=data.get('ruc', ''),
            fecha_emision=parse_date(data.get('fecha_emision')),
            fecha_traslado=parse_date(data.get('fecha_traslado')),
            transporte_marca=data.get('transporte_marca', ''),
            transporte_placa=data.get('transporte_placa', ''),
            num_const_inscripcion=data.get('num_const_inscripcion', ''),
            licencia_conducir=data.get('licencia_conducir', ''),
            pedido=[OrderLine.from_dict(line) for line in data.get('pedido', [])],
            total=float(data.get('total', 0.0)),
        )
