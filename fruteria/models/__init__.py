# ==============================================================================
# CAPA DE MODELOS - Estructuras de datos del sistema
# ==============================================================================
# Entidades del dominio definidas con dataclasses:
#   - Product: catálogo de frutas y verduras
#   - OrderLine: instantánea de un producto dentro de una boleta
#   - Boleta: cabecera de cliente/transporte + líneas + total derivado
# ==============================================================================

from .entities import (
    # Enumeraciones
    Categoria,
    Unidad,
    BOLETA_HEADER_FIELDS,

    # Catálogo
    Product,

    # Boletas
    OrderLine,
    Boleta,

    # Utilidades
    parse_date,
)

__all__ = [
    'Categoria',
    'Unidad',
    'BOLETA_HEADER_FIELDS',
    'Product',
    'OrderLine',
    'Boleta',
    'parse_date',
]
