# ==============================================================================
# CAPA DE REPOSITORIOS - Almacenes en memoria
# ==============================================================================
# Cada almacén es dueño exclusivo de su lista de registros.
#
# ESTRUCTURA:
# ├── interfaces.py         → Protocolos (contratos para los servicios)
# ├── base.py               → MemoryRepository (lock, copias, IDs)
# ├── product_repository.py → Catálogo de productos
# └── boleta_repository.py  → Boletas y cálculo del total
# ==============================================================================

from .interfaces import (
    IRepository,
    IProductRepository,
    IBoletaRepository,
)

from .base import MemoryRepository
from .product_repository import ProductRepository
from .boleta_repository import BoletaRepository, calculate_total

__all__ = [
    # Interfaces
    'IRepository',
    'IProductRepository',
    'IBoletaRepository',

    # Clase base
    'MemoryRepository',

    # Implementaciones
    'ProductRepository',
    'BoletaRepository',
    'calculate_total',
]
