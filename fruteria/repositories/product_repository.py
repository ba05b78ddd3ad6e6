# ==============================================================================
# REPOSITORIO DE PRODUCTOS
# ==============================================================================
# Catálogo de productos en memoria: [Product("1"), Product("2"), ...]
# ==============================================================================

from typing import List

from fruteria.models import Categoria, Product
from fruteria.repositories.base import MemoryRepository


class ProductRepository(MemoryRepository):
    """
    Almacén del catálogo de productos.

    IDs: "1", "2", "3"... (posición después de insertar).
    """

    entity_type = Product
    entity_label = 'Producto'

    def _format_id(self, number: int) -> str:
        return str(number)

    def get_by_categoria(self, categoria: Categoria) -> List[Product]:
        """
        Obtiene productos de una categoría.

        Args:
            categoria: Categoría a filtrar

        Returns:
            Lista de productos de esa categoría
        """
        return self.find_all(lambda p: p.categoria == categoria)
