# ==============================================================================
# INTERFACES DE REPOSITORIOS
# ==============================================================================
#
# Contratos que cumplen los almacenes. Los servicios dependen de estas
# interfaces y no de la clase concreta, así los tests pueden pasar dobles.
#
# ==============================================================================

from typing import Any, Callable, List, Optional, Protocol, runtime_checkable

from fruteria.models import Categoria, Product


@runtime_checkable
class IRepository(Protocol):
    """
    Operaciones comunes de cualquier almacén.
    Actualizar o eliminar un ID inexistente no es un error: devuelve False.
    """

    def get_all(self) -> List[Any]:
        ...

    def get_by_id(self, record_id: str) -> Optional[Any]:
        ...

    def find_all(self, predicate: Callable[[Any], bool]) -> List[Any]:
        ...

    def add(self, candidate: Any) -> Any:
        ...

    def update(self, record: Any) -> bool:
        ...

    def delete(self, record_id: str) -> bool:
        ...

    def count(self) -> int:
        ...


@runtime_checkable
class IProductRepository(IRepository, Protocol):
    """Interfaz del catálogo de productos."""

    def get_by_categoria(self, categoria: Categoria) -> List[Product]:
        ...


@runtime_checkable
class IBoletaRepository(IRepository, Protocol):
    """Interfaz del almacén de boletas (el total lo fija el almacén)."""
