# ==============================================================================
# CONTENEDOR DE DEPENDENCIAS - Inyección de servicios
# ==============================================================================
# Un contenedor por aplicación Flask (no es global del proceso):
#   - create_app() lo construye y lo registra en app.extensions
#   - get_container() lo recupera desde el contexto de aplicación
#   - Los servicios reciben sus almacenes por constructor
# ==============================================================================

from typing import Optional

from flask import current_app

from fruteria.repositories import BoletaRepository, MemoryRepository, ProductRepository
from fruteria.services import BoletaService, ProductService

# Clave bajo la que se registra el contenedor en app.extensions
EXTENSION_KEY = 'fruteria'


class AppContainer:
    """
    Contenedor de dependencias de la aplicación.

    Crea cada almacén y servicio una sola vez (carga perezosa) y los
    comparte dentro de la misma aplicación.

    Uso:
        container = AppContainer(id_scheme='posicional')
        product_service = container.product_service
        boleta_service = container.boleta_service
    """

    def __init__(self, id_scheme: str = MemoryRepository.ID_SCHEME_POSITIONAL):
        """
        Inicializa el contenedor.

        Args:
            id_scheme: Esquema de IDs de los almacenes ('posicional' o 'secuencial')

        Raises:
            ValueError: Si el esquema no es válido
        """
        if id_scheme not in MemoryRepository.VALID_ID_SCHEMES:
            raise ValueError(f"Esquema de IDs inválido: {id_scheme!r}")
        self.id_scheme = id_scheme

        self._product_repo: Optional[ProductRepository] = None
        self._boleta_repo: Optional[BoletaRepository] = None

        self._product_service: Optional[ProductService] = None
        self._boleta_service: Optional[BoletaService] = None

    # =========================================================================
    # REPOSITORIOS
    # =========================================================================

    @property
    def product_repo(self) -> ProductRepository:
        """Almacén de productos (uno por contenedor)."""
        if self._product_repo is None:
            self._product_repo = ProductRepository(self.id_scheme)
        return self._product_repo

    @property
    def boleta_repo(self) -> BoletaRepository:
        """Almacén de boletas (uno por contenedor)."""
        if self._boleta_repo is None:
            self._boleta_repo = BoletaRepository(self.id_scheme)
        return self._boleta_repo

    # =========================================================================
    # SERVICIOS
    # =========================================================================

    @property
    def product_service(self) -> ProductService:
        """Servicio de productos (uno por contenedor)."""
        if self._product_service is None:
            self._product_service = ProductService(self.product_repo)
        return self._product_service

    @property
    def boleta_service(self) -> BoletaService:
        """Servicio de boletas (uno por contenedor)."""
        if self._boleta_service is None:
            self._boleta_service = BoletaService(self.boleta_repo, self.product_repo)
        return self._boleta_service

    # =========================================================================
    # UTILIDADES
    # =========================================================================

    def reset(self) -> None:
        """
        Descarta todas las instancias.
        Los datos en memoria se pierden: los almacenes se crean de nuevo.
        """
        self._product_repo = None
        self._boleta_repo = None

        self._product_service = None
        self._boleta_service = None


def get_container() -> AppContainer:
    """
    Obtiene el contenedor de la aplicación actual.

    Returns:
        Contenedor registrado por create_app()

    Raises:
        RuntimeError: Si se llama fuera de un contexto de aplicación
    """
    return current_app.extensions[EXTENSION_KEY]
