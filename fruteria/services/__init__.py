# ==============================================================================
# CAPA DE SERVICIOS - Formularios, tablas y borradores
# ==============================================================================
# Los servicios validan y arman los registros; los almacenes solo guardan.
#
# ESTRUCTURA:
# ├── product_service.py → Formulario y tabla de productos
# ├── boleta_service.py  → Formulario, tabla y detalle de boletas
# └── draft_service.py   → Borrador de boleta (líneas en edición + commit)
# ==============================================================================

from fruteria.services.draft_service import BoletaDraft
from fruteria.services.product_service import ProductService
from fruteria.services.boleta_service import BoletaService

__all__ = [
    'BoletaDraft',
    'ProductService',
    'BoletaService',
]
