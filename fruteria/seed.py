# ==============================================================================
# DATOS DE DEMOSTRACIÓN
# ==============================================================================
# Catálogo inicial y una boleta de ejemplo. Se cargan al crear la aplicación
# cuando SEED_DEMO_DATA está activo, y solo si los almacenes están vacíos.
# ==============================================================================

import logging

from fruteria.models import Boleta, Product

logger = logging.getLogger(__name__)


PRODUCTOS = [
    {'categoria': 'fruta', 'nombre': 'Manzana', 'precio': 1.50},
    {'categoria': 'verdura', 'nombre': 'Lechuga', 'precio': 0.99},
    {'categoria': 'fruta', 'nombre': 'Plátano', 'precio': 0.75},
    {'categoria': 'verdura', 'nombre': 'Tomate', 'precio': 2.20},
    {'categoria': 'fruta', 'nombre': 'Naranja', 'precio': 1.20},
]

BOLETAS = [
    {
        'cliente': 'Cliente A',
        'nombre_identidad': 'Juan Perez',
        'ruc': '12345678901',
        'fecha_emision': '2025-08-01',
        'fecha_traslado': '2025-08-02',
        'transporte_marca': 'Toyota',
        'transporte_placa': 'ABC-123',
        'num_const_inscripcion': 'CI-001',
        'licencia_conducir': 'L-001',
        'pedido': [
            {'id': '1', 'nombre': 'Manzana', 'categoria': 'fruta', 'precio': 1.50,
             'cantidad': 2, 'unidad': 'kg'},
            {'id': '2', 'nombre': 'Lechuga', 'categoria': 'verdura', 'precio': 0.99,
             'cantidad': 3, 'unidad': 'unidad'},
        ],
    },
]


def load_demo_data(container) -> None:
    """
    Carga el catálogo y las boletas de ejemplo en los almacenes del contenedor.

    Args:
        container: AppContainer de la aplicación
    """
    if container.product_repo.count() == 0:
        for data in PRODUCTOS:
            container.product_repo.add(Product.from_dict(data))

    if container.boleta_repo.count() == 0:
        for data in BOLETAS:
            container.boleta_repo.add(Boleta.from_dict(data))

    logger.info(
        f"Datos de demostración: {container.product_repo.count()} productos, "
        f"{container.boleta_repo.count()} boletas"
    )
