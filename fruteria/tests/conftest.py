"""
Fixtures compartidas: una aplicación sin datos de demostración por test.
"""
from datetime import date

import pytest

from fruteria import create_app
from fruteria.app_container import get_container
from fruteria.models import Boleta, Categoria, OrderLine, Product, Unidad


@pytest.fixture
def app():
    app = create_app({'TESTING': True, 'SEED_DEMO_DATA': False})
    with app.app_context():
        yield app


@pytest.fixture
def container(app):
    return get_container()


@pytest.fixture
def product_repo(container):
    return container.product_repo


@pytest.fixture
def boleta_repo(container):
    return container.boleta_repo


@pytest.fixture
def product_service(container):
    return container.product_service


@pytest.fixture
def boleta_service(container):
    return container.boleta_service


@pytest.fixture
def catalog(product_repo):
    """Catálogo de ejemplo: IDs "1" a "5"."""
    for nombre, categoria, precio in [
        ('Manzana', Categoria.FRUTA, 1.50),
        ('Lechuga', Categoria.VERDURA, 0.99),
        ('Plátano', Categoria.FRUTA, 0.75),
        ('Tomate', Categoria.VERDURA, 2.20),
        ('Naranja', Categoria.FRUTA, 1.20),
    ]:
        product_repo.add(Product(nombre=nombre, categoria=categoria, precio=precio))
    return product_repo.get_all()


@pytest.fixture
def header():
    """Cabecera válida de formulario de boleta."""
    return {
        'cliente': 'Cliente A',
        'nombre_identidad': 'Juan Perez',
        'ruc': '12345678901',
        'fecha_emision': '2025-08-01',
        'fecha_traslado': '2025-08-02',
        'transporte_marca': 'Toyota',
        'transporte_placa': 'ABC-123',
        'num_const_inscripcion': 'CI-001',
        'licencia_conducir': 'L-001',
    }


def make_boleta(cliente='Cliente A', ruc='12345678901', pedido=None):
    return Boleta(
        cliente=cliente,
        nombre_identidad='Juan Perez',
        ruc=ruc,
        fecha_emision=date(2025, 8, 1),
        fecha_traslado=date(2025, 8, 2),
        transporte_marca='Toyota',
        transporte_placa='ABC-123',
        num_const_inscripcion='CI-001',
        licencia_conducir='L-001',
        pedido=pedido if pedido is not None else [
            OrderLine('1', 'Manzana', Categoria.FRUTA, 1.50, 2, Unidad.KG),
            OrderLine('2', 'Lechuga', Categoria.VERDURA, 0.99, 3, Unidad.UNIDAD),
        ],
    )


@pytest.fixture
def boleta_factory():
    return make_boleta
