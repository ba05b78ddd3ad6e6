"""
Frutería: administración de productos y boletas en memoria.

Uso:
    from fruteria import create_app, get_container

    app = create_app()
    with app.app_context():
        boletas = get_container().boleta_service
"""

from fruteria.app_container import AppContainer, get_container
from fruteria.main import create_app

__version__ = '0.1.0'

__all__ = ['AppContainer', 'create_app', 'get_container']
