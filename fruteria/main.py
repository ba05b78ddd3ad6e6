# ==============================================================================
# APLICACIÓN - Configuración, logging y ciclo de vida de los almacenes
# ==============================================================================
# No registra rutas: la aplicación Flask solo define la configuración y el
# alcance del contenedor (un juego de almacenes por aplicación).
#
# CONFIGURACIÓN (variables de entorno con prefijo FRUTERIA_):
#   FRUTERIA_SEED_DEMO_DATA=false   → arrancar con los almacenes vacíos
#   FRUTERIA_ID_SCHEME=secuencial   → IDs que nunca se repiten en la sesión
#   FRUTERIA_LOG_LEVEL=DEBUG        → ver también las operaciones ignoradas
# ==============================================================================

import logging
from typing import Any, Dict, Optional

from flask import Flask

from fruteria.app_container import EXTENSION_KEY, AppContainer
from fruteria.repositories import MemoryRepository
from fruteria.seed import load_demo_data

DEFAULT_CONFIG = {
    'SEED_DEMO_DATA': True,
    'ID_SCHEME': MemoryRepository.ID_SCHEME_POSITIONAL,
    'LOG_LEVEL': 'INFO',
}

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


def configure_logging(level: Any) -> logging.Logger:
    """
    Configura el logger del paquete.

    Args:
        level: Nivel (nombre o número) para el logger 'fruteria'

    Returns:
        Logger raíz del paquete
    """
    logger = logging.getLogger('fruteria')
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def create_app(test_config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Crea la aplicación con su contenedor de almacenes.

    Orden de configuración: valores por defecto → variables FRUTERIA_* →
    test_config.

    Args:
        test_config: Configuración adicional (tests, scripts)

    Returns:
        Aplicación Flask con el contenedor en app.extensions['fruteria']
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env('FRUTERIA')
    if test_config:
        app.config.update(test_config)

    logger = configure_logging(app.config['LOG_LEVEL'])

    container = AppContainer(id_scheme=app.config['ID_SCHEME'])
    app.extensions[EXTENSION_KEY] = container

    if app.config['SEED_DEMO_DATA']:
        load_demo_data(container)

    logger.info(f"Aplicación iniciada (esquema de IDs: {container.id_scheme})")
    return app
