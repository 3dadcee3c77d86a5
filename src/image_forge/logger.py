"""
Configuración de logging

Responsabilidades:
- Configurar el logger raíz una sola vez
- Definir nivel y formato de los mensajes
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configures the root logger. Calling it again only updates the level.

    An unknown level name falls back to INFO.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    name = str(level or "").upper()
    if not isinstance(logging.getLevelName(name), int):
        root.setLevel(logging.INFO)
        logger.warning("Unknown log level %r, using INFO", level)
        return
    root.setLevel(name)
