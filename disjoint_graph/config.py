"""Configuración de la aplicación leída del entorno."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

ENV_PREFIX = "DISJOINT_GRAPH_"


@dataclass
class Settings:
    data_dir: str = "disjoint_graph/data"
    vertices_file: str = "nodos.csv"
    edges_file: str = "aristas.csv"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Sobrescribe los valores por defecto con variables DISJOINT_GRAPH_*."""
        defaults = cls()
        settings = cls(
            data_dir=os.environ.get(ENV_PREFIX + "DATA_DIR", defaults.data_dir),
            vertices_file=os.environ.get(ENV_PREFIX + "VERTICES_FILE", defaults.vertices_file),
            edges_file=os.environ.get(ENV_PREFIX + "EDGES_FILE", defaults.edges_file),
            log_level=os.environ.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )
        if not isinstance(logging.getLevelName(settings.log_level), int):
            logger.warning("Nivel de log desconocido %r, se usa INFO", settings.log_level)
            settings.log_level = "INFO"
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
