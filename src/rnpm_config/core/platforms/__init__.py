# src/rnpm_config/core/platforms/__init__.py
"""
Contrato e registro dos builders de configuração por plataforma.

Os builders (iOS, Android) são colaboradores externos: este pacote
define apenas a interface que o resolver espera e o registro ordenado
que associa cada nome de plataforma ao seu builder.
"""

from .builder import PlatformBuilder
from .registry import (
    DEFAULT_PLATFORMS,
    DuplicatePlatformError,
    PlatformRegistry,
    platform_registry,
)

__all__ = [
    "DEFAULT_PLATFORMS",
    "DuplicatePlatformError",
    "PlatformBuilder",
    "PlatformRegistry",
    "platform_registry",
]
