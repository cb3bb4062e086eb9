# src/rnpm_config/__init__.py
"""
rnpm-config — resolução de configuração de projetos React Native.

Lê a chave reservada (`rnpm`) do `package.json` de um projeto ou de uma
dependência em `node_modules/` e a combina com os defaults de cada
plataforma (iOS e Android).

API pública:
    - ConfigResolver  → resolve projeto atual ou dependência nomeada
    - Found / Missing → resultado explícito da resolução
    - read_manifest_config → leitura da chave reservada do manifest
"""

from .core.log import WarningLog
from .core.manifest import read_manifest_config
from .core.platforms import PlatformBuilder, PlatformRegistry, platform_registry
from .core.resolver import (
    ConfigResolver,
    Found,
    Missing,
    get_dependency_config,
    get_project_config,
)
from .core.settings import ResolverSettings, load_settings

__all__ = [
    "ConfigResolver",
    "Found",
    "Missing",
    "PlatformBuilder",
    "PlatformRegistry",
    "ResolverSettings",
    "WarningLog",
    "get_dependency_config",
    "get_project_config",
    "load_settings",
    "platform_registry",
    "read_manifest_config",
]
