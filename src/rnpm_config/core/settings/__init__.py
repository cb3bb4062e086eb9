# src/rnpm_config/core/settings/__init__.py
"""
Camada de settings do rnpm-config.

Os settings são os parâmetros da própria ferramenta (nome do arquivo de
manifest, chave reservada e diretório de dependências), e não a
configuração de plataforma lida dos projetos.

Responsabilidades do pacote:
    - Defaults canônicos embutidos (`ResolverSettings`)
    - Carregamento opcional de um arquivo de override (YAML/JSON)
    - Merge plano e tipado entre defaults e override
    - Hash canônico para identificar configurações resolvidas

Invariantes:
    - Sem arquivo de override, os defaults são usados integralmente
    - Conflitos estruturais são tratados como erro
"""

from .errors import (
    InvalidSettingValueError,
    InvalidSettingsRootError,
    SettingsError,
    SettingsTypeConflictError,
    UnknownSettingError,
    UnsupportedSettingsFormatError,
)
from .hashing import compute_config_hash
from .loader import DEFAULT_SETTINGS, ResolverSettings, load_settings
from .merge import merge_settings

__all__ = [
    "DEFAULT_SETTINGS",
    "InvalidSettingValueError",
    "InvalidSettingsRootError",
    "ResolverSettings",
    "SettingsError",
    "SettingsTypeConflictError",
    "UnknownSettingError",
    "UnsupportedSettingsFormatError",
    "compute_config_hash",
    "load_settings",
    "merge_settings",
]
