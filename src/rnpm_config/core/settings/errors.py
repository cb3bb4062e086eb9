# src/rnpm_config/core/settings/errors.py
"""
Exceções da camada de settings do rnpm-config.

Todas as falhas ocorridas durante o carregamento, o merge e a validação
dos settings da ferramenta herdam de `SettingsError`, permitindo captura
genérica sem confundi-las com falhas de leitura de manifest.

Invariantes:
    - Nenhuma exceção desta hierarquia representa ausência de manifest
    - Nenhum settings parcial é produzido quando uma delas é levantada
"""


class SettingsError(Exception):
    """Exceção base para erros de settings do rnpm-config."""


class UnsupportedSettingsFormatError(SettingsError):
    """
    Arquivo de settings com extensão não suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    O formato nunca é inferido pelo conteúdo.
    """


class InvalidSettingsRootError(SettingsError):
    """O conteúdo raiz do arquivo de settings não é um mapa chave-valor."""


class UnknownSettingError(SettingsError):
    """
    O arquivo de settings declara uma chave que a ferramenta não conhece.

    Chaves desconhecidas são rejeitadas em vez de ignoradas, para que
    erros de digitação (ex.: `reserved_kye`) não passem despercebidos.
    """


class InvalidSettingValueError(SettingsError):
    """Um valor de settings não é uma string não vazia."""


class SettingsTypeConflictError(SettingsError):
    """
    Conflito de tipos durante o merge de settings.

    Exemplo de conflito:
        - base:     {"manifest_filename": "package.json"}
        - override: {"manifest_filename": {"name": "package.json"}}

    Não há coerção nem resolução automática.
    """
