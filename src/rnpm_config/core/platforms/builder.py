# src/rnpm_config/core/platforms/builder.py
"""
Contrato canônico de um builder de configuração de plataforma.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class PlatformBuilder(Protocol):
    """
    Interface mínima de um builder de plataforma.

    Cada builder calcula a configuração completa de uma plataforma a
    partir da pasta base do pacote e dos overrides lidos do manifest.
    O formato do retorno pertence à plataforma e é opaco para o resolver.

    Invariantes:
        - Funções puras dos seus argumentos
        - `overrides` é sempre um mapa (vazio quando nada foi declarado)

    Limites explícitos:
        - Não lê o manifest
        - Não emite warnings
    """

    def default_project(self, folder: Path, overrides: Mapping[str, Any]) -> Any:
        ...

    def default_dependency(self, folder: Path, overrides: Mapping[str, Any]) -> Any:
        ...
