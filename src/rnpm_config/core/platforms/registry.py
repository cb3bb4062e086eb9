# src/rnpm_config/core/platforms/registry.py
"""
Registro ordenado de builders de plataforma.

O registro garante que:
    - cada plataforma possua um nome válido e único
    - cada builder satisfaça o protocolo `PlatformBuilder`
    - a ordem de registro seja preservada (ela define a ordem das
      chaves da configuração resolvida)

Limites explícitos:
    - Não chama os builders
    - Não lê manifests
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .builder import PlatformBuilder


DEFAULT_PLATFORMS: Tuple[str, ...] = ("ios", "android")


class DuplicatePlatformError(ValueError):
    """Tentativa de registrar duas vezes a mesma plataforma."""


@dataclass
class PlatformRegistry:
    """
    Registro canônico de builders por nome de plataforma.

    Decisões arquiteturais:
        - A validação ocorre no momento do registro
        - A ordem de inserção é mantida separadamente do armazenamento
        - Duplicidade é erro, nunca substituição silenciosa
    """

    _builders: Dict[str, PlatformBuilder] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, name: str, builder: PlatformBuilder) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("platform name must be a non-empty string")
        if name in self._builders:
            raise DuplicatePlatformError(f"Duplicate platform: {name}")
        if not isinstance(builder, PlatformBuilder):
            raise TypeError(
                f"builder for '{name}' must define default_project and default_dependency"
            )

        self._builders[name] = builder
        self._order.append(name)

    def get(self, name: str) -> PlatformBuilder:
        return self._builders[name]

    def names(self) -> List[str]:
        return list(self._order)

    def items(self) -> List[Tuple[str, PlatformBuilder]]:
        return [(name, self._builders[name]) for name in self._order]

    def __len__(self) -> int:
        return len(self._order)


def platform_registry(*, ios: PlatformBuilder, android: PlatformBuilder) -> PlatformRegistry:
    """Monta o registro padrão, na ordem canônica `ios`, `android`."""
    registry = PlatformRegistry()
    for name, builder in zip(DEFAULT_PLATFORMS, (ios, android)):
        registry.add(name, builder)
    return registry
