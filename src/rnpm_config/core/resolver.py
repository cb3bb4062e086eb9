# src/rnpm_config/core/resolver.py
"""
Resolução de configuração de projeto e de dependência.

Este módulo combina o bloco reservado lido do manifest com os builders
de cada plataforma, produzindo a configuração resolvida de:
    - o projeto atual (pasta = cwd)
    - uma dependência nomeada (pasta = cwd/node_modules/<nome>)

Resultado da resolução:
    - Found   → configuração resolvida, uma chave por plataforma
    - Missing → manifest ausente; carrega um `ErrorPayload` EPACKAGEJSON

Decisões arquiteturais:
    - O diretório de trabalho é sempre injetado, nunca lido do processo
    - A ausência do manifest gera exatamente um warning e um `Missing`,
      nunca uma exceção
    - O retorno do sink de log é preservado em `Missing.log_record`, mas
      nunca substitui o resultado
    - Falhas de parse do manifest propagam sem tratamento

Invariantes:
    - Chamadas são independentes e idempotentes dado o mesmo filesystem
    - Cada builder recebe sempre um mapa de overrides (vazio por padrão)
    - A ordem das chaves de `Found.config` segue a ordem de registro
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .errors import ErrorPayload, dependency_manifest_not_found, project_manifest_not_found
from .log import LogSink, WarningLog
from .manifest import read_manifest_config
from .platforms import PlatformBuilder, PlatformRegistry
from .settings import ResolverSettings, compute_config_hash


Platforms = Union[PlatformRegistry, Mapping[str, PlatformBuilder]]


@dataclass(frozen=True)
class Found:
    """Configuração resolvida para `folder`."""

    folder: Path
    config: Dict[str, Any]
    config_hash: Optional[str] = None
    found: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Missing:
    """Manifest ausente em `folder`; `payload` descreve o problema."""

    folder: Path
    payload: ErrorPayload
    log_record: Any = field(default=None, compare=False)
    found: bool = field(default=False, init=False)


Outcome = Union[Found, Missing]


def _as_registry(platforms: Platforms) -> PlatformRegistry:
    if isinstance(platforms, PlatformRegistry):
        return platforms

    registry = PlatformRegistry()
    for name, builder in platforms.items():
        registry.add(name, builder)
    return registry


def _hash_or_none(config: Dict[str, Any]) -> Optional[str]:
    # builders podem devolver objetos não serializáveis ou circulares
    try:
        return compute_config_hash(config)
    except (TypeError, ValueError):
        return None


@dataclass
class ConfigResolver:
    """
    Resolver de configuração ancorado em um diretório de trabalho explícito.

    Args:
        cwd: Diretório do projeto (onde vive o `package.json` raiz).
        platforms: Registro (ou mapa ordenado) de builders por plataforma.
        log: Sink de warnings; `WarningLog` em memória por padrão.
        settings: Nome do manifest, chave reservada e diretório de módulos.
    """

    cwd: Union[str, Path]
    platforms: Platforms
    log: LogSink = field(default_factory=WarningLog)
    settings: ResolverSettings = field(default_factory=ResolverSettings)

    def __post_init__(self) -> None:
        self.cwd = Path(self.cwd)
        self.platforms = _as_registry(self.platforms)

    def dependency_folder(self, package_name: str) -> Path:
        if not isinstance(package_name, str) or not package_name.strip():
            raise ValueError("package_name must be a non-empty string")
        # nome absoluto continua relativo a node_modules
        relative = package_name.lstrip("/\\")
        if not relative.strip():
            raise ValueError(f"invalid package_name: {package_name!r}")
        return self.cwd / self.settings.modules_dir / relative

    def get_project_config(self) -> Outcome:
        """Resolve a configuração do projeto em `cwd`."""
        folder = self.cwd
        return self._resolve(
            folder,
            build=lambda builder: builder.default_project,
            not_found=lambda: project_manifest_not_found(
                folder=folder,
                manifest=self.settings.manifest_filename,
            ),
        )

    def get_dependency_config(self, package_name: str) -> Outcome:
        """Resolve a configuração da dependência `package_name` em `node_modules/`."""
        folder = self.dependency_folder(package_name)
        return self._resolve(
            folder,
            build=lambda builder: builder.default_dependency,
            not_found=lambda: dependency_manifest_not_found(
                package_name=package_name,
                folder=folder,
                manifest=self.settings.manifest_filename,
            ),
        )

    def resolve(self, package_name: Optional[str] = None) -> Outcome:
        """Projeto quando `package_name` é omitido; dependência caso contrário."""
        if package_name is None:
            return self.get_project_config()
        return self.get_dependency_config(package_name)

    def _resolve(
        self,
        folder: Path,
        *,
        build: Callable[[PlatformBuilder], Callable[[Path, Mapping[str, Any]], Any]],
        not_found: Callable[[], ErrorPayload],
    ) -> Outcome:
        overrides = read_manifest_config(folder, settings=self.settings)

        if overrides is None:
            payload = not_found()
            record = self.log.warn(
                payload.type,
                payload.message,
                folder=payload.details["folder"],
                package_name=payload.details["package_name"],
            )
            return Missing(folder=folder, payload=payload, log_record=record)

        config = {
            name: build(builder)(folder, overrides.get(name) or {})
            for name, builder in self.platforms.items()
        }
        return Found(folder=folder, config=config, config_hash=_hash_or_none(config))


def get_project_config(
    *,
    cwd: Union[str, Path],
    platforms: Platforms,
    log: Optional[LogSink] = None,
    settings: Optional[ResolverSettings] = None,
) -> Outcome:
    resolver = ConfigResolver(
        cwd=cwd,
        platforms=platforms,
        log=log if log is not None else WarningLog(),
        settings=settings or ResolverSettings(),
    )
    return resolver.get_project_config()


def get_dependency_config(
    package_name: str,
    *,
    cwd: Union[str, Path],
    platforms: Platforms,
    log: Optional[LogSink] = None,
    settings: Optional[ResolverSettings] = None,
) -> Outcome:
    resolver = ConfigResolver(
        cwd=cwd,
        platforms=platforms,
        log=log if log is not None else WarningLog(),
        settings=settings or ResolverSettings(),
    )
    return resolver.get_dependency_config(package_name)
