# tests/conftest.py
"""
Fixtures compartilhados para testes do rnpm-config.

Este módulo define fixtures reutilizáveis que fornecem:
- builders de plataforma falsos que registram cada chamada
- um registro de plataformas na ordem canônica (ios, android)
- um escritor de `package.json` em diretórios temporários

Decisões arquiteturais:
    - Builders falsos utilizam duck typing em vez de herança
    - O retorno dos builders é um dict simples, serializável em JSON,
      contendo a pasta e os overrides recebidos
    - Todo I/O acontece sob `tmp_path`

Invariantes:
    - Nenhuma fixture lê o diretório de trabalho do processo
    - Cada teste recebe builders com histórico de chamadas vazio

Limites explícitos:
    - Não implementa defaults reais de iOS ou Android
"""

import json
from pathlib import Path

import pytest


class RecordingBuilder:
    """
    Builder de plataforma falso que registra os argumentos recebidos.

    Cada chamada é anotada em `calls` como `(kind, folder, overrides)`
    e devolve um dict com os mesmos dados, o que permite comparar
    a configuração resolvida com o que os builders receberam.
    """

    def __init__(self, platform: str):
        self.platform = platform
        self.calls = []

    def _record(self, kind, folder, overrides):
        self.calls.append((kind, Path(folder), dict(overrides)))
        return {
            "platform": self.platform,
            "kind": kind,
            "folder": str(folder),
            "overrides": dict(overrides),
        }

    def default_project(self, folder, overrides):
        return self._record("project", folder, overrides)

    def default_dependency(self, folder, overrides):
        return self._record("dependency", folder, overrides)


@pytest.fixture
def ios_builder() -> RecordingBuilder:
    return RecordingBuilder("ios")


@pytest.fixture
def android_builder() -> RecordingBuilder:
    return RecordingBuilder("android")


@pytest.fixture
def platforms(ios_builder, android_builder):
    """Registro padrão de plataformas com builders falsos."""
    from rnpm_config.core.platforms import platform_registry

    return platform_registry(ios=ios_builder, android=android_builder)


@pytest.fixture
def write_manifest():
    """
    Escreve um `package.json` em uma pasta, criando-a se necessário.

    Aceita um dict (serializado como JSON) ou uma string crua, para
    permitir testes com JSON inválido.
    """

    def _write(folder: Path, content) -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / "package.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Diretório de projeto vazio (sem manifest)."""
    root = tmp_path / "MyApp"
    root.mkdir()
    return root
