# src/rnpm_config/core/settings/loader.py
"""
Loader canônico de settings do rnpm-config.

Os settings efetivos são resolvidos a partir de:
    - defaults embutidos (`DEFAULT_SETTINGS`, sempre presentes)
    - um arquivo opcional de overrides (YAML ou JSON)

Responsabilidades do módulo:
    - Carregar o arquivo de overrides em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz, chaves conhecidas)
    - Resolver os settings finais via merge plano e tipado
    - Expor o resultado como `ResolverSettings` imutável

Invariantes:
    - Os defaults nunca são mutados
    - A mesma entrada sempre produz os mesmos settings
    - Todo valor final é uma string não vazia

Limites explícitos:
    - Não lê manifests de pacotes
    - Não procura arquivos de settings implicitamente
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml  # PyYAML

from .errors import (
    InvalidSettingValueError,
    InvalidSettingsRootError,
    UnsupportedSettingsFormatError,
)
from .merge import merge_settings


DEFAULT_SETTINGS: Dict[str, Any] = {
    "manifest_filename": "package.json",
    "reserved_key": "rnpm",
    "modules_dir": "node_modules",
}


@dataclass(frozen=True)
class ResolverSettings:
    """
    Parâmetros efetivos usados pela leitura de manifests e pelo resolver.

    Campos:
        - manifest_filename: nome do manifest dentro de cada pasta de pacote
        - reserved_key: chave do manifest que contém a configuração da ferramenta
        - modules_dir: diretório (relativo ao cwd) onde vivem as dependências
    """

    manifest_filename: str = DEFAULT_SETTINGS["manifest_filename"]
    reserved_key: str = DEFAULT_SETTINGS["reserved_key"]
    modules_dir: str = DEFAULT_SETTINGS["modules_dir"]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        UnsupportedSettingsFormatError: Se a extensão não for suportada.
        InvalidSettingsRootError: Se o conteúdo raiz não for um dicionário.
    """
    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedSettingsFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidSettingsRootError(
            f"Settings root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _validate(effective: Dict[str, Any]) -> None:
    for key, value in effective.items():
        if not isinstance(value, str) or not value.strip():
            raise InvalidSettingValueError(
                f"Setting '{key}' deve ser string não vazia, recebido: {value!r}"
            )


def load_settings(*, path: Optional[Union[str, Path]] = None) -> ResolverSettings:
    """
    Carrega e resolve os settings efetivos da ferramenta.

    Política de resolução:
        - Os defaults embutidos são sempre a base
        - O arquivo de overrides é opcional; se `path` não existir,
          os defaults são usados integralmente
        - Quando presente, o override tem prioridade sobre os defaults

    Args:
        path (Optional[str | Path]): Caminho opcional para o arquivo de overrides.

    Returns:
        ResolverSettings: Settings resolvidos e imutáveis.

    Raises:
        UnsupportedSettingsFormatError: Se o formato do arquivo não for suportado.
        InvalidSettingsRootError: Se o conteúdo não for um dicionário.
        SettingsTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        UnknownSettingError: Se o override declarar chaves desconhecidas.
        InvalidSettingValueError: Se algum valor final não for string não vazia.
    """

    effective = dict(DEFAULT_SETTINGS)

    if path is not None:
        settings_file = Path(path)
        if settings_file.exists():
            effective = merge_settings(DEFAULT_SETTINGS, _load_file(settings_file))

    _validate(effective)
    return ResolverSettings(**effective)
