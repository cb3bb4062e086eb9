# src/rnpm_config/core/manifest/reader.py
"""
Leitor canônico de manifest de pacote.

Dado o diretório de um pacote, este módulo localiza o manifest
(`package.json` por padrão), faz o parse do JSON e devolve o bloco
guardado sob a chave reservada (`rnpm` por padrão).

Política de leitura:
    - manifest ausente        → None (sentinela distinto de `{}`)
    - chave reservada ausente → {} (não é erro)
    - chave sem objeto JSON   → {} (null, false, string, número...)
    - raiz sem objeto JSON    → {}
    - BOM UTF-8 inicial       → ignorado
    - JSON inválido           → ManifestParseError (sempre propaga)

Decisões arquiteturais:
    - A existência do arquivo é verificada antes da leitura
    - Cada chamada lê o arquivo novamente; não há cache
    - O conteúdo do bloco reservado não é validado além do tipo

Limites explícitos:
    - Não aplica defaults de plataforma
    - Não emite warnings (isso é responsabilidade do resolver)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..settings import ResolverSettings
from .errors import ManifestParseError


def manifest_path(folder: Union[str, Path], *, settings: Optional[ResolverSettings] = None) -> Path:
    """Caminho do manifest dentro de `folder`."""
    settings = settings or ResolverSettings()
    return Path(folder) / settings.manifest_filename


def read_manifest_config(
    folder: Union[str, Path],
    *,
    settings: Optional[ResolverSettings] = None,
) -> Optional[Dict[str, Any]]:
    """
    Lê o bloco reservado do manifest de `folder`.

    Args:
        folder (str | Path): Diretório do pacote (absoluto ou relativo).
        settings (Optional[ResolverSettings]): Nome do manifest e chave
            reservada; defaults quando omitido.

    Returns:
        Optional[Dict[str, Any]]: O bloco reservado, `{}` quando a chave
        não existe ou não contém um objeto, ou `None` quando o manifest não existe.

    Raises:
        ManifestParseError: Se o manifest não for JSON válido.
    """
    settings = settings or ResolverSettings()
    path = manifest_path(folder, settings=settings)

    if not path.is_file():
        return None

    try:
        with path.open("r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except ValueError as e:
        raise ManifestParseError(
            f"Falha ao fazer parse de {path}: {e}",
            path=path,
            cause=e,
        ) from e

    if not isinstance(data, dict):
        return {}

    block = data.get(settings.reserved_key)
    if not isinstance(block, dict):
        return {}

    return block
