"""Erros canônicos da leitura de manifests.

A ausência do manifest não é um erro desta hierarquia: ela é sinalizada
pelo retorno `None` do reader e tratada pelo resolver como `Missing`.
Os erros abaixo representam manifests que existem mas não podem ser usados.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ManifestError(Exception):
    """Erro base da leitura de manifests.

    Carrega sempre o caminho do manifest envolvido.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ManifestParseError(ManifestError):
    """O manifest existe mas não é JSON válido.

    `cause` guarda o erro original do parser (também encadeado via
    `__cause__`).
    """

    def __init__(self, message: str, *, path: Path, cause: Optional[BaseException] = None) -> None:
        super().__init__(message, path=path)
        self.cause = cause

