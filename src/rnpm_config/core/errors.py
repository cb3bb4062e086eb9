"""
rnpm-config — Estruturas canônicas de erro

Este módulo define o payload canônico usado para descrever situações
não fatais que o resolver precisa comunicar ao chamador, como a ausência
de `package.json` numa pasta de projeto ou de dependência.

Payloads são:

- explícitos
- serializáveis
- acionáveis (carregam uma dica de correção)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do rnpm-config.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao usuário
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo de códigos
# ---------------------------------------------------------------------------

EPACKAGEJSON = "EPACKAGEJSON"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def project_manifest_not_found(
    *,
    folder: Union[str, Path],
    manifest: str = "package.json",
    hint: str = "Execute o comando na raiz de um projeto React Native.",
) -> ErrorPayload:
    return ErrorPayload(
        type=EPACKAGEJSON,
        message=f"{manifest} not found. Are you sure it's a React Native project?",
        details={
            "folder": str(folder),
            "manifest": manifest,
            "package_name": None,
        },
        hint=hint,
    )


def dependency_manifest_not_found(
    *,
    package_name: str,
    folder: Union[str, Path],
    manifest: str = "package.json",
    hint: str = "Try running npm prune, or reinstall the dependency.",
) -> ErrorPayload:
    return ErrorPayload(
        type=EPACKAGEJSON,
        message=f"{manifest} not found for {package_name}. Try running npm prune",
        details={
            "folder": str(folder),
            "manifest": manifest,
            "package_name": package_name,
        },
        hint=hint,
    )
