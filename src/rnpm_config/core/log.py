# src/rnpm_config/core/log.py
"""
Coleta estruturada de warnings do rnpm-config.

Logs não são strings livres: cada warning vira um evento com código
estável, mensagem, nível e timestamp UTC. O resolver depende apenas do
protocolo `LogSink`, de modo que qualquer destino compatível (ex.: um
adaptador para a UI de uma CLI) pode ser injetado.

Invariantes:
    - Cada chamada a `warn` adiciona exatamente um evento
    - Warnings são agrupados por código, preservando a ordem de inserção
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Destino de warnings aceito pelo resolver."""

    def warn(self, code: str, message: str, **extra: Any) -> Any:
        ...


@dataclass
class WarningLog:
    """
    Sink padrão: acumula warnings como eventos estruturados em memória.

    `events` guarda os eventos na ordem de emissão; `warnings` agrupa
    as mensagens por código.
    """

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def warn(self, code: str, message: str, **extra: Any) -> Dict[str, Any]:
        event = {
            "level": "WARN",
            "code": code,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

        if code not in self.warnings:
            self.warnings[code] = []
        self.warnings[code].append(message)

        return event

    def count(self, code: str) -> int:
        return len(self.warnings.get(code, []))
