# src/rnpm_config/core/settings/hashing.py
"""
Hash canônico de configuração.

O resolver anexa este hash a cada `Found`, permitindo que o chamador
detecte se a configuração resolvida de um projeto ou dependência mudou
entre duas execuções (ex.: para decidir se precisa religar um pacote
nativo) sem comparar a estrutura opaca devolvida pelos builders.

Política:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256, retornado em hexadecimal (64 caracteres)
"""

import hashlib
import json
from typing import Any, Dict


def _canonical_bytes(config: Dict[str, Any]) -> bytes:
    text = json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return text.encode("utf-8")


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 da serialização JSON canônica de `config`.

    Configurações resolvidas equivalentes produzem o mesmo hash,
    independentemente da ordem em que as plataformas ou as chaves
    foram montadas pelos builders.

    Raises:
        TypeError: Se `config` não for um dicionário ou contiver valores
            não serializáveis em JSON.
        ValueError: Se `config` contiver referências circulares.
    """
    if not isinstance(config, dict):
        raise TypeError(f"Config para hashing deve ser dict, recebido: {type(config).__name__}")

    return hashlib.sha256(_canonical_bytes(config)).hexdigest()
