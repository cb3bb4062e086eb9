# src/rnpm_config/core/settings/merge.py
"""
Merge canônico de settings.

Os settings são um mapa plano de chaves conhecidas. O override substitui
apenas as chaves que declara, e cada valor deve manter o tipo do default.

Política de merge:
    - chave conhecida, mesmo tipo → sobrescrita direta
    - chave desconhecida          → UnknownSettingError
    - tipo diferente do default   → SettingsTypeConflictError

O merge é puramente funcional: nenhum input é mutado.
"""

from typing import Any, Dict

from .errors import SettingsTypeConflictError, UnknownSettingError


def merge_settings(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Aplica `override` sobre `base`, chave a chave.

    Invariantes:
        - O retorno é sempre um novo dicionário com as chaves de `base`
        - Chaves ausentes no override preservam o valor de `base`

    Raises:
        UnknownSettingError: Se o override declarar chaves fora de `base`.
        SettingsTypeConflictError: Se um valor divergir do tipo do default.
    """
    if not isinstance(override, dict):
        raise SettingsTypeConflictError(
            f"Override de settings deve ser dict, recebido: {type(override).__name__}"
        )

    unknown = sorted(set(override) - set(base))
    if unknown:
        raise UnknownSettingError(f"Chaves de settings desconhecidas: {', '.join(unknown)}")

    result = dict(base)
    for key, value in override.items():
        if type(value) is not type(base[key]):
            raise SettingsTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base[key]).__name__} vs {type(value).__name__}"
            )
        result[key] = value

    return result
