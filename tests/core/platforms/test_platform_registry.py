# tests/core/platforms/test_platform_registry.py
"""
Testes do registro de builders de plataforma.

Os testes asseguram que:
- a ordem de registro é preservada
- nomes duplicados são rejeitados
- nomes vazios e builders incompletos são rejeitados
"""

import pytest

try:
    from rnpm_config.core.platforms import (
        DuplicatePlatformError,
        PlatformBuilder,
        PlatformRegistry,
        platform_registry,
    )
except Exception as e:  # noqa: BLE001
    PlatformRegistry = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing PlatformRegistry. Implement:\n"
            "- src/rnpm_config/core/platforms/registry.py (PlatformRegistry, DuplicatePlatformError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


class _OnlyProject:
    def default_project(self, folder, overrides):
        return {}


def test_default_registry_order(platforms, ios_builder, android_builder):
    """
    Verifica que o registro padrão segue a ordem canônica `ios`, `android`.
    """
    _require_imports()
    assert platforms.names() == ["ios", "android"]
    assert platforms.get("ios") is ios_builder
    assert platforms.get("android") is android_builder
    assert len(platforms) == 2


def test_recording_builder_satisfies_protocol(ios_builder):
    _require_imports()
    assert isinstance(ios_builder, PlatformBuilder)


def test_registration_order_is_preserved(ios_builder, android_builder):
    _require_imports()
    registry = PlatformRegistry()
    registry.add("android", android_builder)
    registry.add("ios", ios_builder)
    assert [name for name, _ in registry.items()] == ["android", "ios"]


def test_duplicate_platform_raises(ios_builder):
    """
    Verifica que a mesma plataforma não pode ser registrada duas vezes.

    Invariantes:
        - A duplicidade nunca substitui o builder original
    """
    _require_imports()
    registry = platform_registry(ios=ios_builder, android=ios_builder)
    with pytest.raises(DuplicatePlatformError):
        registry.add("ios", ios_builder)
    assert registry.names() == ["ios", "android"]


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_raises(ios_builder, name):
    _require_imports()
    with pytest.raises(ValueError):
        PlatformRegistry().add(name, ios_builder)


def test_incomplete_builder_raises():
    _require_imports()
    with pytest.raises(TypeError):
        PlatformRegistry().add("ios", _OnlyProject())


def test_unknown_platform_raises_key_error(platforms):
    _require_imports()
    with pytest.raises(KeyError):
        platforms.get("windows")
