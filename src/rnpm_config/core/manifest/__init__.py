# src/rnpm_config/core/manifest/__init__.py
"""
Leitura de manifests (`package.json`) e extração da chave reservada.
"""

from .errors import (
    ManifestError,
    ManifestParseError,
)
from .reader import manifest_path, read_manifest_config

__all__ = [
    "ManifestError",
    "ManifestParseError",
    "manifest_path",
    "read_manifest_config",
]
