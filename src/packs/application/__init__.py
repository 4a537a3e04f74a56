"""Application layer - use cases and orchestration."""

from .commands import PackManifestCommand
from .dtos import PackingOutput

__all__ = [
    "PackManifestCommand",
    "PackingOutput",
]
