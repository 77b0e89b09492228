"""Package loading into native (STU3) models."""

from src.loaders.knowledge import (
    KnowledgeProvider,
    NullKnowledgeProvider,
    PackageKnowledgeProvider,
)
from src.loaders.loader import (
    LoaderConfig,
    ResourceLoader,
    SkippedResource,
    loader_factory,
)
from src.loaders.package import FolderPackage, MemoryPackage, PackageDescriptor

__all__ = [
    "FolderPackage",
    "KnowledgeProvider",
    "LoaderConfig",
    "MemoryPackage",
    "NullKnowledgeProvider",
    "PackageDescriptor",
    "PackageKnowledgeProvider",
    "ResourceLoader",
    "SkippedResource",
    "loader_factory",
]
