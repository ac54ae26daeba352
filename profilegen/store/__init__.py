"""Profile storage implementations."""

from profilegen.store.base import ProfileStore
from profilegen.store.yaml_store import YamlProfileStore

__all__ = ["ProfileStore", "YamlProfileStore"]
