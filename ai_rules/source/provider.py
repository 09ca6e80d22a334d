from abc import ABC, abstractmethod
from pathlib import Path


class ISourceProvider(ABC):
    """Supplies an already-resolved source root for one run."""

    @abstractmethod
    def resolve(self) -> Path:
        raise NotImplementedError


class LocalSourceProvider(ISourceProvider):
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self) -> Path:
        return self._root.expanduser().resolve()
