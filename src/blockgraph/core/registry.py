"""Registry for dynamically registering and retrieving analyzers and face matchers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from blockgraph.faces.base import BaseFaceMatcher
    from blockgraph.methods.base import BaseAnalyzer


T = TypeVar("T")


class _Registry(Generic[T]):
    """Generic registry for named collaborator implementations."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._registry: dict[str, type[T]] = {}

    def register(self, name: str, cls: type[T]) -> None:
        self._registry[name] = cls

    def get(self, name: str) -> type[T]:
        if name not in self._registry:
            available = ", ".join(self._registry.keys())
            raise KeyError(f"Unknown {self.kind} '{name}'. Available: {available}")
        return self._registry[name]

    def create(self, name: str, **kwargs: Any) -> T:
        """Instantiate the component registered under ``name``."""
        return self.get(name)(**kwargs)

    def list(self) -> list[str]:
        return list(self._registry.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._registry


AnalyzerRegistry: _Registry[BaseAnalyzer] = _Registry("analyzer")
FaceMatcherRegistry: _Registry[BaseFaceMatcher] = _Registry("face matcher")
