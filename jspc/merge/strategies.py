"""Strategies for splicing a generated fragment into a descriptor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Type

from jspc.constants import DEFAULT_INJECT_STRING
from jspc.exceptions import ConfigurationError, MissingMarkerError
from jspc.types import WebDescriptor, WebFragment


class MergeStrategy(ABC):
    """Shared contract for descriptor merge implementations."""

    name: str = "unknown"

    @abstractmethod
    def merge(self, descriptor: WebDescriptor, fragment: WebFragment) -> str:
        """Return the descriptor text with the fragment merged in."""


class MarkerInjectionStrategy(MergeStrategy):
    """Textual injection at every occurrence of the descriptor's marker.

    When the marker is the default closing tag the tag is appended once
    more so the document stays closed.
    """

    name = "marker"

    def merge(self, descriptor: WebDescriptor, fragment: WebFragment) -> str:
        marker = descriptor.marker
        if not marker:
            raise ConfigurationError("Inject string must not be empty")
        if marker not in descriptor.text:
            raise MissingMarkerError(marker, descriptor.path)
        output = descriptor.text.replace(marker, fragment.text)
        if marker == DEFAULT_INJECT_STRING:
            output += DEFAULT_INJECT_STRING
        return output


MERGE_STRATEGIES: Dict[str, Type[MergeStrategy]] = {
    MarkerInjectionStrategy.name: MarkerInjectionStrategy,
}


def register_merge_strategy(name: str, strategy_cls: Type[MergeStrategy]) -> None:
    MERGE_STRATEGIES[name.lower()] = strategy_cls


def load_merge_strategy(name: str) -> MergeStrategy:
    strategy_cls = MERGE_STRATEGIES.get(name.lower())
    if strategy_cls is None:
        raise ConfigurationError(f"Unknown merge strategy '{name}'")
    return strategy_cls()


__all__ = [
    "MERGE_STRATEGIES",
    "MarkerInjectionStrategy",
    "MergeStrategy",
    "load_merge_strategy",
    "register_merge_strategy",
]
