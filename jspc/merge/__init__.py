"""Descriptor merge engine."""

from .encoding import declared_encoding, detect_encoding, platform_encoding
from .interpolation import filter_text, interpolate
from .merger import DescriptorMerger, read_descriptor, read_fragment, write_output
from .strategies import (
    MERGE_STRATEGIES,
    MarkerInjectionStrategy,
    MergeStrategy,
    load_merge_strategy,
    register_merge_strategy,
)

__all__ = [
    "DescriptorMerger",
    "MERGE_STRATEGIES",
    "MarkerInjectionStrategy",
    "MergeStrategy",
    "declared_encoding",
    "detect_encoding",
    "filter_text",
    "interpolate",
    "load_merge_strategy",
    "platform_encoding",
    "read_descriptor",
    "read_fragment",
    "register_merge_strategy",
    "write_output",
]
