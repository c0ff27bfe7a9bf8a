"""Jaro and Jaro-Winkler string similarity for record linkage."""

from .utils.errors import ConfigError, SequenceTypeError, SimilarityError
from .utils.similarity import MAX_PREFIX, PREFIX_WEIGHT, common_prefix_length, jaro, jaro_winkler

__version__ = "0.1.0"

__all__ = [
    "jaro",
    "jaro_winkler",
    "common_prefix_length",
    "PREFIX_WEIGHT",
    "MAX_PREFIX",
    "SimilarityError",
    "SequenceTypeError",
    "ConfigError",
]
