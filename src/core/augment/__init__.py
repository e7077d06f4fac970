"""Synonym augmentation: lookup tables, permutation engine, and public facade."""

from .facade import Augment
from .normalizer import DataNormalizer
from .permutation import PermutationEngine
from .providers import EntityValueProvider

__all__ = ["Augment", "DataNormalizer", "EntityValueProvider", "PermutationEngine"]
