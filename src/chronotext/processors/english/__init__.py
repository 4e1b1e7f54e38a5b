"""English resources, number handling and culture configuration."""

from .configuration import EnglishCultureConfiguration
from .numbers import EnglishNumberExtractor, EnglishNumberParser

__all__ = ["EnglishCultureConfiguration", "EnglishNumberExtractor", "EnglishNumberParser"]
