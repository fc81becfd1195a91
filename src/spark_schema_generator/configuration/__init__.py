"""Configuration domain exports."""

from .loader import MISSING_MODEL_MESSAGE, ConfigurationError, load_generation_settings
from .runtime_settings import GenerationSettings

__all__ = [
    "GenerationSettings",
    "ConfigurationError",
    "MISSING_MODEL_MESSAGE",
    "load_generation_settings",
]
