"""Character-class weighted Levenshtein distance."""
from importlib.metadata import version, PackageNotFoundError

from .config import (
    DEFAULT_BLACKLIST_CHARS,
    DEFAULT_WHITELIST_CHARS,
    UINT32_MAX,
    CharClassConfig,
    CharClassMode,
    ConfigNotFoundError,
    config_from_options,
    load_config,
)
from .engine import (
    LengthOverflowError,
    WeightedLevenshtein,
    distance,
    levenshtein,
    normalized_distance,
)

try:
    __version__ = version("charclass-leven")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "DEFAULT_BLACKLIST_CHARS",
    "DEFAULT_WHITELIST_CHARS",
    "UINT32_MAX",
    "CharClassConfig",
    "CharClassMode",
    "ConfigNotFoundError",
    "config_from_options",
    "load_config",
    "LengthOverflowError",
    "WeightedLevenshtein",
    "distance",
    "levenshtein",
    "normalized_distance",
]
