from __future__ import annotations

"""Character-class configuration models and YAML loading."""

from collections import abc
from enum import Enum
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

UINT32_MAX = 2**32 - 1

DEFAULT_BLACKLIST_CHARS = ";:,'"
DEFAULT_WHITELIST_CHARS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz1234567890&=/_-?. "
)

CharSetInput = Union[str, bytes, Iterable[Union[str, int]], None]


class CharClassMode(str, Enum):
    """Which classification rule decides whether an edit is penalized."""

    NONE = "none"
    BLACKLIST = "blacklist"
    WHITELIST = "whitelist"
    BOTH = "both"


def char_units(chars: CharSetInput) -> FrozenSet[int]:
    """Normalise a character set description into a set of integer code units.

    Strings contribute one unit per code point, bytes one unit per byte, and
    other iterables may mix one-character strings with non-negative ints.
    """

    if chars is None:
        return frozenset()
    if isinstance(chars, str):
        return frozenset(ord(ch) for ch in chars)
    if isinstance(chars, (bytes, bytearray)):
        return frozenset(chars)
    if not isinstance(chars, abc.Iterable):
        raise ValueError(f"Character set must be a string or an iterable, got {chars!r}")
    units = set()
    for item in chars:
        if isinstance(item, str):
            if len(item) != 1:
                raise ValueError(f"Character set members must be single characters, got {item!r}")
            units.add(ord(item))
        elif isinstance(item, int) and not isinstance(item, bool):
            if item < 0:
                raise ValueError(f"Code units must be non-negative, got {item}")
            units.add(item)
        else:
            raise ValueError(f"Unsupported character set member {item!r}")
    return frozenset(units)


def units_to_text(units: Iterable[int]) -> str:
    """Render a set of code units as a sorted string for display."""

    return "".join(chr(unit) for unit in sorted(units))


class CharClassConfig(BaseModel):
    """Immutable weighting configuration shared by any number of distance calls."""

    model_config = ConfigDict(frozen=True)

    mode: CharClassMode = CharClassMode.NONE
    blacklist_chars: FrozenSet[int] = Field(
        default_factory=lambda: char_units(DEFAULT_BLACKLIST_CHARS)
    )
    whitelist_chars: FrozenSet[int] = Field(
        default_factory=lambda: char_units(DEFAULT_WHITELIST_CHARS)
    )
    penalty: int = Field(default=2, ge=1)
    max_length: int = Field(default=UINT32_MAX, ge=0, le=UINT32_MAX)

    @field_validator("mode", mode="before")
    @classmethod
    def _lowercase_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("blacklist_chars", "whitelist_chars", mode="before")
    @classmethod
    def _normalise_chars(cls, value: Any) -> FrozenSet[int]:
        return char_units(value)

    def describe(self) -> dict[str, str]:
        """Human-readable view used by the CLI."""

        return {
            "mode": self.mode.value,
            "blacklist_chars": units_to_text(self.blacklist_chars),
            "whitelist_chars": units_to_text(self.whitelist_chars),
            "penalty": str(self.penalty),
            "max_length": str(self.max_length),
        }


class ConfigNotFoundError(FileNotFoundError):
    """Raised when a configuration file cannot be located."""


def load_config(path: Path) -> CharClassConfig:
    """Load a configuration from a YAML mapping."""

    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(f"Config file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config in {path} must be a mapping, got {type(data).__name__}")
    try:
        return CharClassConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config data in {path}: {exc}") from exc


def config_from_options(
    base: Optional[CharClassConfig] = None,
    *,
    mode: Optional[Union[CharClassMode, str]] = None,
    blacklist: CharSetInput = None,
    whitelist: CharSetInput = None,
    penalty: Optional[int] = None,
    max_length: Optional[int] = None,
) -> CharClassConfig:
    """Layer explicitly given options over *base* and validate the result."""

    data: dict[str, Any] = (base or CharClassConfig()).model_dump()
    overrides = {
        "mode": mode,
        "blacklist_chars": blacklist,
        "whitelist_chars": whitelist,
        "penalty": penalty,
        "max_length": max_length,
    }
    data.update({key: value for key, value in overrides.items() if value is not None})
    return CharClassConfig.model_validate(data)
