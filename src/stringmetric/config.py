from __future__ import annotations

"""Settings, pair-file schemas, and input preparation for batch comparisons."""

import unicodedata
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from .utils import jsonio

NormalizationForm = Literal["NFC", "NFD", "NFKC", "NFKD"]


class BatchSettings(BaseModel):
    """Options applied to every pair of a batch run."""

    normalization: Optional[NormalizationForm] = None
    max_length: Optional[int] = Field(default=None, gt=0)
    include_osa: bool = False

    @field_validator("normalization", mode="before")
    @classmethod
    def _upper_form(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value


class PairModel(BaseModel):
    """One source/target pair read from a JSONL pair file."""

    id: str
    source: str
    target: str

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class SettingsNotFoundError(FileNotFoundError):
    """Raised when a settings file cannot be located."""


class PairFileNotFoundError(FileNotFoundError):
    """Raised when a pair file cannot be located."""


class InputTooLongError(ValueError):
    """Raised when a text exceeds the configured ``max_length``."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input of {length} characters exceeds the limit of {limit}"
        )


def load_settings(path: Path) -> BatchSettings:
    """Load batch settings from a YAML file."""

    if not path.exists():
        raise SettingsNotFoundError(f"Settings file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid settings in {path}: {exc}") from exc
    try:
        return BatchSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {path}: {exc}") from exc


def load_pairs(path: Path) -> List[PairModel]:
    """Read every pair of a JSONL pair file.

    Entries without an ``id`` are numbered by their line in the file.
    """

    if not path.exists():
        raise PairFileNotFoundError(f"Pair file not found at {path}")
    pairs: List[PairModel] = []
    for line_number, entry in jsonio.iter_jsonl(path):
        if isinstance(entry, dict) and "id" not in entry:
            entry = {**entry, "id": str(line_number)}
        try:
            pairs.append(PairModel.model_validate(entry))
        except ValidationError as exc:
            raise ValueError(
                f"Invalid pair on line {line_number} of {path}: {exc}"
            ) from exc
    logger.debug("Loaded {} pairs from {}", len(pairs), path)
    return pairs


def prepare_text(text: str, settings: BatchSettings) -> str:
    """Normalize *text* and enforce the length bound from *settings*.

    The length check runs after normalization, since compatibility forms
    can change the number of codepoints.
    """

    if settings.normalization is not None:
        text = unicodedata.normalize(settings.normalization, text)
    if settings.max_length is not None and len(text) > settings.max_length:
        raise InputTooLongError(len(text), settings.max_length)
    return text


def select_pairs(
    pairs: List[PairModel], *, limit: Optional[int] = None
) -> List[PairModel]:
    """Take the first *limit* pairs, or all of them."""

    if limit is not None:
        return pairs[: max(limit, 0)]
    return list(pairs)
