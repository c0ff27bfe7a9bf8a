"""Runtime configuration models for the benchmark runner."""

from __future__ import annotations

import logging
from fractions import Fraction
from pathlib import Path
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, RootModel, field_validator

Metric = Literal["jaro", "jaro_winkler"]


class BenchmarkSettings(BaseModel):
    iterations: int = Field(default=1000, ge=1)
    tolerance: float = Field(default=1e-9, gt=0)
    metrics: List[Metric] = Field(default_factory=lambda: ["jaro", "jaro_winkler"])
    corpus_path: Optional[Path] = None


class LoggingSettings(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class RuntimeConfig(BaseModel):
    metadata: dict = Field(default_factory=dict)
    benchmark: BenchmarkSettings = Field(default_factory=BenchmarkSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class ReferencePair(BaseModel):
    """A published string pair with its expected scores.

    Expected values may be given as numbers or as exact fractions such as
    ``"32/33"``.
    """

    a: str
    b: str
    jaro: Optional[float] = None
    jaro_winkler: Optional[float] = None
    source: Optional[str] = None

    @field_validator("jaro", "jaro_winkler", mode="before")
    @classmethod
    def _parse_fraction(cls, value: Union[str, float, int, None]) -> Optional[float]:
        if isinstance(value, str):
            try:
                return float(Fraction(value.replace(" ", "")))
            except (ValueError, ZeroDivisionError) as exc:
                raise ValueError(f"not a fraction: {value!r}") from exc
        return value

    @field_validator("jaro", "jaro_winkler")
    @classmethod
    def _in_unit_range(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not 0.0 <= value <= 1.0:
            raise ValueError(f"score {value} outside [0, 1]")
        return value


class ReferenceCorpus(RootModel[List[ReferencePair]]):
    root: List[ReferencePair]

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def expecting(self, metric: str) -> List[ReferencePair]:
        """Pairs that carry an expected value for ``metric``."""
        return [pair for pair in self.root if getattr(pair, metric) is not None]
