"""JSON fixtures of known roots, used for benchmarks and regression tests.

Each file holds one record ``{exponent, basement, power, is_exact}``.
Big integers are stored as hexadecimal strings: they are not bounded by the
interpreter's limit on decimal conversions and stay readable by any JSON tool.
"""

from __future__ import annotations

import random
from pathlib import Path

from pydantic import BaseModel, field_serializer, field_validator, model_validator

from .logger import get_logger
from .random_integers import random_digits

logger = get_logger("fixtures")


class RootFixture(BaseModel):
    exponent: int
    basement: int
    power: int
    is_exact: bool = True

    @field_validator("basement", "power", mode="before")
    @classmethod
    def parse_hex(cls, v: object) -> object:
        if isinstance(v, str):
            return int(v, 16)
        return v

    @field_serializer("basement", "power")
    def serialize_hex(self, v: int) -> str:
        return hex(v)

    @model_validator(mode="after")
    def validate_bounds(self) -> RootFixture:
        if self.exponent < 1:
            raise ValueError("exponent must be >= 1")
        if self.basement < 0 or self.power < 0:
            raise ValueError("basement and power must be non-negative")
        return self


def generate_fixture(
    rng: random.Random, exponent: int, basement_length: int
) -> RootFixture:
    """Exact fixture for a random basement of `basement_length` decimal digits."""
    basement = random_digits(rng, basement_length)
    return RootFixture(
        exponent=exponent, basement=basement, power=basement**exponent, is_exact=True
    )


def write_fixtures(
    directory: Path, prefix: str, fixtures: list[RootFixture]
) -> list[Path]:
    """Writes one `<prefix><index>.json` file per fixture."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for index, fixture in enumerate(fixtures):
        path = directory / f"{prefix}{index}.json"
        path.write_text(fixture.model_dump_json(indent=2), encoding="utf-8")
        paths.append(path)
    logger.debug("Wrote %d fixtures to %s", len(paths), directory)
    return paths


def load_fixtures(directory: Path, pattern: str = "*.json") -> list[RootFixture]:
    """Reads every fixture matching `pattern`, sorted by file name."""
    paths = sorted(directory.glob(pattern))
    logger.debug("Loading %d fixtures from %s", len(paths), directory)
    return [
        RootFixture.model_validate_json(path.read_text(encoding="utf-8"))
        for path in paths
    ]
