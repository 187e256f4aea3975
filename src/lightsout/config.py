"""Session configuration for a Lights Out game."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from lightsout.constants import DEFAULT_CHANCE_LIGHT_STARTS_ON, DEFAULT_COLS, DEFAULT_ROWS


@dataclass
class GameConfig:
    """Board dimensions and seeding parameters for one game session.

    Attributes:
        rows: Number of board rows
        cols: Number of board columns
        chance_light_starts_on: Probability each cell starts lit, in [0, 1]
        seed: Optional seed for the session random source
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    chance_light_starts_on: float = DEFAULT_CHANCE_LIGHT_STARTS_ON
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.rows < 1:
            raise ValueError(f"rows must be >= 1, got {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols}")
        if not 0.0 <= self.chance_light_starts_on <= 1.0:
            raise ValueError(
                f"chance_light_starts_on must be in [0, 1], got {self.chance_light_starts_on}"
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "GameConfig":
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "GameConfig":
        """Create config from an argparse namespace, skipping unset options."""
        known_fields = {f.name for f in fields(cls)}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)
