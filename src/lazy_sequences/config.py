"""Configuration management for the application."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class SequenceConfig:
    """Parameters for the dice-roll demonstration run."""

    seed: Optional[int] = 12345
    dice_sides: int = 6
    dice_sentinel: int = 6
    take_limit: int = 5
    block_size: int = 1000
    output_file: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.dice_sides <= 0:
            raise ValueError("dice_sides must be positive")
        if not 1 <= self.dice_sentinel <= self.dice_sides:
            raise ValueError("dice_sentinel must be a face of the die")
        if self.take_limit < 0:
            raise ValueError("take_limit must not be negative")
        if self.block_size <= 0:
            raise ValueError("block_size must be positive")

    @classmethod
    def from_env(cls) -> "SequenceConfig":
        """Load configuration from environment variables.

        An empty SEQUENCE_SEED means an unseeded, non-reproducible run.
        """
        seed = os.getenv("SEQUENCE_SEED", "12345")
        output_file = os.getenv("OUTPUT_FILE") or None
        return cls(
            seed=int(seed) if seed else None,
            dice_sides=int(os.getenv("DICE_SIDES", "6")),
            dice_sentinel=int(os.getenv("DICE_SENTINEL", "6")),
            take_limit=int(os.getenv("TAKE_LIMIT", "5")),
            block_size=int(os.getenv("BLOCK_SIZE", "1000")),
            output_file=Path(output_file) if output_file else None,
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )


def get_sequence_config() -> SequenceConfig:
    """Get sequence configuration."""
    return SequenceConfig.from_env()
