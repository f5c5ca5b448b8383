"""Runtime configuration read from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

DB_FILENAME = "cadence_lift.db"


@dataclass
class Settings:
    """cadence-lift settings."""

    data_dir: Path = DATA_DIR
    log_level: str = "WARNING"
    default_duration: int = 40
    seed: int | None = None  # Fixed seed for reproducible exercise selection

    @staticmethod
    def from_env() -> "Settings":
        seed = os.getenv("CADENCE_LIFT_SEED")
        data_dir = os.getenv("CADENCE_LIFT_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else DATA_DIR,
            log_level=(os.getenv("CADENCE_LIFT_LOG_LEVEL") or "WARNING").upper(),
            default_duration=int(os.getenv("CADENCE_LIFT_DEFAULT_DURATION") or 40),
            seed=int(seed) if seed else None,
        )


def get_settings() -> Settings:
    """Settings for the current process."""
    return Settings.from_env()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for CLI and server runs."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
