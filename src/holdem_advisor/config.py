"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


# Simulation
DEFAULT_ITERATIONS = int(os.getenv("HOLDEM_DEFAULT_ITERATIONS", "3000"))
# Floor applied to requests coming from the CLI / web form, not to simulate() itself
MIN_ITERATIONS = int(os.getenv("HOLDEM_MIN_ITERATIONS", "500"))
ITERATION_CHOICES = [1500, 3000, 6000]
DEFAULT_OPPONENTS = int(os.getenv("HOLDEM_DEFAULT_OPPONENTS", "1"))
MIN_OPPONENTS = 1
MAX_OPPONENTS = 8

# Seed for reproducible runs; unset means a fresh unseeded RNG per call
SEED = _optional_int("HOLDEM_SEED")

# Table defaults
DEFAULT_POSITION = os.getenv("HOLDEM_DEFAULT_POSITION", "middle")
DEFAULT_STACK_BB = float(os.getenv("HOLDEM_DEFAULT_STACK_BB", "100"))
DEFAULT_POT = float(os.getenv("HOLDEM_DEFAULT_POT", "100"))
DEFAULT_TO_CALL = float(os.getenv("HOLDEM_DEFAULT_TO_CALL", "20"))

# Logging
LOG_LEVEL = os.getenv("HOLDEM_LOG_LEVEL", "WARNING").upper()
