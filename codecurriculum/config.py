"""
Runtime configuration for codecurriculum.

Settings come from environment variables, optionally seeded from a .env
file via python-dotenv. Real environment variables take precedence over
the file.

  CODECURRICULUM_DATA_DIR   directory with levels.yaml and syllabus.yaml
  CODECURRICULUM_LOG_LEVEL  logging level name (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from codecurriculum.errors import CurriculumConfigError

# Bundled curriculum data (inside the package)
DEFAULT_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_LOG_LEVEL = "INFO"

DATA_DIR_ENV = "CODECURRICULUM_DATA_DIR"
LOG_LEVEL_ENV = "CODECURRICULUM_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional .env file; when omitted python-dotenv searches
            upward from the working directory

    Raises:
        CurriculumConfigError: If the log level name is not recognised
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    raw_dir = os.environ.get(DATA_DIR_ENV)
    data_dir = Path(raw_dir).expanduser() if raw_dir else DEFAULT_DATA_DIR

    log_level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise CurriculumConfigError(f"Unknown log level: {log_level}")

    return Settings(data_dir=data_dir, log_level=log_level)
