#!/usr/bin/env python3
"""
check_curriculum.py - Load the curriculum and run integrity checks.

Checks that every syllabus level and exercise slug resolves and that each
level allows at least the node kinds earlier levels allow.

Usage:
  python scripts/check_curriculum.py
  python scripts/check_curriculum.py --data-dir path/to/data --env-file .env
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from codecurriculum.classroom import load_curriculum
from codecurriculum.config import load_settings
from codecurriculum.errors import CurriculumConfigError
from codecurriculum.utils import validate_curriculum

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate curriculum data")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory with levels.yaml and syllabus.yaml (default: from environment or bundled data)"
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help=".env file to read settings from"
    )
    args = parser.parse_args(argv)

    settings = load_settings(args.env_file)
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    data_dir = args.data_dir or settings.data_dir
    logger.info(f"Loading curriculum from {data_dir}...")
    try:
        curriculum = load_curriculum(data_dir)
    except (FileNotFoundError, CurriculumConfigError) as e:
        logger.error(f"Could not load curriculum: {e}")
        return 1

    problems = validate_curriculum(curriculum)

    logger.info("=" * 50)
    logger.info(f"Levels: {len(curriculum.levels)}")
    logger.info(f"Lessons: {curriculum.syllabus.total_lessons}")
    logger.info(f"Exercise lessons: {len(curriculum.syllabus.get_all_exercise_lessons())}")
    logger.info(f"Exercises: {len(curriculum.exercises)}")
    if problems:
        logger.warning(f"Found {len(problems)} integrity issues")
        return 1
    logger.info("All integrity checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
