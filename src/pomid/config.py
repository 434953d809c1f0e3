"""Read optional pomid settings from ``.pomid.toml``."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".pomid.toml"


@dataclass
class PomidConfig:
    """Defaults applied when the command line does not override them."""

    file: str = "pom.xml"
    packaging: str = "jar"
    indent: int = 4


def load_config(project_dir: Path) -> PomidConfig:
    """Return settings from ``<project_dir>/.pomid.toml``, or the defaults.

    The file is optional; a missing, unreadable or malformed file yields
    the defaults.  Unknown keys are ignored.
    """
    config = PomidConfig()
    config_path = project_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        return config

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring %s: %s", config_path, e)
        return config

    section = data.get("pomid", {})
    if isinstance(section.get("file"), str) and section["file"]:
        config.file = section["file"]
    if isinstance(section.get("packaging"), str) and section["packaging"]:
        config.packaging = section["packaging"]
    indent = section.get("indent")
    if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0:
        config.indent = indent

    logger.debug("Loaded %s: %s", config_path, config)
    return config
