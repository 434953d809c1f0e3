"""Locate the parent descriptor referenced by a child's ``<relativePath>``."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pomid.model import ProjectDescriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_FILE_NAME = "pom.xml"


def locate_parent(descriptor: ProjectDescriptor, descriptor_path: Path) -> Path | None:
    """Return the path of *descriptor*'s parent POM, or None if there is none.

    A relativePath that does not name an ``.xml`` file is treated as a
    directory holding ``pom.xml``.  It is resolved against the canonical
    directory of *descriptor_path*, so symlinks and ``..`` segments in
    the child's path cannot shift the result.  A reference to a file that
    does not exist is not an error: it means there is no parent to update.
    """
    parent = descriptor.parent
    if parent is None or not parent.relative_path:
        return None

    relative_path = parent.relative_path
    if not relative_path.endswith(".xml"):
        relative_path = os.path.join(relative_path, DESCRIPTOR_FILE_NAME)
    logger.debug("Searching for parent POM at %s", relative_path)

    base_dir = Path(descriptor_path).resolve().parent
    candidate = Path(os.path.normpath(base_dir / relative_path))
    if not candidate.is_file():
        logger.debug("No parent POM at %s", candidate)
        return None

    logger.debug("Found parent POM at %s", candidate)
    return candidate
