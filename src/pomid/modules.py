"""Register a child project as a ``<module>`` of its parent POM."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

from pomid.store.base import DescriptorStore

logger = logging.getLogger(__name__)


def module_id_for(parent_path: Path, child_dir: Path) -> str:
    """Return *child_dir* relative to the directory of *parent_path*.

    Both sides are canonicalized first.  The result always uses forward
    slashes, which Maven accepts on every platform.
    """
    parent_dir = Path(parent_path).resolve().parent
    relative = os.path.relpath(Path(child_dir).resolve(), parent_dir)
    return PurePath(relative).as_posix()


def reconcile_module(
    parent_path: Path, child_dir: Path, store: DescriptorStore
) -> bool:
    """Add *child_dir* to the modules of the POM at *parent_path* if missing.

    Returns True if the parent was rewritten.  Read and write errors
    propagate to the caller.
    """
    parent = store.load(parent_path)
    module_id = module_id_for(parent_path, child_dir)

    if module_id == ".":
        logger.warning(
            "%s is its own parent, not registering it as a module", parent_path
        )
        return False

    if not parent.add_module(module_id):
        logger.debug("%s already lists module %s", parent_path, module_id)
        return False

    logger.info("Adding module %s to %s", module_id, parent_path)
    store.save(parent, parent_path)
    return True
