"""Orchestrator: read the project identity, or update it and register the module."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from pomid.identity import apply_identity, format_identity
from pomid.modules import reconcile_module
from pomid.parent import locate_parent
from pomid.store.base import DescriptorStore
from pomid.store.pom_xml import PomXmlStore

logger = logging.getLogger(__name__)


def run_id(
    pom_path: Path,
    identity: str | None = None,
    *,
    packaging: str | None = None,
    standalone: bool = False,
    add_module: bool = True,
    store: DescriptorStore | None = None,
    out: TextIO | None = None,
) -> int:
    """Print the identity of *pom_path*, updating it first if *identity* is given.

    The parent POM is written before the child, so if registering the
    module fails the child file is left as it was.  Returns the process
    exit code.
    """
    if store is None:
        store = PomXmlStore()
    if out is None:
        out = sys.stdout

    if identity is None:
        if not pom_path.exists():
            print(f"No such file: {pom_path}", file=sys.stderr)
            return 1
        print(format_identity(store.load(pom_path)), file=out)
        return 0

    if pom_path.exists():
        logger.debug("Reading existing pom at %s", pom_path)
        pom = store.load(pom_path)
    else:
        logger.debug("Creating new pom at %s", pom_path)
        pom = store.create_default(pom_path, standalone)

    apply_identity(identity, pom)
    if packaging is not None:
        pom.packaging = packaging

    if add_module:
        if standalone:
            logger.info("%s is standalone, not checking for a parent", pom_path)
        else:
            parent_path = locate_parent(pom, pom_path)
            if parent_path is not None:
                reconcile_module(parent_path, pom_path.resolve().parent, store)

    store.save(pom, pom_path)
    print(format_identity(pom), file=out)
    return 0
