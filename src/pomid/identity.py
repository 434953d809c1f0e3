"""Parse ``groupId:artifactId[:version]`` tokens and format project identities."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pomid.errors import InvalidIdentityError
from pomid.model import IdentityToken, ProjectDescriptor

logger = logging.getLogger(__name__)


def parse_identity(token: str) -> IdentityToken:
    """Split *token* on ``:`` into at most three segments.

    Anything after the second colon belongs to the version, so
    ``a:b:c:d`` has version ``c:d``.
    """
    if not token or not token.strip():
        raise InvalidIdentityError("identity must not be empty")
    return IdentityToken(tuple(token.split(":", 2)))


def apply_identity(token: str, descriptor: ProjectDescriptor) -> ProjectDescriptor:
    """Apply the fields of *token* to *descriptor* in place and return it.

    With one segment only the artifactId is set.  Without a version
    segment the version is cleared when the descriptor has a parent (it
    is inherited) and left alone otherwise.  An artifactId of ``.``
    becomes the name of the directory holding the descriptor.
    """
    identity = parse_identity(token)

    if identity.group_id is not None:
        descriptor.group_id = identity.group_id
    descriptor.artifact_id = identity.artifact_id

    if identity.has_version:
        descriptor.version = identity.version
    elif descriptor.parent is not None:
        logger.debug(
            "Clearing version of %s, it is inherited from the parent", descriptor.path
        )
        descriptor.version = None

    if descriptor.artifact_id == ".":
        path = descriptor.path or Path("pom.xml")
        descriptor.artifact_id = Path(os.path.abspath(path)).parent.name
        logger.debug("Using directory name %r as artifactId", descriptor.artifact_id)

    return descriptor


def format_identity(descriptor: ProjectDescriptor) -> str:
    """Return ``<packaging> <groupId>:<artifactId>:<version>``.

    groupId and version fall back to the parent's; missing values print
    as ``null``.
    """
    parts = (
        descriptor.effective_group_id,
        descriptor.artifact_id,
        descriptor.effective_version,
    )
    return f"{descriptor.packaging} " + ":".join(
        "null" if p is None else p for p in parts
    )
