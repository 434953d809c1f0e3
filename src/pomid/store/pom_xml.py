"""Read and write Maven ``pom.xml`` descriptors with ElementTree."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path, PurePath

from pomid.config import PomidConfig
from pomid.errors import ReadError, WriteError
from pomid.model import ParentReference, ProjectDescriptor

logger = logging.getLogger(__name__)

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = (
    "http://maven.apache.org/POM/4.0.0 https://maven.apache.org/xsd/maven-4.0.0.xsd"
)
DEFAULT_PACKAGING = "jar"

# Serialize the POM namespace as the default one instead of ns0:.
ET.register_namespace("", POM_NAMESPACE)
ET.register_namespace("xsi", XSI_NAMESPACE)

# Leading part of Maven's element order, used when inserting new elements.
_ELEMENT_ORDER = [
    "modelVersion",
    "parent",
    "groupId",
    "artifactId",
    "version",
    "packaging",
    "name",
    "description",
    "url",
    "inceptionYear",
    "organization",
    "licenses",
    "developers",
    "contributors",
    "mailingLists",
    "prerequisites",
    "modules",
]


def _local_name(tag) -> str | None:
    # Comments and processing instructions have a factory function as tag.
    if not isinstance(tag, str):
        return None
    return tag.rsplit("}", 1)[-1]


def _namespace_of(element: ET.Element) -> str:
    if element.tag.startswith("{"):
        return element.tag[1:].split("}", 1)[0]
    return ""


def _qname(namespace: str, tag: str) -> str:
    return f"{{{namespace}}}{tag}" if namespace else tag


def _child_text(parent: ET.Element, namespace: str, tag: str) -> str | None:
    element = parent.find(_qname(namespace, tag))
    if element is None or element.text is None:
        return None
    return element.text.strip() or None


def _insert_in_order(root: ET.Element, element: ET.Element) -> None:
    """Insert *element* after the last sibling that precedes it in Maven order."""
    rank = _ELEMENT_ORDER.index(_local_name(element.tag))
    position = 0
    for i, child in enumerate(root):
        name = _local_name(child.tag)
        if name in _ELEMENT_ORDER and _ELEMENT_ORDER.index(name) < rank:
            position = i + 1
    root.insert(position, element)


class PomXmlStore:
    """Load, save and create ``pom.xml`` descriptors.

    The parsed tree is kept on the descriptor, so elements this store
    does not model (dependencies, build, comments) are written back
    untouched.
    """

    def __init__(self, config: PomidConfig | None = None) -> None:
        config = config or PomidConfig()
        self.packaging = config.packaging
        self.indent = config.indent

    def load(self, path: Path) -> ProjectDescriptor:
        logger.debug("Reading %s", path)
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            with open(path, "rb") as f:
                tree = ET.parse(f, parser=parser)
        except OSError as e:
            raise ReadError(path, f"cannot read file: {e}") from e
        except ET.ParseError as e:
            raise ReadError(path, f"malformed XML: {e}") from e

        root = tree.getroot()
        if _local_name(root.tag) != "project":
            raise ReadError(
                path, f"root element is <{_local_name(root.tag)}>, not <project>"
            )
        ns = _namespace_of(root)

        parent = None
        parent_el = root.find(_qname(ns, "parent"))
        if parent_el is not None:
            parent = ParentReference(
                group_id=_child_text(parent_el, ns, "groupId"),
                artifact_id=_child_text(parent_el, ns, "artifactId"),
                version=_child_text(parent_el, ns, "version"),
                relative_path=_child_text(parent_el, ns, "relativePath"),
            )

        modules: list[str] = []
        modules_el = root.find(_qname(ns, "modules"))
        if modules_el is not None:
            for module_el in modules_el.findall(_qname(ns, "module")):
                text = (module_el.text or "").strip()
                if text and text not in modules:
                    modules.append(text)

        return ProjectDescriptor(
            group_id=_child_text(root, ns, "groupId"),
            artifact_id=_child_text(root, ns, "artifactId"),
            version=_child_text(root, ns, "version"),
            packaging=_child_text(root, ns, "packaging") or DEFAULT_PACKAGING,
            parent=parent,
            modules=modules,
            path=path,
            model_version=_child_text(root, ns, "modelVersion"),
            document=tree,
        )

    def save(self, descriptor: ProjectDescriptor, path: Path) -> None:
        tree = descriptor.document
        if tree is None:
            tree = ET.ElementTree(self._new_root(descriptor))
        root = tree.getroot()
        ns = _namespace_of(root)

        self._set(root, ns, "modelVersion", descriptor.model_version)
        self._set(root, ns, "groupId", descriptor.group_id)
        self._set(root, ns, "artifactId", descriptor.artifact_id)
        self._set(root, ns, "version", descriptor.version)
        # jar is Maven's default packaging; only spell it out if the file already does.
        if (
            descriptor.packaging != DEFAULT_PACKAGING
            or root.find(_qname(ns, "packaging")) is not None
        ):
            self._set(root, ns, "packaging", descriptor.packaging)
        self._set_modules(root, ns, descriptor.modules)

        ET.indent(tree, space=" " * self.indent)
        logger.info("Writing %s", path)
        try:
            with open(path, "wb") as f:
                tree.write(f, encoding="UTF-8", xml_declaration=True)
                f.write(b"\n")
        except OSError as e:
            raise WriteError(path, f"cannot write file: {e}") from e

        descriptor.document = tree
        descriptor.path = path

    def create_default(self, path: Path, standalone: bool) -> ProjectDescriptor:
        descriptor = ProjectDescriptor(packaging=self.packaging, path=path)
        if not standalone:
            descriptor.parent = self._find_parent(path)
        return descriptor

    def _find_parent(self, path: Path) -> ParentReference | None:
        """Search ancestor directories of *path* for an aggregator POM."""
        child_dir = Path(path).resolve().parent
        for directory in child_dir.parents:
            candidate = directory / "pom.xml"
            if not candidate.is_file():
                continue
            try:
                parent = self.load(candidate)
            except ReadError as e:
                logger.debug("Skipping unreadable parent candidate %s", e)
                continue
            if parent.packaging != "pom":
                logger.debug(
                    "Skipping %s: packaging is %s", candidate, parent.packaging
                )
                continue
            logger.debug("Using %s as parent of %s", candidate, path)
            return ParentReference(
                group_id=parent.effective_group_id,
                artifact_id=parent.artifact_id,
                version=parent.effective_version,
                relative_path=PurePath(
                    os.path.relpath(directory, child_dir)
                ).as_posix(),
            )
        return None

    def _new_root(self, descriptor: ProjectDescriptor) -> ET.Element:
        root = ET.Element(
            _qname(POM_NAMESPACE, "project"),
            {_qname(XSI_NAMESPACE, "schemaLocation"): SCHEMA_LOCATION},
        )
        parent = descriptor.parent
        if parent is not None:
            parent_el = ET.Element(_qname(POM_NAMESPACE, "parent"))
            for tag, value in (
                ("groupId", parent.group_id),
                ("artifactId", parent.artifact_id),
                ("version", parent.version),
                ("relativePath", parent.relative_path),
            ):
                if value:
                    ET.SubElement(parent_el, _qname(POM_NAMESPACE, tag)).text = value
            root.append(parent_el)
        return root

    def _set(self, root: ET.Element, ns: str, tag: str, value: str | None) -> None:
        element = root.find(_qname(ns, tag))
        if not value:
            if element is not None:
                root.remove(element)
            return
        if element is None:
            element = ET.Element(_qname(ns, tag))
            _insert_in_order(root, element)
        element.text = value

    def _set_modules(self, root: ET.Element, ns: str, modules: list[str]) -> None:
        modules_el = root.find(_qname(ns, "modules"))
        if modules_el is None:
            if not modules:
                return
            modules_el = ET.Element(_qname(ns, "modules"))
            _insert_in_order(root, modules_el)

        existing = modules_el.findall(_qname(ns, "module"))
        if [(el.text or "").strip() for el in existing] == modules:
            return

        # Edit <module> elements in place so interleaved comments keep their spot.
        wanted = set(modules)
        kept: set[str] = set()
        for el in existing:
            module_id = (el.text or "").strip()
            if module_id in wanted and module_id not in kept:
                kept.add(module_id)
            else:
                modules_el.remove(el)

        remaining = modules_el.findall(_qname(ns, "module"))
        if remaining:
            position = list(modules_el).index(remaining[-1]) + 1
        else:
            position = len(modules_el)
        for module_id in modules:
            if module_id in kept:
                continue
            element = ET.Element(_qname(ns, "module"))
            element.text = module_id
            modules_el.insert(position, element)
            position += 1
            kept.add(module_id)

        if not len(modules_el):
            root.remove(modules_el)
