"""Descriptor stores."""

from pomid.store.base import DescriptorStore
from pomid.store.pom_xml import PomXmlStore

__all__ = ["DescriptorStore", "PomXmlStore"]
