"""
rdfmeta: load RDFa mapping metadata for entity classes from XML files.
"""

from rdfmeta.driver import RdfDriverXml
from rdfmeta.entity import (
    CollectionDefinition,
    FieldDefinition,
    FieldKind,
    PropertyDefinition,
    TypeDescriptor,
)
from rdfmeta.errors import MalformedMetadataError

__all__ = [
    "RdfDriverXml",
    "TypeDescriptor",
    "FieldDefinition",
    "FieldKind",
    "PropertyDefinition",
    "CollectionDefinition",
    "MalformedMetadataError",
]
