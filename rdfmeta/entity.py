from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, List, Mapping, Optional

from rdflib import URIRef
from rdflib.namespace import NamespaceManager

from rdfmeta.config import TERM_PROPERTY, TERM_REL
from rdfmeta.errors import MalformedMetadataError
from rdfmeta.uris import expand_term, namespace_manager


# -----------------------------
# Field kinds
# -----------------------------
class FieldKind(str, Enum):
    PROPERTY = "property"
    COLLECTION = "collection"

    @property
    def term_key(self) -> str:
        """Attribute carrying the semantic term: property for scalars, rel for collections."""
        return TERM_PROPERTY if self is FieldKind.PROPERTY else TERM_REL


# -----------------------------
# Field descriptors
# -----------------------------
@dataclass
class FieldDefinition:
    """
    Shared part of property and collection descriptors.

    attributes is the effective RDFa attribute bundle (semantic term plus
    custom overrides); tag_name, when set, replaces the rendering tag.
    """
    identifier: str
    config: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, str] = field(default_factory=dict)
    tag_name: Optional[str] = None

    kind: ClassVar[FieldKind]

    def __post_init__(self) -> None:
        if not self.identifier or not str(self.identifier).strip():
            raise MalformedMetadataError(f"{type(self).__name__} needs a non-empty identifier")
        self.identifier = str(self.identifier)
        self.config = dict(self.config)

    def set_attributes(self, attributes: Mapping[str, str]) -> None:
        self.attributes = dict(attributes)

    def set_tag_name(self, tag_name: Optional[str]) -> None:
        self.tag_name = tag_name

    @property
    def term(self) -> Optional[str]:
        return self.attributes.get(self.kind.term_key)


@dataclass
class PropertyDefinition(FieldDefinition):
    kind: ClassVar[FieldKind] = FieldKind.PROPERTY


@dataclass
class CollectionDefinition(FieldDefinition):
    # resolves related types; anything with resolve(class_name) -> TypeDescriptor
    type_factory: Any = None

    kind: ClassVar[FieldKind] = FieldKind.COLLECTION

    def resolve_type(self, class_name: str) -> "TypeDescriptor":
        if self.type_factory is None:
            raise ValueError(f"Collection {self.identifier!r} has no type factory")
        return self.type_factory.resolve(class_name)


# -----------------------------
# Type descriptor
# -----------------------------
@dataclass
class TypeDescriptor:
    """
    RDFa mapping of one entity class.

    mapper is passed through untouched for the storage binding layer.
    Terms (rdf_type, field terms) stay compact; use expand() for full IRIs.
    """
    mapper: Any = None
    config: Dict[str, str] = field(default_factory=dict)
    vocabularies: Dict[str, str] = field(default_factory=dict)
    rdf_type: Optional[str] = None
    children: Dict[str, FieldDefinition] = field(default_factory=dict)

    def set_vocabulary(self, prefix: str, uri: str) -> None:
        self.vocabularies[prefix] = uri

    def set_rdf_type(self, rdf_type: Optional[str]) -> None:
        self.rdf_type = rdf_type

    def add_child(self, child: FieldDefinition) -> None:
        # same identifier twice: the later one wins
        self.children[child.identifier] = child

    def get_child(self, identifier: str) -> FieldDefinition:
        try:
            return self.children[identifier]
        except KeyError:
            raise KeyError(f"No field {identifier!r} in type {self.rdf_type or '<untyped>'}") from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.children

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self.children.values())

    def properties(self) -> List[PropertyDefinition]:
        return [c for c in self.children.values() if isinstance(c, PropertyDefinition)]

    def collections(self) -> List[CollectionDefinition]:
        return [c for c in self.children.values() if isinstance(c, CollectionDefinition)]

    def expand(self, term: str) -> URIRef:
        return expand_term(term, self.vocabularies)

    def namespace_manager(self) -> NamespaceManager:
        return namespace_manager(self.vocabularies)
