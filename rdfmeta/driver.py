"""
Load RDFa mappings for entity classes from XML metadata files.

One file per class, named after the class ("Blog\\Post" -> "Blog.Post.xml"),
looked up in an ordered list of directories (first match wins):

    <type xmlns:sioc="http://rdfs.org/sioc/ns#"
          xmlns:dcterms="http://purl.org/dc/terms/"
          xmlns:skos="http://www.w3.org/2004/02/skos/core#"
          typeof="sioc:Post">
        <config key="my" value="value"/>
        <children>
            <property property="dcterms:title" identifier="title" tag-name="h2"/>
            <collection rel="skos:related" identifier="tags" tag-name="ul">
                <config key="my" value="value"/>
                <attribute key="class" value="tags"/>
            </collection>
            <property property="sioc:content" identifier="content"/>
        </children>
    </type>

A class without a metadata file is unmapped: load_type_for_class() returns None.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from rdfmeta.config import (
    ATTR_IDENTIFIER,
    ATTR_KEY,
    ATTR_TAG_NAME,
    ATTR_TYPEOF,
    ATTR_VALUE,
    DEFAULT_PREFIX,
    EL_ATTRIBUTE,
    EL_CHILDREN,
    EL_COLLECTION,
    EL_CONFIG,
    EL_PROPERTY,
    FILE_EXTENSION,
    FILE_SEPARATOR,
    NAMESPACE_SEPARATORS,
)
from rdfmeta.entity import (
    CollectionDefinition,
    FieldDefinition,
    FieldKind,
    PropertyDefinition,
    TypeDescriptor,
)
from rdfmeta.errors import MalformedMetadataError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# -----------------------------
# Data structures
# -----------------------------
@dataclass(frozen=True)
class ParsedDocument:
    path: Path
    root: ET.Element
    # (prefix, uri) in document order; default namespace under ""
    namespaces: Tuple[Tuple[str, str], ...]


# -----------------------------
# Helpers
# -----------------------------
def local_name(node: ET.Element) -> str:
    """Tag without its namespace: {http://example.org/}property -> property."""
    tag = node.tag if isinstance(node.tag, str) else ""
    return tag.rsplit("}", 1)[-1]


def _children_named(node: ET.Element, name: str) -> Iterable[ET.Element]:
    return (c for c in node if local_name(c) == name)


def _key_value_pairs(node: ET.Element, name: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for c in _children_named(node, name):
        out[c.get(ATTR_KEY) or ""] = c.get(ATTR_VALUE) or ""
    return out


# -----------------------------
# Name mapping / lookup / parsing
# -----------------------------
def class_name_to_filename(class_name: str) -> str:
    """
    "Vendor\\Blog\\Post" -> "Vendor.Blog.Post.xml"
    "myapp.models.Post"  -> "myapp.models.Post.xml"
    """
    name = str(class_name)
    for sep in NAMESPACE_SEPARATORS:
        name = name.replace(sep, FILE_SEPARATOR)
    return name + FILE_EXTENSION


def parse_document(path: PathLike) -> ParsedDocument:
    """
    Parse a metadata file in one pass, keeping the namespace declarations
    (ElementTree resolves them away on the elements themselves).
    ET.ParseError propagates for malformed files.
    """
    p = Path(path)
    namespaces: List[Tuple[str, str]] = []
    events = ET.iterparse(str(p), events=("start-ns",))
    for _, (prefix, uri) in events:
        namespaces.append((prefix or DEFAULT_PREFIX, uri))
    return ParsedDocument(path=p, root=events.root, namespaces=tuple(namespaces))


def find_metadata_file(class_name: str, directories: Sequence[PathLike]) -> Optional[Path]:
    filename = class_name_to_filename(class_name)
    # path separators in a class name would leave the configured directories
    if Path(filename).name != filename or "/" in filename:
        logger.debug("Rejecting class name %r: not a plain file name", class_name)
        return None
    for d in directories:
        candidate = Path(d) / filename
        if candidate.is_file():
            return candidate
    return None


def locate(class_name: str, directories: Sequence[PathLike]) -> Optional[ParsedDocument]:
    path = find_metadata_file(class_name, directories)
    if path is None:
        logger.debug("No metadata for %s in %d director(ies)", class_name, len(directories))
        return None
    logger.debug("Loading metadata for %s from %s", class_name, path)
    return parse_document(path)


# -----------------------------
# Node readers
# -----------------------------
def extract_config(node: ET.Element) -> Dict[str, str]:
    """
    <config key="x" value="y"/> children -> {"x": "y"}.
    Later keys overwrite earlier ones; a missing key or value reads as ""
    rather than failing.
    """
    return _key_value_pairs(node, EL_CONFIG)


def build_attributes(child: ET.Element, kind: FieldKind) -> Tuple[Dict[str, str], Optional[str]]:
    """
    Effective RDFa attributes of a property/collection node plus its tag-name.

    The semantic term (property= or rel=, falling back to the identifier) is
    seeded first, so <attribute key="property" .../> can override it.
    """
    term_key = kind.term_key
    term = child.get(term_key)
    if term is None:
        term = child.get(ATTR_IDENTIFIER) or ""

    attributes: Dict[str, str] = {term_key: term}
    attributes.update(_key_value_pairs(child, EL_ATTRIBUTE))

    return attributes, child.get(ATTR_TAG_NAME)


# -----------------------------
# Driver
# -----------------------------
class RdfDriverXml:
    def __init__(self, directories: Sequence[PathLike]):
        """directories: where to look for metadata files, in precedence order."""
        self.directories: List[Path] = [Path(d) for d in directories]

    def get_definition(self, class_name: str) -> Optional[ParsedDocument]:
        return locate(class_name, self.directories)

    def load_type_for_class(
        self,
        class_name: str,
        mapper: Any = None,
        type_factory: Any = None,
    ) -> Optional[TypeDescriptor]:
        """Return the type for class_name, or None if no metadata file exists."""
        doc = self.get_definition(class_name)
        if doc is None:
            return None

        root = doc.root
        type_ = TypeDescriptor(mapper=mapper, config=extract_config(root))

        for prefix, uri in doc.namespaces:
            type_.set_vocabulary(prefix, uri)

        rdf_type = root.get(ATTR_TYPEOF)
        if rdf_type is not None:
            type_.set_rdf_type(rdf_type)

        container = next(iter(_children_named(root, EL_CHILDREN)), None)
        if container is None:
            return type_

        for child in container:
            name = local_name(child)
            if name == EL_PROPERTY:
                field = self._build_field(PropertyDefinition, child, doc.path)
            elif name == EL_COLLECTION:
                field = self._build_field(CollectionDefinition, child, doc.path, type_factory=type_factory)
            else:
                logger.debug("Skipping <%s> in %s", name, doc.path)
                continue
            type_.add_child(field)

        return type_

    def _build_field(self, cls, child: ET.Element, path: Path, **extra: Any) -> FieldDefinition:
        identifier = child.get(ATTR_IDENTIFIER) or ""
        if not identifier.strip():
            raise MalformedMetadataError(
                f"<{local_name(child)}> without identifier attribute", path
            )

        field = cls(identifier=identifier, config=extract_config(child), **extra)
        attributes, tag_name = build_attributes(child, cls.kind)
        field.set_attributes(attributes)
        if tag_name is not None:
            field.set_tag_name(tag_name)
        return field
