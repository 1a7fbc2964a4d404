from __future__ import annotations

import pytest
from rdflib import URIRef

from rdfmeta.entity import (
    CollectionDefinition,
    FieldDefinition,
    FieldKind,
    PropertyDefinition,
    TypeDescriptor,
)
from rdfmeta.errors import MalformedMetadataError


class StubTypeFactory:
    def __init__(self):
        self.requested = []

    def resolve(self, class_name):
        self.requested.append(class_name)
        return TypeDescriptor(rdf_type="skos:Concept")


def test_field_kind_term_keys():
    assert FieldKind.PROPERTY.term_key == "property"
    assert FieldKind.COLLECTION.term_key == "rel"
    assert PropertyDefinition.kind is FieldKind.PROPERTY
    assert CollectionDefinition.kind is FieldKind.COLLECTION


@pytest.mark.parametrize("cls", [FieldDefinition, PropertyDefinition, CollectionDefinition])
def test_identifier_required(cls):
    with pytest.raises(MalformedMetadataError, match=cls.__name__):
        cls(identifier="")


def test_set_attributes_copies():
    attrs = {"property": "dcterms:title"}
    prop = PropertyDefinition("title")
    prop.set_attributes(attrs)
    attrs["property"] = "changed"

    assert prop.attributes == {"property": "dcterms:title"}
    assert prop.term == "dcterms:title"


def test_collection_term_is_rel():
    col = CollectionDefinition("tags", attributes={"rel": "skos:related", "class": "tags"})
    assert col.term == "skos:related"


def test_collection_resolves_through_factory():
    factory = StubTypeFactory()
    col = CollectionDefinition("tags", type_factory=factory)

    related = col.resolve_type("Blog\\Tag")
    assert related.rdf_type == "skos:Concept"
    assert factory.requested == ["Blog\\Tag"]


def test_collection_without_factory():
    with pytest.raises(ValueError):
        CollectionDefinition("tags").resolve_type("Blog\\Tag")


def test_add_child_last_wins():
    type_ = TypeDescriptor()
    type_.add_child(PropertyDefinition("body"))
    type_.add_child(CollectionDefinition("body"))

    assert "body" in type_
    assert isinstance(type_.get_child("body"), CollectionDefinition)
    assert [c.identifier for c in type_] == ["body"]


def test_get_child_unknown():
    with pytest.raises(KeyError):
        TypeDescriptor().get_child("nope")


def test_properties_and_collections():
    type_ = TypeDescriptor()
    type_.add_child(PropertyDefinition("title"))
    type_.add_child(CollectionDefinition("tags"))
    type_.add_child(PropertyDefinition("content"))

    assert [p.identifier for p in type_.properties()] == ["title", "content"]
    assert [c.identifier for c in type_.collections()] == ["tags"]


def test_empty_type_is_truthy():
    assert TypeDescriptor()


def test_expand_and_namespace_manager():
    type_ = TypeDescriptor()
    type_.set_vocabulary("sioc", "http://rdfs.org/sioc/ns#")
    type_.set_rdf_type("sioc:Post")

    assert type_.expand(type_.rdf_type) == URIRef("http://rdfs.org/sioc/ns#Post")
    nm = type_.namespace_manager()
    assert dict(nm.namespaces())["sioc"] == URIRef("http://rdfs.org/sioc/ns#")
