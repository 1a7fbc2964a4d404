from __future__ import annotations

import pytest
from rdflib import URIRef

from rdfmeta.uris import expand_term, namespace_manager, split_term

VOCAB = {
    "dcterms": "http://purl.org/dc/terms/",
    "": "http://schema.org/",
}


def test_split_term():
    assert split_term("dcterms:title") == ("dcterms", "title")
    assert split_term("headline") == ("", "headline")


def test_expand_prefixed_term():
    assert expand_term("dcterms:title", VOCAB) == URIRef("http://purl.org/dc/terms/title")


def test_expand_default_namespace():
    assert expand_term("headline", VOCAB) == URIRef("http://schema.org/headline")


def test_expand_absolute_iri_untouched():
    iri = "http://xmlns.com/foaf/0.1/name"
    assert expand_term(iri, VOCAB) == URIRef(iri)


def test_expand_undeclared_prefix():
    with pytest.raises(ValueError, match="skos"):
        expand_term("skos:related", VOCAB)


def test_namespace_manager_expands_curies():
    nm = namespace_manager(VOCAB)
    assert nm.expand_curie("dcterms:created") == URIRef("http://purl.org/dc/terms/created")
