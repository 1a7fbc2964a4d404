"""
Vocabulary helpers for RDFa metadata.

Terms in metadata documents stay in their compact form ("dcterms:title").
These helpers are for consumers that need the full IRI:

- expand_term("dcterms:title", {"dcterms": "http://purl.org/dc/terms/"})
    -> URIRef("http://purl.org/dc/terms/title")
- namespace_manager(vocabularies) gives an rdflib NamespaceManager bound with
  exactly the declared prefixes (no rdflib defaults), e.g. for serializing.
"""

from __future__ import annotations

from typing import Mapping, Tuple

from rdflib import Graph, Namespace, URIRef
from rdflib.namespace import NamespaceManager

from rdfmeta.config import DEFAULT_PREFIX


def split_term(term: str) -> Tuple[str, str]:
    """
    "sioc:Post" -> ("sioc", "Post"); a term without a colon belongs to the
    default namespace: "content" -> ("", "content").
    """
    s = (term or "").strip()
    if ":" not in s:
        return DEFAULT_PREFIX, s
    prefix, local = s.split(":", 1)
    return prefix, local


def is_absolute(term: str) -> bool:
    return "://" in (term or "")


def expand_term(term: str, vocabularies: Mapping[str, str]) -> URIRef:
    if is_absolute(term):
        return URIRef(term)
    prefix, local = split_term(term)
    if prefix not in vocabularies:
        raise ValueError(f"Undeclared vocabulary prefix {prefix!r} in term {term!r}")
    return Namespace(vocabularies[prefix])[local]


def namespace_manager(vocabularies: Mapping[str, str]) -> NamespaceManager:
    nm = NamespaceManager(Graph(), bind_namespaces="none")
    for prefix, uri in vocabularies.items():
        nm.bind(prefix, Namespace(uri), override=True, replace=True)
    return nm
