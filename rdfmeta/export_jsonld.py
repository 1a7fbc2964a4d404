# rdfmeta/export_jsonld.py
from __future__ import annotations

from typing import Any, Dict

from rdfmeta.config import DEFAULT_PREFIX
from rdfmeta.entity import CollectionDefinition, TypeDescriptor
from rdfmeta.uris import is_absolute


def _maps_to_iri(term: str, vocabularies: Dict[str, str]) -> bool:
    # a bare term is only an IRI when a default vocabulary (@vocab) is declared
    return ":" in term or is_absolute(term) or DEFAULT_PREFIX in vocabularies


def to_jsonld_context(type_: TypeDescriptor) -> Dict[str, Any]:
    """
    JSON-LD @context for instances of a mapped type:

      {
        "@context": {
          "sioc": "http://rdfs.org/sioc/ns#",
          "dcterms": "http://purl.org/dc/terms/",
          "title": "dcterms:title",
          "tags": {"@id": "skos:related", "@type": "@id"}
        },
        "@type": "sioc:Post"
      }

    A default namespace (empty prefix) becomes "@vocab". Fields whose term
    has no prefix (identifier fallback) are mapped through @vocab, and left
    out of the context when there is none.
    """
    context: Dict[str, Any] = {}
    for prefix, uri in type_.vocabularies.items():
        if prefix:
            context[prefix] = uri
        else:
            context["@vocab"] = uri

    for child in type_:
        term = child.term or child.identifier
        if not _maps_to_iri(term, type_.vocabularies):
            continue
        if isinstance(child, CollectionDefinition):
            context[child.identifier] = {"@id": term, "@type": "@id"}
        else:
            context[child.identifier] = term

    doc: Dict[str, Any] = {"@context": context}
    if type_.rdf_type:
        doc["@type"] = type_.rdf_type
    return doc
