"""Field remapping for documents returned by Solr.

Provides pure functions that pull the document list out of a Solr JSON
response and copy fields under additional names, so callers can read results
with their own vocabulary while the original fields stay untouched.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from SolrBuilder.utils.log import log

FieldMapping = Mapping[str, Union[str, Sequence[str]]]


def extract_documents(payload: Any) -> list[Any]:
    """Return ``payload["response"]["docs"]``.

    Args:
        payload: Parsed JSON body of a Solr response.

    Returns:
        The document list, or an empty list when the payload has another shape.
    """
    response = payload.get("response") if isinstance(payload, Mapping) else None
    docs = response.get("docs") if isinstance(response, Mapping) else None
    if not isinstance(docs, list):
        log.warning("Unexpected Solr response shape; expected response.docs list")
        return []
    return docs


def _destinations(target: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(target, str):
        return (target,)
    return tuple(target)


def map_documents(docs: Sequence[Any], field_mapping: FieldMapping) -> list[Any]:
    """Copy mapped fields onto each document.

    For every ``source -> destination`` entry, in mapping order, the current
    value of ``source`` is copied to ``destination`` (or to each name when the
    destination is a list). Later entries win when they target the same name
    and can read fields written by earlier entries.
    Documents are copied; the input list is never mutated.

    Args:
        docs: Raw documents from the response.
        field_mapping: Source field to destination field name(s).

    Returns:
        New list of documents carrying both original and mapped fields.
    """
    if not field_mapping:
        return list(docs)

    mapped: list[Any] = []
    for doc in docs:
        if not isinstance(doc, Mapping):
            mapped.append(doc)
            continue
        out = dict(doc)
        # Entries see fields written by earlier entries, so {a: b, b: c} chains.
        for source, target in field_mapping.items():
            if source not in out:
                continue
            for destination in _destinations(target):
                out[destination] = out[source]
        mapped.append(out)
    return mapped


def parse_response(payload: Any, field_mapping: FieldMapping) -> list[Any]:
    """Extract documents from ``payload`` and apply ``field_mapping``."""
    return map_documents(extract_documents(payload), field_mapping)
