"""Fluent query construction for Solr-style search backends."""

from SolrBuilder.client import HttpClient, SolrHttpClient
from SolrBuilder.core.builder import GetRequest, PostBody, RejectedCall, SolrQuery, TransportMode
from SolrBuilder.core.clauses import and_, not_, or_, prohibit, required, strict_string
from SolrBuilder.core.dates import date_from_now, date_range
from SolrBuilder.core.fields import SolrField
from SolrBuilder.core.mapper import extract_documents, map_documents, parse_response

__version__ = "0.1.0"

__all__ = [
    "GetRequest",
    "HttpClient",
    "PostBody",
    "RejectedCall",
    "SolrField",
    "SolrHttpClient",
    "SolrQuery",
    "TransportMode",
    "and_",
    "date_from_now",
    "date_range",
    "extract_documents",
    "map_documents",
    "not_",
    "or_",
    "parse_response",
    "prohibit",
    "required",
    "strict_string",
]
