"""Fluent Solr request builder.

``SolrQuery`` accumulates clauses, filters, sorting and paging, then issues a
single request in one of two encodings:

- GET: parameters rendered as ``?q=...&fq=...`` in call order.
- POST: a JSON body ``{"query": [...], "filter": [...], ...}``.

The encoding is chosen once with ``switch_to_post()``, which must be called
before any clause is added. Setters never raise; invalid input turns the call
into a no-op that is recorded in ``rejected``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, Sequence

from SolrBuilder.client import HttpClient, SolrHttpClient
from SolrBuilder.config.app import AppConfig
from SolrBuilder.config.solr import SolrConfig, default_solr_config
from SolrBuilder.core.clauses import is_valid_list, is_valid_mapping, is_valid_number, is_valid_string
from SolrBuilder.core.mapper import parse_response
from SolrBuilder.utils.log import log

ROLES_PARAM: Final = "targetingRoles=true"
SORT_ASC: Final = "asc"
SORT_DESC: Final = "desc"


class TransportMode(str, Enum):
    GET = "GET"
    POST = "POST"


@dataclass(slots=True)
class GetRequest:
    """Ordered ``key=value`` parameters of a GET query."""

    params: list[tuple[str, str]] = field(default_factory=list)

    def add(self, key: str, value: Any) -> None:
        self.params.append((key, str(value)))

    def render(self) -> str:
        """Render as ``?k1=v1&k2=v2``, or an empty string when no params were added."""
        if not self.params:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in self.params)


@dataclass(slots=True)
class PostBody:
    """Structured body of a POST query.

    Optional members stay ``None`` until set and are omitted from ``to_dict``.
    """

    query: list[str] = field(default_factory=list)
    filter: list[str] = field(default_factory=list)
    sort: str | None = None
    fields: list[str] | None = None
    start: int | None = None
    limit: int | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"query": list(self.query), "filter": list(self.filter)}
        if self.sort is not None:
            body["sort"] = self.sort
        if self.fields is not None:
            body["fields"] = list(self.fields)
        if self.start is not None:
            body["start"] = self.start
        if self.limit is not None:
            body["limit"] = self.limit
        return body


@dataclass(frozen=True, slots=True)
class RejectedCall:
    """A setter call ignored because of invalid input."""

    method: str
    value: Any


class SolrQuery:
    """Chainable builder for one Solr request.

    Args:
        base_url: Endpoint to query; falls back to ``config`` defaults per mode.
        http_client: Transport to use; a ``SolrHttpClient`` is created (and
            closed) per ``execute`` when omitted.
        config: Endpoint and transport settings.

    Example:
        docs = (
            SolrQuery("/solr/select")
            .query(and_(SolrField.AUTH_TEMPLATE, ["news", "event"]))
            .filter(f"{SolrField.PUBLISH_DATE}:{date_from_now()}")
            .sort(SolrField.PUBLISH_DATE, False)
            .limit(10)
            .execute()
        )
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: HttpClient | None = None,
        config: SolrConfig | None = None,
    ) -> None:
        self._base_url = base_url
        self._http_client = http_client
        self._config = config or default_solr_config()
        self._request: GetRequest | PostBody = GetRequest()
        self._field_mapping: dict[str, str | tuple[str, ...]] = {}
        self._restrict_roles = False
        self._has_query = False
        self._rejected: list[RejectedCall] = []

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        base_url: str | None = None,
        *,
        http_client: HttpClient | None = None,
    ) -> SolrQuery:
        """Create a builder using the ``solr`` section of a loaded config."""
        return cls(base_url, http_client=http_client, config=config.solr)

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @property
    def transport_mode(self) -> TransportMode:
        return TransportMode.POST if isinstance(self._request, PostBody) else TransportMode.GET

    @property
    def query_string(self) -> str:
        """Rendered GET parameters; empty in POST mode."""
        return self._request.render() if isinstance(self._request, GetRequest) else ""

    @property
    def post_body(self) -> dict[str, Any] | None:
        """POST body as a plain dict; ``None`` in GET mode."""
        return self._request.to_dict() if isinstance(self._request, PostBody) else None

    @property
    def field_mapping(self) -> dict[str, str | tuple[str, ...]]:
        return dict(self._field_mapping)

    @property
    def restrict_roles(self) -> bool:
        return self._restrict_roles

    @property
    def has_query(self) -> bool:
        return self._has_query

    @property
    def rejected(self) -> list[RejectedCall]:
        """Setter calls ignored because of invalid input, oldest first."""
        return list(self._rejected)

    def switch_to_post(self) -> SolrQuery:
        """Encode the request as a POST body from now on."""
        if isinstance(self._request, PostBody):
            return self
        if self._request.params:
            log.warning(
                "switch_to_post called after GET params were added; dropping: %s",
                self._request.render(),
            )
        self._request = PostBody()
        self._has_query = False
        return self

    def query(self, clause: str) -> SolrQuery:
        """Add a main query clause (``q``)."""
        log.debug("Solr query clause: %s", clause)
        if not is_valid_string(clause):
            return self._reject("query", clause)
        if isinstance(self._request, PostBody):
            self._request.query.append(str(clause))
        else:
            self._request.add("q", clause)
        self._has_query = True
        return self

    def filter(self, clause: str) -> SolrQuery:  # noqa: A003 - Solr vocabulary
        """Add a filter query clause (``fq``) that narrows the result set."""
        if not is_valid_string(clause):
            return self._reject("filter", clause)
        if isinstance(self._request, PostBody):
            self._request.filter.append(str(clause))
        else:
            self._request.add("fq", clause)
        return self

    def fields(self, names: Sequence[str]) -> SolrQuery:
        """Limit the fields returned for each document (``fl``)."""
        if not is_valid_list(names) or not all(is_valid_string(name) for name in names):
            return self._reject("fields", names)
        normalized = [str(name) for name in names]
        if isinstance(self._request, PostBody):
            self._request.fields = normalized
        else:
            self._request.add("fl", ",".join(normalized))
        return self

    def sort(
        self,
        field_name: str | Sequence[str],
        ascending: bool | Sequence[bool] = True,
    ) -> SolrQuery:
        """Sort by one or more fields.

        Field names and direction flags are paired by position; a field with
        no matching flag sorts ascending.

        Args:
            field_name: Field name or list of names.
            ascending: Direction flag or list of flags.
        """
        names = [field_name] if isinstance(field_name, str) else field_name
        if not is_valid_list(names) or not all(is_valid_string(name) for name in names):
            return self._reject("sort", field_name)
        flags = list(ascending) if isinstance(ascending, (list, tuple)) else [ascending]

        tokens = []
        for index, name in enumerate(names):
            is_asc = flags[index] if index < len(flags) else True
            tokens.append(f"{name} {SORT_ASC if is_asc else SORT_DESC}")
        joined = ", ".join(tokens)

        if isinstance(self._request, PostBody):
            self._request.sort = joined
        else:
            self._request.add("sort", joined)
        return self

    def start(self, offset: int | str = 0) -> SolrQuery:
        """Return documents starting at ``offset``."""
        if not is_valid_number(offset):
            return self._reject("start", offset)
        value = int(offset.strip()) if isinstance(offset, str) else int(offset)
        if isinstance(self._request, PostBody):
            self._request.start = value
        else:
            self._request.add("start", value)
        return self

    def limit(self, count: int | str) -> SolrQuery:
        """Return at most ``count`` documents (``rows`` in GET, ``limit`` in POST)."""
        if not is_valid_number(count):
            return self._reject("limit", count)
        value = int(count.strip()) if isinstance(count, str) else int(count)
        if isinstance(self._request, PostBody):
            self._request.limit = value
        else:
            self._request.add("rows", value)
        return self

    def restrict_by_roles(self) -> SolrQuery:
        """Ask the backend to filter results by the caller's targeting roles."""
        self._restrict_roles = True
        return self

    def add_field_mapping(self, source: str, destination: str | Sequence[str]) -> SolrQuery:
        """Copy ``source`` to ``destination`` on every returned document."""
        if not is_valid_string(source) or not _is_valid_destination(destination):
            return self._reject("add_field_mapping", (source, destination))
        self._field_mapping[str(source)] = _normalize_destination(destination)
        return self

    def add_field_mapping_table(self, table: dict[str, str | Sequence[str]]) -> SolrQuery:
        """Merge a ``{source: destination}`` table into the field mapping."""
        if not is_valid_mapping(table) or not all(_is_valid_destination(v) for v in table.values()):
            return self._reject("add_field_mapping_table", table)
        for source, destination in table.items():
            self._field_mapping[str(source)] = _normalize_destination(destination)
        return self

    def build_url(self) -> str:
        """Return the URL ``execute`` would request."""
        if isinstance(self._request, PostBody):
            base = self._base_url or self._config.post_url
            return base + (f"?{ROLES_PARAM}" if self._restrict_roles else "")

        base = self._base_url or self._config.get_url
        query_string = self._request.render()
        if self._restrict_roles:
            query_string += ("&" if query_string else "?") + ROLES_PARAM
        return base + query_string

    def execute(self) -> list[Any]:
        """Send the request and return the mapped documents.

        Returns:
            Documents from ``response.docs`` with the field mapping applied, or
            an empty list on any transport, status or parsing failure.
        """
        url = self.build_url()
        owns_client = self._http_client is None
        http = self._http_client or SolrHttpClient(self._config)
        if not self._has_query:
            log.debug("Executing Solr request without a main query: url=%s", url)

        try:
            if isinstance(self._request, PostBody):
                response = http.post(url, self._request.to_dict())
            else:
                response = http.get(url)
            raise_for_status = getattr(response, "raise_for_status", None)
            if callable(raise_for_status):
                raise_for_status()
            payload = response.json()
        except Exception as error:  # noqa: BLE001 - execute degrades to an empty result
            log.error("Solr request failed: mode=%s url=%s error=%s", self.transport_mode.value, url, error)
            return []
        finally:
            if owns_client:
                http.close()

        docs = parse_response(payload, self._field_mapping)
        log.info("Solr request completed: mode=%s count=%d", self.transport_mode.value, len(docs))
        return docs

    def _reject(self, method: str, value: Any) -> SolrQuery:
        log.debug("Ignoring invalid Solr input: method=%s value=%r", method, value)
        self._rejected.append(RejectedCall(method=method, value=value))
        return self


def _is_valid_destination(value: Any) -> bool:
    if is_valid_string(value):
        return True
    return is_valid_list(value) and all(is_valid_string(item) for item in value)


def _normalize_destination(value: str | Sequence[str]) -> str | tuple[str, ...]:
    if isinstance(value, str):
        return str(value)
    return tuple(str(item) for item in value)
