"""Request-composition framework shared by every management API endpoint.

A request object captures the caller-configurable parameters of one API
operation. It never talks to the network: given a factory that turns
``(method, relative path)`` into a :class:`PreparedRequest`, it returns that
prepared call with its query parameters and JSON body attached. The client's
single ``query()`` execution path dispatches it and decodes the body into the
request's declared ``response_type``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar, get_args

from pydantic_core import PydanticSerializationError, to_jsonable_python

from auth0_management.exceptions import RequestEncodeError
from auth0_management.models.page import Page
from auth0_management.models.sort import Sort, SortOrder
from auth0_management.models.user import User

if TYPE_CHECKING:
    from auth0_management.client import Auth0

R = TypeVar("R")


@dataclass
class PreparedRequest:
    """A fully described HTTP call that has not been dispatched yet."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    body: Any = None
    has_body: bool = False

    def query(self, params: Mapping[str, Any]) -> PreparedRequest:
        """Attach query parameters, skipping any that are None."""
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            self.params[key] = str(value)
        return self

    def json(self, body: Any) -> PreparedRequest:
        """Attach a JSON body.

        Raises:
            RequestEncodeError: If the body holds values with no JSON form.
        """
        try:
            self.body = to_jsonable_python(body)
        except PydanticSerializationError as exc:
            raise RequestEncodeError(f"Request body is not JSON serializable: {exc}") from exc
        self.has_body = True
        return self

    def header(self, name: str, value: str) -> PreparedRequest:
        self.headers[name] = value
        return self


Factory = Callable[[str, str], PreparedRequest]


class RequestBuilder(ABC, Generic[R]):
    """Contract every request object implements."""

    @property
    @abstractmethod
    def response_type(self) -> Any:
        """Type the response body is decoded into; None for empty responses."""

    @abstractmethod
    def build(self, factory: Factory) -> PreparedRequest:
        """Produce the configured call without performing any I/O."""


class RelativeRequestBuilder(RequestBuilder[R]):
    """Request whose path is computed from its own state, relative to the client's base URL.

    Subclasses declare ``method`` and ``path`` and override ``query_params()``
    and/or ``body()`` when the endpoint takes them.
    """

    method: ClassVar[str] = "GET"

    @property
    @abstractmethod
    def path(self) -> str:
        """Path relative to the tenant base URL, e.g. ``api/v2/users/{id}``."""

    def query_params(self) -> dict[str, Any]:
        return {}

    def body(self) -> dict[str, Any] | None:
        return None

    def build(self, factory: Factory) -> PreparedRequest:
        prepared = factory(self.method, self.path).query(self.query_params())
        body = self.body()
        if body is not None:
            prepared.json(body)
        return prepared


class BoundRequestBuilder(RelativeRequestBuilder[R]):
    """Request that remembers the client it was created from and can send itself."""

    def __init__(self, client: Auth0) -> None:
        self._client = client

    @property
    def client(self) -> Auth0:
        return self._client

    def send(self) -> R:
        return self._client.query(self)


class Pageable:
    """Fluent pagination setters over an embedded :class:`Page`."""

    _page: Page

    def page(self, page: int) -> Self:
        """Zero-based index of the page to return."""
        self._page.page = page
        return self

    def per_page(self, per_page: int) -> Self:
        """Number of results per page."""
        self._page.per_page = per_page
        return self

    def include_totals(self, include_totals: bool) -> Self:
        """Return results inside an object that also holds the total count (true)."""
        self._page.include_totals = include_totals
        return self

    def _page_params(self) -> dict[str, str]:
        return self._page.to_params()

    def _wants_totals(self) -> bool:
        return bool(self._page.include_totals)


class Sortable:
    """Fluent sort setter over an embedded :class:`Sort`."""

    _sort: Sort

    def sort(self, field: str, order: SortOrder = SortOrder.ASCENDING) -> Self:
        """Field to sort by and direction."""
        self._sort.set(field, order)
        return self

    def _sort_params(self) -> dict[str, str]:
        param = self._sort.to_param()
        return {"sort": param} if param is not None else {}


class MetadataGeneric:
    """Resolves ``User[A, U]`` from a request parametrized as ``Request[A, U](...)``."""

    def _metadata_types(self) -> tuple[Any, Any]:
        args = get_args(getattr(self, "__orig_class__", None))
        if len(args) == 2:
            return args[0], args[1]
        return Any, Any

    def _user_type(self) -> Any:
        app_type, user_type = self._metadata_types()
        return User[app_type, user_type]


class FieldSelectable:
    """Fluent ``fields`` / ``include_fields`` setters for endpoints returning records."""

    _fields: list[str] | None = None
    _include_fields: bool | None = None

    def fields(self, fields: list[str], include: bool = True) -> Self:
        """Restrict (include=True) or strip (include=False) the returned fields."""
        self._fields = list(fields)
        self._include_fields = include
        return self

    def _fields_params(self) -> dict[str, str]:
        if not self._fields:
            return {}
        return {
            "fields": ",".join(self._fields),
            "include_fields": "true" if self._include_fields is not False else "false",
        }
