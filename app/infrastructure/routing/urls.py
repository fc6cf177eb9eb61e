"""URL generation from named routes.

Wraps the Starlette router so that code can ask for ``og.subscribe`` with
``entity_type_id`` and ``group`` instead of hard-coding paths.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Set, Tuple, Union
from urllib.parse import urlencode

from starlette.requests import Request
from starlette.routing import BaseRoute, NoMatchFound, Router

from infrastructure.routing.errors import MissingRouteParameterError, RouteNotFoundError


@dataclass(frozen=True)
class Url:
    """A site-relative URL: path plus optional query arguments.

    ``query`` may be given as a mapping. It is stored as a tuple of pairs so
    that a Url stays hashable.
    """

    path: str
    query: Union[Tuple[Tuple[str, str], ...], Mapping[str, Any]] = ()
    route_name: Optional[str] = None

    def __post_init__(self):
        pairs = self.query.items() if isinstance(self.query, Mapping) else self.query
        object.__setattr__(self, "query", tuple((k, str(v)) for k, v in pairs))

    @property
    def query_args(self) -> Dict[str, str]:
        return dict(self.query)

    def __str__(self) -> str:
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query)}"


def _iter_routes(routes: Iterable[BaseRoute]) -> Iterator[BaseRoute]:
    for route in routes:
        yield route
        nested = getattr(route, "routes", None)
        if nested is None:
            # FastAPI keeps included routers behind a wrapper route
            nested = getattr(getattr(route, "original_router", None), "routes", None)
        if nested:
            yield from _iter_routes(nested)


class UrlGenerator:
    """Builds Url objects from route names registered on a router."""

    def __init__(self, router: Router):
        self._router = router

    @classmethod
    def from_request(cls, request: Request) -> "UrlGenerator":
        return cls(request.app.router)

    def _expected_params(self, route_name: str) -> Optional[Set[str]]:
        for route in _iter_routes(self._router.routes):
            if getattr(route, "name", None) == route_name:
                return set(getattr(route, "param_convertors", {}) or {})
        return None

    def url_for(
        self,
        route_name: str,
        params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Url:
        """Build the URL for a named route.

        Raises:
            RouteNotFoundError: If no route has this name.
            MissingRouteParameterError: If path parameters are missing.
        """
        path_params = {k: str(v) for k, v in (params or {}).items()}
        try:
            path = self._router.url_path_for(route_name, **path_params)
        except NoMatchFound:
            expected = self._expected_params(route_name)
            missing = (expected or set()) - set(path_params)
            if missing:
                raise MissingRouteParameterError(route_name, missing) from None
            raise RouteNotFoundError(route_name) from None
        return Url(path=str(path), query=query or (), route_name=route_name)


class RedirectDestination:
    """The "destination" query argument that brings a user back to a page.

    An explicit ``destination`` query argument on the current request wins;
    otherwise the current path and query string are used.
    """

    def __init__(self, request: Request):
        self._request = request

    def get(self) -> str:
        explicit = self._request.query_params.get("destination")
        if explicit and is_local_path(explicit):
            return explicit
        path = self._request.url.path
        query = self._request.url.query
        return f"{path}?{query}" if query else path

    def get_as_array(self) -> Dict[str, str]:
        return {"destination": self.get()}


def is_local_path(target: str) -> bool:
    """True for site-relative paths that cannot redirect off-site."""
    return target.startswith("/") and not target.startswith("//") and "\\" not in target
