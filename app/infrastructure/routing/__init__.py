"""Named-route URL generation and redirect destinations."""

from infrastructure.routing.errors import (
    MissingRouteParameterError,
    RouteNotFoundError,
    RoutingError,
)
from infrastructure.routing.urls import (
    RedirectDestination,
    Url,
    UrlGenerator,
    is_local_path,
)

__all__ = [
    "MissingRouteParameterError",
    "RouteNotFoundError",
    "RoutingError",
    "RedirectDestination",
    "Url",
    "UrlGenerator",
    "is_local_path",
]
