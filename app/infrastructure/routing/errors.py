"""Errors raised while generating URLs from route names."""

from typing import Iterable


class RoutingError(Exception):
    """Base class for URL generation errors."""


class RouteNotFoundError(RoutingError):
    """Raised when no route is registered under the requested name."""

    def __init__(self, route_name: str):
        super().__init__(f"Route not found: {route_name}")
        self.route_name = route_name


class MissingRouteParameterError(RoutingError):
    """Raised when a route needs path parameters that were not supplied."""

    def __init__(self, route_name: str, missing: Iterable[str]):
        self.missing = sorted(missing)
        super().__init__(
            f"Missing parameters for route {route_name}: {', '.join(self.missing)}"
        )
        self.route_name = route_name
