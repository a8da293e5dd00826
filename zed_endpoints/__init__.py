"""Convention-based endpoint and endpoint-group registration for FastAPI.

Declare :class:`Endpoint` and :class:`EndpointGroup` subclasses in a module or
package and call :func:`map_endpoint_groups` once at startup to discover and
mount them.
"""

from .abstractions import Endpoint, EndpointGroup, RouteSurface
from .attributes import has_no_global_prefix, no_global_prefix
from .errors import EndpointConfigurationError
from .extensions import (
    discover_endpoint_groups,
    map_endpoint,
    map_endpoint_groups,
    map_endpoints,
)
from .paths import normalize_prefix

__all__ = [
    "Endpoint",
    "EndpointConfigurationError",
    "EndpointGroup",
    "RouteSurface",
    "discover_endpoint_groups",
    "has_no_global_prefix",
    "map_endpoint",
    "map_endpoint_groups",
    "map_endpoints",
    "no_global_prefix",
    "normalize_prefix",
]
