# Re-exported groups must still be discovered only once.
from .groups import HealthEndpointGroup, SampleEndpointGroup

__all__ = ["HealthEndpointGroup", "SampleEndpointGroup"]
