from .client_factory import GCPClientFactory
from .compute_client import ComputeClient


__all__ = [
    "GCPClientFactory",
    "ComputeClient"
]
