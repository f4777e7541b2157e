from .gcp.client_factory import GCPClientFactory
from .modules.catalog import ModuleCatalog

__all__ = ["GCPClientFactory", "ModuleCatalog"]
