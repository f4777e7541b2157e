from .catalog import ModuleCatalog

__all__ = ["ModuleCatalog"]
