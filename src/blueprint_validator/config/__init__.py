from .settings import Settings, GCPSettings, LogLevel

__all__ = ["Settings", "GCPSettings", "LogLevel"]
