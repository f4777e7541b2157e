"""Pre-deployment validation for infrastructure blueprints."""

from .models import BlueprintConfig, load_blueprint
from .validation import BlueprintValidator, validate_blueprint

__version__ = "0.1.0"

__all__ = [
    "BlueprintConfig",
    "BlueprintValidator",
    "load_blueprint",
    "validate_blueprint",
]
