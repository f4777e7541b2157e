"""Load a blueprint document into a BlueprintConfig."""

from pathlib import Path
from typing import Any, Dict, List, Union

import structlog
import yaml
from pydantic import ValidationError

from blueprint_validator.core.exceptions import ConfigurationException
from .blueprint_models import BlueprintConfig, ValidatorName

logger = structlog.get_logger(__name__)


def _var_ref(name: str) -> str:
    return f"((var.{name}))"


def default_validators(variables: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Build the validators run when a blueprint does not request any.

    Nothing is added without a ``project_id``; region and zone checks are
    added for whichever of those variables are defined.
    """
    if "project_id" not in variables:
        return []

    validators = [{
        "validator": ValidatorName.TEST_PROJECT_EXISTS.value,
        "inputs": {"project_id": _var_ref("project_id")},
    }]

    has_region = "region" in variables
    has_zone = "zone" in variables

    if has_region:
        validators.append({
            "validator": ValidatorName.TEST_REGION_EXISTS.value,
            "inputs": {"project_id": _var_ref("project_id"), "region": _var_ref("region")},
        })
    if has_zone:
        validators.append({
            "validator": ValidatorName.TEST_ZONE_EXISTS.value,
            "inputs": {"project_id": _var_ref("project_id"), "zone": _var_ref("zone")},
        })
    if has_region and has_zone:
        validators.append({
            "validator": ValidatorName.TEST_ZONE_IN_REGION.value,
            "inputs": {
                "project_id": _var_ref("project_id"),
                "region": _var_ref("region"),
                "zone": _var_ref("zone"),
            },
        })
    return validators


def parse_blueprint(document: Dict[str, Any]) -> BlueprintConfig:
    """Validate a loaded blueprint document, adding default validators if none are given."""
    if not isinstance(document, dict):
        raise ConfigurationException("blueprint document must be a mapping")

    document = dict(document)
    if "validators" not in document:
        document["validators"] = default_validators(document.get("vars") or {})
        logger.debug("Added default validators", count=len(document["validators"]))

    try:
        return BlueprintConfig.model_validate(document)
    except ValidationError as e:
        raise ConfigurationException(f"invalid blueprint: {e}", {"errors": e.errors()}) from e


def load_blueprint(path: Union[str, Path]) -> BlueprintConfig:
    """Read a blueprint YAML file."""
    path = Path(path)
    try:
        with open(path, 'r') as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationException(f"failed to read the blueprint at {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationException(
            f"failed to parse the blueprint in {path}, check YAML syntax for errors: {e}"
        ) from e

    blueprint = parse_blueprint(document or {})
    logger.info("Loaded blueprint", path=str(path), groups=len(blueprint.resource_groups))
    return blueprint
