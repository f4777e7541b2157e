"""Module metadata provider backed by an in-memory or YAML catalog."""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import structlog
import yaml
from pydantic import ValidationError

from blueprint_validator.core.exceptions import ConfigurationException, ModuleSourceException
from blueprint_validator.models.blueprint_models import ModuleInfo

logger = structlog.get_logger(__name__)


class ModuleCatalog:
    """Serves module metadata by source.

    A catalog file looks like::

        modules:
          ./modules/network/vpc:
            kind: terraform
            inputs:
              - name: project_id
                required: true
            outputs: [network_name]

    The ``kind`` of an entry is optional; when present, lookups with a
    different kind fail.
    """

    def __init__(self, modules: Optional[Dict[str, ModuleInfo]] = None,
                 kinds: Optional[Dict[str, str]] = None):
        self._modules = dict(modules or {})
        self._kinds = dict(kinds or {})
        self.logger = logger.bind(provider="catalog")

    @classmethod
    def from_dict(cls, document: Dict[str, Any]) -> "ModuleCatalog":
        modules = {}
        kinds = {}
        for source, entry in (document.get("modules") or {}).items():
            entry = dict(entry or {})
            kind = entry.pop("kind", None)
            if kind:
                kinds[source] = kind
            try:
                modules[source] = ModuleInfo.model_validate(entry)
            except ValidationError as e:
                raise ConfigurationException(f"invalid module metadata for {source}: {e}") from e
        return cls(modules, kinds)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ModuleCatalog":
        """Load a catalog from a YAML file."""
        try:
            with open(path, 'r') as f:
                document = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationException(f"failed to read module catalog {path}: {e}") from e

        if not isinstance(document, dict):
            raise ConfigurationException(f"module catalog {path} must be a mapping")

        catalog = cls.from_dict(document)
        logger.info("Loaded module catalog", path=str(path), modules=len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._modules)

    def get_module_info(self, source: str, kind: str) -> ModuleInfo:
        if source not in self._modules:
            raise ModuleSourceException(source, f"no module metadata found for source {source}")

        expected_kind = self._kinds.get(source)
        if expected_kind and kind and expected_kind != kind:
            raise ModuleSourceException(
                source, f"module at {source} is of kind {expected_kind}, not {kind}"
            )

        self.logger.debug("Module metadata lookup", source=source, kind=kind)
        return self._modules[source]
