"""Structural and settings validation of blueprint resources."""

import re
from typing import Sequence

from blueprint_validator.core.base_client import ModuleInfoProvider
from blueprint_validator.core.exceptions import (
    ModuleSourceException,
    ResourceValidationException,
    SettingsValidationException,
)
from blueprint_validator.core.utils import resource_to_yaml
from blueprint_validator.models.blueprint_models import (
    BlueprintConfig,
    ModuleInfo,
    Resource,
    ResourceGroup,
    is_valid_kind,
)
from .base import ValidationStage

ERROR_MESSAGES = {
    "empty_id": "a module id cannot be empty",
    "empty_source": "a module source cannot be empty",
    "wrong_kind": "wrong kind: a module kind is invalid",
    "empty_group_name": "group name must be set for each resource group",
    "illegal_chars": "invalid character(s) found in group name",
    "invalid_output": "requested output was not found in the module",
    "extra_setting": "unexpected setting: a setting was added that is not found in the module",
}

GROUP_NAME_PATTERN = re.compile(r"^[\w+]+\s*[\w+.-]+$")


def has_illegal_chars(name: str) -> bool:
    return GROUP_NAME_PATTERN.match(name) is None


def check_group_name(group: ResourceGroup) -> None:
    if not group.name:
        raise ResourceValidationException(ERROR_MESSAGES["empty_group_name"])
    if has_illegal_chars(group.name):
        raise ResourceValidationException(f"{ERROR_MESSAGES['illegal_chars']}: {group.name}")


def check_resource(resource: Resource) -> None:
    """Require an id, a source and a recognized kind."""
    if not resource.id:
        raise ResourceValidationException(
            f"{ERROR_MESSAGES['empty_id']}\n{resource_to_yaml(resource)}")
    if not resource.source:
        raise ResourceValidationException(
            f"{ERROR_MESSAGES['empty_source']}\n{resource_to_yaml(resource)}", resource.id)
    if not is_valid_kind(resource.kind):
        raise ResourceValidationException(
            f"{ERROR_MESSAGES['wrong_kind']}\n{resource_to_yaml(resource)}", resource.id)


def check_outputs(resource: Resource, module_info: ModuleInfo) -> None:
    """Ensure every declared output exists in the underlying module."""
    if not resource.outputs:
        return

    outputs = module_info.get_outputs_as_map()
    for output in resource.outputs:
        if output not in outputs:
            raise ResourceValidationException(
                f"{ERROR_MESSAGES['invalid_output']}, module: {resource.id} output: {output}",
                resource.id
            )


def check_settings(resource: Resource, module_info: ModuleInfo) -> None:
    """Ensure every setting names an input of the underlying module.

    Required flags are not enforced here; only the existence of each key.
    """
    inputs = module_info.get_inputs_as_map()
    for key in resource.settings:
        if key not in inputs:
            raise SettingsValidationException(
                f"{ERROR_MESSAGES['extra_setting']}: Module ID: {resource.id} Setting: {key}",
                resource_id=resource.id,
                setting=key
            )


class ResourceValidator(ValidationStage):
    """Structural checks on every resource, stopping at the first failure."""

    def __init__(self, module_provider: ModuleInfoProvider):
        super().__init__()
        self.module_provider = module_provider

    def get_stage_name(self) -> str:
        return "resources"

    def run(self, blueprint: BlueprintConfig) -> None:
        self.validate(blueprint.resource_groups)

    def _module_info(self, group: ResourceGroup, resource: Resource) -> ModuleInfo:
        cached = group.modules_info.get(resource.source)
        if cached is not None:
            return cached
        try:
            return self.module_provider.get_module_info(resource.source, resource.kind)
        except ModuleSourceException as e:
            raise ModuleSourceException(
                resource.source,
                f"failed to get info for module at {resource.source} while validating module outputs: {e}"
            ) from e

    def validate(self, groups: Sequence[ResourceGroup]) -> None:
        for group in groups:
            check_group_name(group)
            for resource in group.resources:
                check_resource(resource)
                if resource.outputs:
                    check_outputs(resource, self._module_info(group, resource))
        self.logger.debug("Resources are structurally valid", groups=len(groups))


class SettingsValidator(ValidationStage):
    """Checks resource settings against module inputs, stopping at the first failure."""

    def __init__(self, module_provider: ModuleInfoProvider):
        super().__init__()
        self.module_provider = module_provider

    def get_stage_name(self) -> str:
        return "settings"

    def run(self, blueprint: BlueprintConfig) -> None:
        self.validate(blueprint.resource_groups)

    def validate(self, groups: Sequence[ResourceGroup]) -> None:
        for group in groups:
            for resource in group.resources:
                try:
                    info = self.module_provider.get_module_info(resource.source, resource.kind)
                except ModuleSourceException as e:
                    raise ModuleSourceException(
                        resource.source,
                        f"failed to get info for module at {resource.source} "
                        f"while validating module settings: {e}"
                    ) from e

                try:
                    check_settings(resource, info)
                except SettingsValidationException as e:
                    raise SettingsValidationException(
                        f"found an issue while validating settings for module at {resource.source}: {e}",
                        resource_id=e.resource_id,
                        setting=e.setting
                    ) from e
        self.logger.debug("Resource settings are valid", groups=len(groups))
