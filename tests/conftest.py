"""Shared fixtures for blueprint validator tests."""

from __future__ import annotations

import pytest
import structlog
from structlog.testing import LogCapture

from blueprint_validator.models.blueprint_models import (
    BlueprintConfig,
    ModuleInfo,
    Resource,
    ResourceGroup,
    VarInfo,
)
from tests.fakes.fake_provider import FakeModuleProvider, FakePreconditionProvider

VPC_SOURCE = "./modules/network/vpc"
VM_SOURCE = "./modules/compute/vm-instance"


@pytest.fixture
def log_output() -> LogCapture:
    return LogCapture()


@pytest.fixture(autouse=True)
def configure_structlog(log_output: LogCapture):
    """Route every structlog event into the capture, then restore defaults."""
    structlog.configure(processors=[log_output])
    yield
    structlog.reset_defaults()


@pytest.fixture
def global_vars() -> dict:
    return {
        "project_id": "my-proj",
        "region": "us-central1",
        "zone": "us-central1-a",
        "deployment_name": "hpc-small",
        "labels": {"team": "research"},
    }


@pytest.fixture
def precondition_provider() -> FakePreconditionProvider:
    return FakePreconditionProvider(
        projects={"my-proj"},
        regions={"us-central1": "my-proj", "europe-west1": "my-proj"},
        zones={"us-central1-a": "us-central1", "europe-west1-b": "europe-west1"},
    )


@pytest.fixture
def modules() -> dict[str, ModuleInfo]:
    return {
        VPC_SOURCE: ModuleInfo(
            inputs=[
                VarInfo(name="project_id", required=True),
                VarInfo(name="region", required=True),
                VarInfo(name="network_name"),
            ],
            outputs=["network_name", "subnetwork_self_link"],
        ),
        VM_SOURCE: ModuleInfo(
            inputs=[
                VarInfo(name="project_id", required=True),
                VarInfo(name="zone", required=True),
                VarInfo(name="machine_type"),
                VarInfo(name="instance_count"),
            ],
            outputs=["instance_names"],
        ),
    }


@pytest.fixture
def module_provider(modules: dict[str, ModuleInfo]) -> FakeModuleProvider:
    return FakeModuleProvider(modules)


@pytest.fixture
def resource_groups() -> list[ResourceGroup]:
    return [
        ResourceGroup(
            name="primary",
            resources=[
                Resource(
                    id="network1",
                    source=VPC_SOURCE,
                    kind="terraform",
                    settings={"network_name": "hpc-net"},
                    outputs=["network_name"],
                ),
                Resource(
                    id="workstation",
                    source=VM_SOURCE,
                    kind="terraform",
                    settings={"machine_type": "n2-standard-4", "instance_count": 2},
                ),
            ],
        )
    ]


@pytest.fixture
def blueprint(global_vars: dict, resource_groups: list[ResourceGroup]) -> BlueprintConfig:
    return BlueprintConfig(
        blueprint_name="hpc-cluster-small",
        vars=global_vars,
        validation_level="ERROR",
        validators=[
            {"validator": "test_project_exists", "inputs": {"project_id": "((var.project_id))"}},
            {
                "validator": "test_zone_in_region",
                "inputs": {
                    "project_id": "((var.project_id))",
                    "region": "((var.region))",
                    "zone": "((var.zone))",
                },
            },
        ],
        resource_groups=resource_groups,
    )
