# src/blueprint_validator/cli.py
"""Blueprint validation CLI."""

import sys
import click
import structlog

from blueprint_validator.clients.gcp.client_factory import GCPClientFactory
from blueprint_validator.clients.modules.catalog import ModuleCatalog
from blueprint_validator.config.settings import Settings
from blueprint_validator.core.exceptions import BlueprintException
from blueprint_validator.core.utils import setup_logging
from blueprint_validator.models.blueprint_models import ValidationLevel
from blueprint_validator.models.loader import load_blueprint
from blueprint_validator.validation.orchestrator import validate_blueprint

logger = structlog.get_logger(__name__)


@click.command()
@click.argument('blueprint_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--modules-info', '-m', type=click.Path(exists=True, dir_okay=False),
              help='YAML catalog of module inputs and outputs')
@click.option('--validation-level', '-l',
              type=click.Choice([level.value for level in ValidationLevel], case_sensitive=False),
              help='Override the blueprint validation level (ERROR, WARNING or IGNORE)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def validate(blueprint_path, modules_info, validation_level, verbose, debug):
    """
    Validate a blueprint before deployment.

    Checks run in order and stop at the first failing stage:
    - global variables
    - precondition validators (project, region and zone lookups)
    - resource structure and declared outputs
    - resource settings against module inputs

    Precondition validators query Google Cloud using application default
    credentials, or a service account key set with GCP_CREDENTIALS_FILE.

    Example:
        blueprint-validate blueprint.yaml --modules-info modules.yaml --validation-level WARNING
    """
    settings = Settings.create_from_env()
    log_level = "DEBUG" if debug else settings.log_level.value
    setup_logging(config_path=settings.log_config_path, log_level=log_level,
                  log_format=settings.log_format)

    try:
        blueprint = load_blueprint(blueprint_path)

        level = validation_level.upper() if validation_level else settings.validation_level
        if level:
            blueprint = blueprint.model_copy(update={"validation_level": ValidationLevel(level)})
            logger.debug("Validation level overridden", level=blueprint.validation_level.value)

        catalog = ModuleCatalog.from_file(modules_info) if modules_info else ModuleCatalog()

        if verbose:
            click.echo(f"🔍 Validating blueprint: {blueprint_path}")
            click.echo(f"⚖️  Validation level: {blueprint.validation_level.value}")
            click.echo(f"🧪 Validators requested: {len(blueprint.validators)}")
            click.echo(f"📦 Resource groups: {len(blueprint.resource_groups)}")

        needs_provider = blueprint.validation_level != ValidationLevel.IGNORE and blueprint.validators
        client = None
        if needs_provider:
            client = GCPClientFactory(settings.gcp.model_dump()).create_compute_client()

        try:
            validate_blueprint(blueprint, catalog, client)
        finally:
            if client is not None:
                client.disconnect()

    except BlueprintException as e:
        click.echo(f"❌ Blueprint validation failed: {e}", err=True)
        if debug and e.details:
            click.echo(f"   Details: {e.details}", err=True)
        sys.exit(1)

    click.echo("✅ Blueprint validation passed")


if __name__ == '__main__':
    validate()
