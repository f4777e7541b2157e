"""Check that a validator received exactly the inputs it requires."""

from typing import Any, Iterable, Mapping
import structlog

from blueprint_validator.core.exceptions import InputContractException

logger = structlog.get_logger(__name__)


def check_inputs(name: str, supplied: Mapping[str, Any], required: Iterable[str]) -> None:
    """Raise InputContractException unless supplied keys equal required names.

    Each missing input is logged on its own line before failing. Surplus
    inputs are all named in the exception.
    """
    required = set(required)
    supplied_keys = set(supplied)

    missing = required - supplied_keys
    for input_name in sorted(missing):
        logger.warning(f"a required input {input_name} was not provided to {name}!",
                       validator=name, input=input_name)

    surplus = supplied_keys - required
    if missing or surplus:
        raise InputContractException(name, missing=missing, surplus=surplus)
