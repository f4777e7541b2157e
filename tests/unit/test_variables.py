"""Tests for the global variable checker and value classification."""

from __future__ import annotations

import pytest
from structlog.testing import LogCapture

from blueprint_validator.core.exceptions import VariableValidationException
from blueprint_validator.models.variables import VarKind, classify_value
from blueprint_validator.validation.variables import GlobalVariableChecker


class TestClassifyValue:
    @pytest.mark.parametrize("value,kind", [
        ("us-central1", VarKind.STRING),
        ({"team": "research"}, VarKind.MAPPING),
        ({}, VarKind.MAPPING),
        (None, VarKind.NULL),
        (3, VarKind.OTHER),
        (["a", "b"], VarKind.OTHER),
        ({1: "one"}, VarKind.OTHER),
    ])
    def test_kinds(self, value, kind) -> None:
        assert classify_value(value) is kind


class TestGlobalVariableChecker:
    def test_valid_variables(self, global_vars: dict, log_output: LogCapture) -> None:
        GlobalVariableChecker().check(global_vars)
        assert log_output.entries == []

    def test_missing_project_id_only_warns(self, log_output: LogCapture) -> None:
        GlobalVariableChecker().check({"region": "us-central1"})

        assert log_output.entries[0]["event"] == "WARNING: No project_id in global variables"
        assert log_output.entries[0]["log_level"] == "warning"

    def test_null_value_names_key(self, global_vars: dict) -> None:
        with pytest.raises(VariableValidationException) as exc_info:
            GlobalVariableChecker().check({**global_vars, "network_name": None})

        assert exc_info.value.key == "network_name"
        assert str(exc_info.value) == "global variable network_name was not set"

    @pytest.mark.parametrize("labels", ["team=research", ["team"], 7, {1: "numeric"}])
    def test_labels_must_be_a_map(self, global_vars: dict, labels) -> None:
        with pytest.raises(VariableValidationException) as exc_info:
            GlobalVariableChecker().check({**global_vars, "labels": labels})
        assert str(exc_info.value) == "vars.labels must be a map"

    def test_null_labels_reported_as_type_error(self, global_vars: dict) -> None:
        with pytest.raises(VariableValidationException, match="vars.labels must be a map"):
            GlobalVariableChecker().check({**global_vars, "labels": None})

    def test_empty_table(self) -> None:
        GlobalVariableChecker().check({})
