# tests/modules/verification/domain/test_check_definitions.py
"""
Tests para: CheckDefinition, CheckList, ResolvedCheck
Tipo: Unitario (Domain)
"""
import dataclasses

import pytest

from file_verifier.modules.verification.domain.value_objects import (
    CheckDefinition,
    CheckList,
    FailureKind,
    ResolvedCheck,
)

# === Casos de Prueba ===


def test_check_definition_defaults_to_existence():
    """
    Given: Solo una ubicación
    When: Se instancia CheckDefinition
    Then: Debe existir y no requiere contenido
    """
    check = CheckDefinition("README.md")

    assert check.must_exist is True
    assert check.content_pattern is None
    assert check.requires_content_check is False
    assert check.describe() == "existence"


def test_check_definition_rejects_empty_location():
    with pytest.raises(ValueError) as exc_info:
        CheckDefinition("  ")

    assert "vacía" in str(exc_info.value)


def test_content_check_only_applies_when_must_exist():
    """
    Given: Un patrón combinado con exists=false
    When: Se consulta requires_content_check
    Then: Es False (el contenido nunca se evalúa)
    """
    with_content = CheckDefinition("out.txt", must_exist=True, content_pattern="foo")
    absence = CheckDefinition("out.txt", must_exist=False, content_pattern="foo")

    assert with_content.requires_content_check is True
    assert with_content.describe() == "content"
    assert absence.requires_content_check is False
    assert absence.describe() == "absence"


def test_check_definition_is_immutable():
    check = CheckDefinition("README.md")

    with pytest.raises(dataclasses.FrozenInstanceError):
        check.location = "/abs/README.md"


def test_check_list_preserves_order():
    checks = (CheckDefinition("a"), CheckDefinition("b"), CheckDefinition("c"))
    check_list = CheckList(checks=checks, source="checks.yaml")

    assert len(check_list) == 3
    assert [c.location for c in check_list] == ["a", "b", "c"]
    assert check_list[1].location == "b"
    assert check_list.source == "checks.yaml"


def test_resolved_check_exposes_absolute_location():
    definition = CheckDefinition("target/out.txt", content_pattern="ok")
    resolved = ResolvedCheck(definition=definition, path="/proj/target/out.txt")

    assert resolved.location == "/proj/target/out.txt"
    assert resolved.definition.location == "target/out.txt"
    assert resolved.must_exist is True
    assert resolved.content_pattern == "ok"


def test_failure_kind_labels():
    assert FailureKind.EXISTENCE.label == "existence"
    assert FailureKind.NON_EXISTENCE.label == "non_existence"
    assert FailureKind.CONTENT.label == "content"
