# src/file_verifier/modules/verification/domain/entities.py
"""
Agregado de resultados del dominio de Verificación.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Acumular los fallos categorizados de una ejecución de verificación.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

# === Imports del Mismo Módulo ===
from .value_objects import FailureKind, ResolvedCheck

# === Guía de Organización ===
# ✅ ESTADO: Muta solo a través de métodos (add_*), nunca por asignación directa.
# ✅ CICLO DE VIDA: Se crea vacío, lo llena el motor y lo lee el reporter una vez.


@dataclass
class VerificationResult:
    """
    Agregado Raíz (Root Aggregate) de una ejecución de verificación.

    Tres secuencias independientes y ordenadas de fallos. Sin validación ni
    deduplicación: el motor garantiza que cada verificación aporta a lo sumo
    a una secuencia.
    """

    _existence_failures: list[ResolvedCheck] = field(default_factory=list)
    _non_existence_failures: list[ResolvedCheck] = field(default_factory=list)
    _content_failures: list[ResolvedCheck] = field(default_factory=list)
    checks_run: int = 0

    def add_existence_failure(self, check: ResolvedCheck) -> None:
        self._existence_failures.append(check)

    def add_non_existence_failure(self, check: ResolvedCheck) -> None:
        self._non_existence_failures.append(check)

    def add_content_failure(self, check: ResolvedCheck) -> None:
        self._content_failures.append(check)

    def record_check(self) -> None:
        """Cuenta una verificación evaluada (haya fallado o no)."""
        self.checks_run += 1

    def has_failures(self) -> bool:
        """Única fuente de verdad para decidir si la ejecución falló."""
        return bool(
            self._existence_failures
            or self._non_existence_failures
            or self._content_failures
        )

    @property
    def existence_failures(self) -> list[ResolvedCheck]:
        return list(self._existence_failures)

    @property
    def non_existence_failures(self) -> list[ResolvedCheck]:
        return list(self._non_existence_failures)

    @property
    def content_failures(self) -> list[ResolvedCheck]:
        return list(self._content_failures)

    @property
    def failure_count(self) -> int:
        return (
            len(self._existence_failures)
            + len(self._non_existence_failures)
            + len(self._content_failures)
        )

    def iter_failures(self) -> Iterator[tuple[FailureKind, ResolvedCheck]]:
        """Recorre los fallos por categoría: existencia, ausencia, contenido."""
        for check in self._existence_failures:
            yield FailureKind.EXISTENCE, check
        for check in self._non_existence_failures:
            yield FailureKind.NON_EXISTENCE, check
        for check in self._content_failures:
            yield FailureKind.CONTENT, check

    def to_dict(self) -> dict[str, Any]:
        """DTO serializable para reportes legibles por máquinas."""

        def _dto(check: ResolvedCheck) -> dict[str, Any]:
            dto: dict[str, Any] = {
                "location": check.location,
                "declared_location": check.definition.location,
                "exists": check.must_exist,
            }
            if check.content_pattern is not None:
                dto["contains"] = check.content_pattern
            return dto

        return {
            "checks_run": self.checks_run,
            "has_failures": self.has_failures(),
            "existence_failures": [_dto(c) for c in self._existence_failures],
            "non_existence_failures": [_dto(c) for c in self._non_existence_failures],
            "content_failures": [_dto(c) for c in self._content_failures],
        }
