# src/file_verifier/modules/verification/infrastructure/reporters.py
"""
Adaptadores de reporte de resultados.

Arquitectura: Infrastructure Layer
Responsabilidad: Renderizar VerificationResult para humanos (logging) o máquinas (JSON).
El reporter nunca decide si el build falla: eso depende de has_failures() y fail_on_error.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional, TextIO

from file_verifier.modules.verification.domain.entities import VerificationResult
from file_verifier.modules.verification.domain.ports.reporter import ResultReporter
from file_verifier.modules.verification.domain.value_objects import (
    FailureKind,
    ResolvedCheck,
)


def format_failure(kind: FailureKind, check: ResolvedCheck) -> str:
    """Una línea por verificación fallida: ubicación, naturaleza y patrón si aplica."""
    if kind is FailureKind.EXISTENCE:
        return f"[existence] Archivo no encontrado: {check.location}"
    if kind is FailureKind.NON_EXISTENCE:
        return f"[absence] El archivo no debería existir: {check.location}"
    return (
        f"[content] El archivo {check.location} no contiene el patrón "
        f"{check.content_pattern!r}"
    )


class ConsoleResultReporter:
    """
    Reporter por defecto: emite cada fallo como ERROR y un resumen como INFO.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("verifier.report")

    def report(self, result: VerificationResult) -> None:
        for kind, check in result.iter_failures():
            self._logger.error(format_failure(kind, check))

        if result.has_failures():
            self._logger.info(
                f"Verificación completada: {result.failure_count} fallo(s) en "
                f"{result.checks_run} verificación(es) "
                f"(existencia={len(result.existence_failures)}, "
                f"ausencia={len(result.non_existence_failures)}, "
                f"contenido={len(result.content_failures)})"
            )
        else:
            self._logger.info(
                f"Verificación completada: {result.checks_run} verificación(es) sin fallos"
            )


class JsonResultReporter:
    """Presentación para máquinas (Machine Readable), útil en tuberías/pipes."""

    def __init__(self, stream: Optional[TextIO] = None, indent: Optional[int] = 2):
        self._stream = stream
        self._indent = indent

    def report(self, result: VerificationResult) -> None:
        stream = self._stream or sys.stdout
        stream.write(json.dumps(result.to_dict(), indent=self._indent) + "\n")
        stream.flush()


class CompositeResultReporter:
    """Reenvía el mismo resultado a varios reporters, en orden."""

    def __init__(self, *reporters: ResultReporter):
        self._reporters = reporters

    def report(self, result: VerificationResult) -> None:
        for reporter in self._reporters:
            reporter.report(result)
