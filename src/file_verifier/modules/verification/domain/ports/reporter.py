# src/file_verifier/modules/verification/domain/ports/reporter.py
"""
Puerto para el renderizado de resultados.

Arquitectura: Domain Port (Interface)
Responsabilidad: Desacoplar el motor (que solo emite VerificationResult) del destino del reporte.
"""

from __future__ import annotations

from typing import Protocol

from file_verifier.modules.verification.domain.entities import VerificationResult


class ResultReporter(Protocol):
    """
    Implementaciones esperadas:
    - ConsoleResultReporter (logging)
    - JsonResultReporter (pipes / CI)
    """

    def report(self, result: VerificationResult) -> None:
        """Debe exponer las tres categorías de fallo, sin decidir el éxito del build."""
        ...
