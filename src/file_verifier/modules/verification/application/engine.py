# src/file_verifier/modules/verification/application/engine.py
"""
Motor de Verificación.

Arquitectura: Application Layer
Responsabilidad: Evaluar cada verificación contra el sistema de archivos
y acumular los fallos en el agregado VerificationResult.
"""

import logging
import re

# === Imports de Dominio ===
from file_verifier.modules.verification.domain.entities import VerificationResult
from file_verifier.modules.verification.domain.exceptions import (
    ContentReadError,
    PatternError,
)
from file_verifier.modules.verification.domain.path_resolver import resolve_check
from file_verifier.modules.verification.domain.ports.file_system import FileSystemPort
from file_verifier.modules.verification.domain.value_objects import (
    CheckList,
    ResolvedCheck,
)

logger = logging.getLogger("verifier.engine")


class VerificationEngine:
    """
    Evalúa las verificaciones en orden, de forma estrictamente secuencial.

    Reglas por verificación:
    1. Existencia (o ausencia). Si falla, se registra y no se sigue.
    2. Contenido, solo si must_exist y hay patrón: búsqueda en cualquier parte del texto.

    Errores fatales (PatternError, ContentReadError) abortan la ejecución completa.
    """

    def __init__(self, file_system: FileSystemPort):
        self.fs = file_system

    def run(self, check_list: CheckList, base_dir: str) -> VerificationResult:
        result = VerificationResult()

        for definition in check_list:
            check = resolve_check(definition, base_dir)
            result.record_check()

            if not self._verify_existence(check, result):
                continue

            if definition.requires_content_check:
                self._verify_content(check, result)

        logger.debug(
            f"Ejecutadas {result.checks_run} verificaciones, {result.failure_count} fallo(s)"
        )
        return result

    def _verify_existence(self, check: ResolvedCheck, result: VerificationResult) -> bool:
        if check.must_exist:
            logger.debug(f"Verificando existencia de {check.path}")
            if not self.fs.exists(check.path):
                result.add_existence_failure(check)
                return False
        else:
            logger.debug(f"Verificando ausencia de {check.path}")
            if self.fs.exists(check.path):
                result.add_non_existence_failure(check)
                return False
        return True

    def _verify_content(self, check: ResolvedCheck, result: VerificationResult) -> bool:
        logger.debug(f"Verificando contenido de {check.path}")

        try:
            pattern = re.compile(check.content_pattern)
        except (re.error, OverflowError) as e:
            raise PatternError(check.content_pattern, e) from e

        # La lectura sigue a una existencia confirmada: si falla es un problema
        # del entorno, no un fallo de verificación.
        try:
            content = self.fs.read_text(check.path)
        except OSError as e:
            raise ContentReadError(check.path, e) from e

        if pattern.search(content):
            return True

        result.add_content_failure(check)
        return False
