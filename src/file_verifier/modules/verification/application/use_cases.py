# src/file_verifier/modules/verification/application/use_cases.py
"""
Casos de Uso para la Verificación de Archivos.

Arquitectura: Modular Monolith
Capa: Application
Responsabilidad: Coordinar carga del archivo de verificaciones → motor → reporte,
y traducir el resultado a un desenlace explícito (sin excepciones como control de flujo).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from file_verifier.modules.verification.application.engine import VerificationEngine

# === Imports de Dominio ===
from file_verifier.modules.verification.domain.entities import VerificationResult
from file_verifier.modules.verification.domain.exceptions import VerificationError
from file_verifier.modules.verification.domain.path_resolver import resolve_location
from file_verifier.modules.verification.domain.ports.file_system import FileSystemPort
from file_verifier.modules.verification.domain.ports.reporter import ResultReporter
from file_verifier.modules.verification.domain.value_objects import CheckList

# ✅ Instrumentación (Observabilidad)
from file_verifier.modules.verification.infrastructure.observability import (
    ObservabilityService,
)
from file_verifier.modules.verification.infrastructure.parsers import load_check_file

logger = logging.getLogger("verifier.app")

DEFAULT_CHECK_FILE_DIR = os.path.join("src", "test", "verifier")
DEFAULT_CHECK_FILE_NAMES = (
    "verifications.yaml",
    "verifications.yml",
    "verifications.json",
    "verifications.xml",
)
FAILURE_MESSAGE = "Hay fallos de verificación"

CheckFileLoader = Callable[[str, bool], CheckList]


class OutcomeStatus(Enum):
    """
    Desenlace de una ejecución completa.
    """

    PASSED = auto()  # Sin fallos
    FAILED = auto()  # Fallos y fail_on_error activo
    FAILED_TOLERATED = auto()  # Fallos reportados, pero fail_on_error desactivado
    CONFIG_ERROR = auto()  # Error fatal: sin resultado parcial


@dataclass(frozen=True)
class VerificationOutcome:
    """
    Resultado discriminado del caso de uso.
    CONFIG_ERROR nunca lleva resultado; el resto siempre lo lleva.
    """

    status: OutcomeStatus
    result: Optional[VerificationResult] = None
    error: Optional[VerificationError] = None
    verification_file: Optional[str] = None

    @property
    def should_fail_build(self) -> bool:
        return self.status in (OutcomeStatus.FAILED, OutcomeStatus.CONFIG_ERROR)

    @property
    def message(self) -> str:
        if self.status is OutcomeStatus.CONFIG_ERROR:
            return f"Error durante la verificación de archivos: {self.error}"
        if self.status is OutcomeStatus.FAILED:
            return FAILURE_MESSAGE
        if self.status is OutcomeStatus.FAILED_TOLERATED:
            return f"{FAILURE_MESSAGE} (ignorados: fail_on_error desactivado)"
        return "Todas las verificaciones pasaron"


def default_verification_file(base_dir: str) -> str:
    """
    Primer archivo existente de src/test/verifier/verifications.{yaml,yml,json,xml};
    si no hay ninguno, la variante .yaml (que luego fallará como CheckFileError).
    """
    candidates = [
        os.path.join(base_dir, DEFAULT_CHECK_FILE_DIR, name)
        for name in DEFAULT_CHECK_FILE_NAMES
    ]
    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate
    return candidates[0]


class VerifyFiles:
    """
    Caso de Uso Principal: verificar los archivos declarados y reportar.

    Colaboradores:
    - file_system: FileSystemPort (Puerto)
    - reporter: ResultReporter (Puerto)
    - loader: función que produce el CheckList (por defecto, load_check_file)
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        reporter: ResultReporter,
        loader: CheckFileLoader = load_check_file,
    ):
        # Inyección de Dependencias (DIP)
        self.engine = VerificationEngine(file_system)
        self.reporter = reporter
        self.loader = loader

    @ObservabilityService.measure_latency(operation_name="verify_files")
    def execute(
        self,
        base_dir: str,
        verification_file: Optional[str] = None,
        fail_on_error: bool = True,
        strict: bool = False,
    ) -> VerificationOutcome:
        if verification_file is None:
            verification_file = default_verification_file(base_dir)
        else:
            verification_file = resolve_location(verification_file, base_dir)

        logger.info(f"Verificando archivos declarados en: {verification_file}")

        try:
            check_list = self.loader(verification_file, strict)
            result = self.engine.run(check_list, base_dir)
        except VerificationError as e:
            logger.error(f"Error fatal de configuración: {e}")
            return VerificationOutcome(
                status=OutcomeStatus.CONFIG_ERROR,
                error=e,
                verification_file=verification_file,
            )

        self.reporter.report(result)

        if not result.has_failures():
            status = OutcomeStatus.PASSED
        elif fail_on_error:
            status = OutcomeStatus.FAILED
        else:
            status = OutcomeStatus.FAILED_TOLERATED
            logger.warning(f"{FAILURE_MESSAGE}, pero fail_on_error está desactivado")

        return VerificationOutcome(
            status=status, result=result, verification_file=verification_file
        )
