# src/file_verifier/modules/verification/entry_points/cli.py
"""
Interfaz de Línea de Comandos (CLI) para el Módulo de Verificación.

Arquitectura: Interface Adapter (adaptador del build anfitrión)
Responsabilidad:
    1. Parsear argumentos (argv) sobre la configuración del entorno.
    2. Instanciar el Composition Root.
    3. Traducir el desenlace a un código de salida.

Códigos de salida:
    0   → sin fallos (o fallos tolerados con --no-fail-on-error)
    1   → fallos de verificación con fail-on-error
    2   → error fatal de configuración
    3   → error inesperado
    130 → cancelado por el usuario
"""

import argparse
import logging
import os
import sys
from typing import Optional

from file_verifier.modules.verification.application.use_cases import (
    OutcomeStatus,
    VerifyFiles,
)
from file_verifier.modules.verification.infrastructure.adapters import (
    LocalFileSystemAdapter,
)
from file_verifier.modules.verification.infrastructure.observability import (
    configure_logging,
)
from file_verifier.modules.verification.infrastructure.reporters import (
    ConsoleResultReporter,
    JsonResultReporter,
)
from file_verifier.modules.verification.infrastructure.settings import VerifierSettings

EXIT_OK = 0
EXIT_VERIFICATION_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_UNEXPECTED = 3
EXIT_INTERRUPTED = 130

logger = logging.getLogger("verifier.cli")


def setup_parser(settings: VerifierSettings) -> argparse.ArgumentParser:
    """Configura los argumentos aceptados; los valores por defecto vienen del entorno."""
    parser = argparse.ArgumentParser(
        prog="file-verifier",
        description="Verifica existencia, ausencia y contenido de archivos tras el build",
        epilog="Ejemplo: file-verifier --basedir . --verification-file checks.yaml",
    )

    parser.add_argument(
        "--basedir",
        default=settings.base_dir,
        help="Directorio base para ubicaciones relativas (default: VERIFIER_BASEDIR o cwd)",
    )
    parser.add_argument(
        "--verification-file",
        default=settings.verification_file,
        help="Archivo de verificaciones (default: src/test/verifier/verifications.yaml)",
    )
    parser.add_argument(
        "--fail-on-error",
        dest="fail_on_error",
        action=argparse.BooleanOptionalAction,
        default=settings.fail_on_error,
        help="Falla el build si hay fallos de verificación (default: true)",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=settings.strict,
        help="Rechaza 'contains' combinado con exists=false",
    )
    parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Formato del reporte (default: console)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Archivo opcional para logs forenses (nivel DEBUG)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs detallados de cada verificación",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    try:
        settings = VerifierSettings.from_env()
    except ValueError as e:
        print(f"❌ Error de configuración: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    args = setup_parser(settings).parse_args(argv)

    configure_logging(
        level=logging.DEBUG if args.verbose else settings.log_level,
        log_file=args.log_file,
    )

    try:
        # Composition Root (Wiring)
        fs = LocalFileSystemAdapter(encoding=settings.encoding)
        reporter = (
            JsonResultReporter() if args.format == "json" else ConsoleResultReporter()
        )
        use_case = VerifyFiles(file_system=fs, reporter=reporter)

        outcome = use_case.execute(
            base_dir=os.path.abspath(args.basedir),
            verification_file=args.verification_file,
            fail_on_error=args.fail_on_error,
            strict=args.strict,
        )
    except KeyboardInterrupt:
        print("\n⚠️  Operación cancelada por el usuario.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        # Errores inesperados (Bugs)
        logger.exception(f"Error crítico: {e}")
        return EXIT_UNEXPECTED

    if outcome.status is OutcomeStatus.CONFIG_ERROR:
        print(f"❌ {outcome.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    if outcome.status is OutcomeStatus.FAILED:
        print(f"❌ {outcome.message}", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
