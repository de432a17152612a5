# src/file_verifier/modules/verification/infrastructure/settings.py
"""
Configuración de la herramienta leída del entorno.

Arquitectura: Infrastructure
Responsabilidad: Traducir variables de entorno (inyectadas por el build anfitrión)
a un objeto inmutable. Los argumentos de la CLI tienen prioridad sobre estos valores.
"""

from __future__ import annotations

import codecs
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def parse_bool(raw: str, name: str) -> bool:
    """Interpreta un booleano textual; cualquier otro valor es un error de configuración."""
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Valor booleano inválido para {name}: {raw!r}")


@dataclass(frozen=True)
class VerifierSettings:
    base_dir: str
    verification_file: Optional[str] = None
    fail_on_error: bool = True
    strict: bool = False
    encoding: str = "utf-8"
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> VerifierSettings:
        env = os.environ if environ is None else environ

        fail_on_error = True
        if env.get("VERIFIER_FAIL_ON_ERROR"):
            fail_on_error = parse_bool(env["VERIFIER_FAIL_ON_ERROR"], "VERIFIER_FAIL_ON_ERROR")

        strict = False
        if env.get("VERIFIER_STRICT"):
            strict = parse_bool(env["VERIFIER_STRICT"], "VERIFIER_STRICT")

        encoding = env.get("VERIFIER_ENCODING") or "utf-8"
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"Codificación desconocida para VERIFIER_ENCODING: {encoding!r}") from None

        level_name = env.get("LOG_LEVEL", "INFO").upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"Nivel de log desconocido: {level_name!r}")

        return cls(
            base_dir=env.get("VERIFIER_BASEDIR") or os.getcwd(),
            verification_file=env.get("VERIFIER_VERIFICATION_FILE") or None,
            fail_on_error=fail_on_error,
            strict=strict,
            encoding=encoding,
            log_level=log_level,
        )
