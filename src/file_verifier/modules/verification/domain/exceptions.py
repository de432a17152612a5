# src/file_verifier/modules/verification/domain/exceptions.py
"""
Excepciones del dominio de Verificación.

Arquitectura: Domain Layer
Responsabilidad: Definir errores fatales de configuración, independientes de la infraestructura.

Nota: Un fallo de verificación (archivo ausente, contenido sin coincidencia)
NO es una excepción; se registra en VerificationResult.
"""

from __future__ import annotations

from typing import Optional


class VerificationError(Exception):
    """
    Clase base para errores fatales que abortan toda la ejecución.
    Envuelve la causa subyacente (OSError, error de sintaxis, regex inválida).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class CheckFileError(VerificationError):
    """El archivo de verificaciones no existe o no se puede leer."""

    pass


class DocumentParseError(VerificationError):
    """El documento de verificaciones está mal formado (sintaxis o estructura)."""

    pass


class MissingLocationError(DocumentParseError):
    """Una entrada del documento no declara 'location'."""

    def __init__(self, index: int):
        super().__init__(f"Falta el elemento 'location' en la verificación #{index}")
        self.index = index


class InvalidCheckError(DocumentParseError):
    """Combinación de campos rechazada en modo estricto (ej: contains + exists=false)."""

    pass


class PatternError(VerificationError):
    """El patrón 'contains' no es una expresión regular válida."""

    def __init__(self, pattern: str, cause: Optional[BaseException] = None):
        super().__init__(f"Expresión regular inválida: {pattern!r}", cause)
        self.pattern = pattern


class ContentReadError(VerificationError):
    """El archivo existía pero su contenido no pudo leerse (permisos, carrera, directorio)."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(f"No se pudo leer el contenido de {path}", cause)
        self.path = path
