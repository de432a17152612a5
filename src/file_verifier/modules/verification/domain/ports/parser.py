# src/file_verifier/modules/verification/domain/ports/parser.py
"""
Puerto para el Parser de Definiciones.

Arquitectura: Domain Port (Interface)
Responsabilidad: Deserializar un documento de verificaciones en un CheckList.
"""

from __future__ import annotations

from typing import Protocol, TextIO

from file_verifier.modules.verification.domain.value_objects import CheckList


class CheckFileParser(Protocol):
    """
    Contrato abstracto para parsers de documentos de verificación.

    Implementaciones esperadas:
    - YamlCheckFileParser / JsonCheckFileParser / XmlCheckFileParser (Infraestructura)
    """

    def parse(self, stream: TextIO, source: str | None = None) -> CheckList:
        """
        Args:
            stream: Flujo de texto legible con el documento.
            source: Ruta de origen (solo para diagnóstico).

        Raises:
            DocumentParseError: Documento mal formado.
            MissingLocationError: Alguna entrada no declara 'location'.
        """
        ...
