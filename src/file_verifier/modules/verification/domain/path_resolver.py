# src/file_verifier/modules/verification/domain/path_resolver.py
"""
Resolución de ubicaciones relativas contra el directorio base.

Arquitectura: Domain (Servicio puro)
Responsabilidad: Convertir la ubicación declarada en una ruta absoluta, sin I/O.
"""

import os

from file_verifier.modules.verification.domain.value_objects import (
    CheckDefinition,
    ResolvedCheck,
)


def resolve_location(location: str, base_dir: str) -> str:
    """
    Si la ubicación ya es absoluta se devuelve intacta;
    si no, se concatena al directorio base con la semántica de la plataforma.
    """
    if os.path.isabs(location):
        return location
    return os.path.join(base_dir, location)


def resolve_check(definition: CheckDefinition, base_dir: str) -> ResolvedCheck:
    """Produce la verificación resuelta sin tocar la definición original."""
    return ResolvedCheck(
        definition=definition,
        path=resolve_location(definition.location, base_dir),
    )
