# src/file_verifier/modules/verification/domain/value_objects.py
"""
Value Objects para el Bounded Context de Verificación.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Definir inmutables para las comprobaciones declarativas de archivos.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from file_verifier.core.value_objects import NonEmptyString

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y lógica de validación pura.
# ❌ SIN I/O: No consultar el disco aquí. La resolución de rutas vive en path_resolver.


@dataclass(frozen=True)
class CheckDefinition:
    """
    Una aserción declarativa sobre una ruta del sistema de archivos.

    - must_exist=True  → la ruta debe existir.
    - must_exist=False → la ruta NO debe existir.
    - content_pattern  → regex que el contenido debe contener (solo si must_exist).

    La ubicación se conserva tal como se escribió en el archivo de verificaciones;
    la forma absoluta vive en ResolvedCheck.
    """

    location: str
    must_exist: bool = True
    content_pattern: Optional[str] = None

    def __post_init__(self):
        try:
            NonEmptyString(self.location)
        except ValueError:
            raise ValueError(
                "La ubicación de la verificación no puede estar vacía."
            ) from None

    @property
    def requires_content_check(self) -> bool:
        """El contenido solo se evalúa en verificaciones de existencia."""
        return self.must_exist and self.content_pattern is not None

    def describe(self) -> str:
        if self.requires_content_check:
            return "content"
        return "existence" if self.must_exist else "absence"


@dataclass(frozen=True)
class CheckList:
    """
    Colección ordenada de verificaciones producida por el parser.
    El orden no altera el resultado, solo el orden de los logs.
    """

    checks: tuple[CheckDefinition, ...] = ()
    source: Optional[str] = None

    def __iter__(self) -> Iterator[CheckDefinition]:
        return iter(self.checks)

    def __len__(self) -> int:
        return len(self.checks)

    def __getitem__(self, index: int) -> CheckDefinition:
        return self.checks[index]


@dataclass(frozen=True)
class ResolvedCheck:
    """
    Verificación con su ruta absoluta ya resuelta.
    Se produce junto a la definición original, que nunca se muta.
    """

    definition: CheckDefinition
    path: str

    @property
    def location(self) -> str:
        return self.path

    @property
    def must_exist(self) -> bool:
        return self.definition.must_exist

    @property
    def content_pattern(self) -> Optional[str]:
        return self.definition.content_pattern


class FailureKind(Enum):
    """
    Categorías de fallo de verificación (no son errores de configuración).
    """

    EXISTENCE = auto()  # Debía existir y no existe
    NON_EXISTENCE = auto()  # No debía existir y existe
    CONTENT = auto()  # Existe pero el contenido no coincide con el patrón

    @property
    def label(self) -> str:
        return self.name.lower()
