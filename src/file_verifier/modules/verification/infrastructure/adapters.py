# src/file_verifier/modules/verification/infrastructure/adapters.py
"""
Adaptadores de Infraestructura para Verificación.

Arquitectura: Modular Monolith
Capa: Infrastructure (Adapters)
Responsabilidad: Implementar FileSystemPort sobre el disco local (o un Fake en memoria).
"""

import logging
import os
from typing import Optional

from file_verifier.modules.verification.domain.ports.file_system import FileSystemPort

logger = logging.getLogger(__name__)


class LocalFileSystemAdapter(FileSystemPort):
    """
    Implementación que interactúa con el sistema de archivos local del OS.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read_text(self, path: str) -> str:
        # Se carga el archivo completo en memoria: los patrones pueden cruzar líneas.
        # errors="replace" evita abortar la ejecución con contenido binario.
        with open(path, encoding=self.encoding, errors="replace") as f:
            content = f.read()
        logger.debug(f"Leídos {len(content)} caracteres de {path}")
        return content


class FakeFileSystem(FileSystemPort):
    """
    Implementación en memoria (Fake) del sistema de archivos.
    Útil para tests unitarios del motor sin tocar disco.

    Comportamiento:
    - `files` mapea ruta → contenido (None para directorios).
    - Las rutas en `unreadable` existen pero fallan al leerse (PermissionError).
    """

    def __init__(
        self,
        files: Optional[dict[str, Optional[str]]] = None,
        unreadable: Optional[set[str]] = None,
    ):
        self._files = dict(files or {})
        self._unreadable = set(unreadable or ())
        self.reads: list[str] = []

    def exists(self, path: str) -> bool:
        return path in self._files or path in self._unreadable

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        if path in self._unreadable:
            raise PermissionError(f"Permiso denegado: {path}")
        if path not in self._files:
            raise FileNotFoundError(path)
        content = self._files[path]
        if content is None:
            raise IsADirectoryError(path)
        return content
