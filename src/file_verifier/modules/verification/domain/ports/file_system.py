# src/file_verifier/modules/verification/domain/ports/file_system.py
"""
Puerto (Interface) para operaciones de sistema de archivos requeridas por el dominio.

Arquitectura: Modular Monolith
Capa: Domain -> Ports
Responsabilidad: Abstraer la consulta de existencia y la lectura de contenido.
"""

from abc import ABC, abstractmethod


class FileSystemPort(ABC):
    """
    Contrato para interactuar con el almacenamiento de archivos.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Verifica si un archivo o directorio existe.
        Nunca lanza excepción por ausencia.
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Lee el archivo completo en memoria como texto.
        El handle debe cerrarse en todos los caminos de salida.

        Raises:
            OSError: permisos, archivo desaparecido o ruta que es un directorio.
        """
        pass
