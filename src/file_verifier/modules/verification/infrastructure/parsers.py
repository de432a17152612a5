# src/file_verifier/modules/verification/infrastructure/parsers.py
"""
Parsers del archivo de verificaciones (YAML, JSON y XML heredado).

Arquitectura: Infrastructure Layer
Responsabilidad: Deserializar el documento, validar su estructura con JSON Schema
y construir el CheckList del dominio.

Formato (YAML/JSON):

    files:
      - location: README.md
      - location: build.lock
        exists: false
      - location: target/report.txt
        contains: "BUILD (SUCCESS|OK)"

También se acepta una lista de entradas en la raíz. El XML conserva la forma
<verifications><files><file><location/><exists/><contains/></file></files></verifications>.
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, TextIO, Union

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from file_verifier.modules.verification.domain.exceptions import (
    CheckFileError,
    DocumentParseError,
    InvalidCheckError,
    MissingLocationError,
)
from file_verifier.modules.verification.domain.ports.parser import CheckFileParser
from file_verifier.modules.verification.domain.value_objects import (
    CheckDefinition,
    CheckList,
)

logger = logging.getLogger("verifier.parser")

CHECK_ENTRY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "location": {"type": ["string", "null"]},
        "exists": {"type": ["boolean", "null"]},
        "contains": {"type": ["string", "null"]},
    },
    "additionalProperties": False,
}

CHECK_LIST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": CHECK_ENTRY_SCHEMA,
}

_VALIDATOR = Draft202012Validator(CHECK_LIST_SCHEMA)


def _format_json_pointer(err: ValidationError) -> str:
    # RFC 6901. La raíz es "" pero imprimimos "/" por legibilidad.
    if not err.path:
        return "/"

    def esc(token: str) -> str:
        return token.replace("~", "~0").replace("/", "~1")

    parts: list[str] = []
    for part in err.path:
        parts.append(str(part) if isinstance(part, int) else esc(str(part)))
    return "/" + "/".join(parts)


def _format_reason(err: ValidationError) -> str:
    msg = err.message
    if isinstance(err.instance, (str, int, float, bool)) or err.instance is None:
        msg = f"{msg} (got={err.instance!r})"
    return msg


class StructuredCheckFileParser(ABC):
    """
    Plantilla común: cargar el documento → normalizar forma → validar → construir.
    Las subclases solo saben deserializar su formato a tipos nativos.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    @abstractmethod
    def _load(self, stream: TextIO) -> Any:
        """Deserializa el flujo a tipos nativos o lanza DocumentParseError."""

    def parse(self, stream: TextIO, source: Optional[str] = None) -> CheckList:
        document = self._load(stream)
        entries = self._extract_entries(document)

        errors = sorted(_VALIDATOR.iter_errors(entries), key=lambda e: list(e.path))
        if errors:
            err = errors[0]
            raise DocumentParseError(
                f"Documento de verificaciones inválido en {_format_json_pointer(err)}: "
                f"{_format_reason(err)}",
                err,
            )

        checks = tuple(self._build_check(index, entry) for index, entry in enumerate(entries))
        logger.debug(f"Parseadas {len(checks)} verificaciones desde {source or '<stream>'}")
        return CheckList(checks=checks, source=source)

    @staticmethod
    def _extract_entries(document: Any) -> list[Any]:
        if document is None:
            return []
        if isinstance(document, list):
            return document
        if isinstance(document, dict):
            unknown = sorted(set(document) - {"files"}, key=str)
            if unknown:
                raise DocumentParseError(
                    f"Claves desconocidas en la raíz del documento: {unknown}"
                )
            files = document.get("files")
            if files is None:
                return []
            if not isinstance(files, list):
                raise DocumentParseError("'files' debe ser una lista de verificaciones")
            return files
        raise DocumentParseError(
            f"La raíz del documento debe ser un mapa o una lista (got={type(document).__name__})"
        )

    def _build_check(self, index: int, entry: dict[str, Any]) -> CheckDefinition:
        location = entry.get("location")
        if location is None or not str(location).strip():
            raise MissingLocationError(index)

        must_exist = entry.get("exists")
        if must_exist is None:
            must_exist = True
        contains = entry.get("contains")

        if contains is not None and not must_exist:
            if self.strict:
                raise InvalidCheckError(
                    f"La verificación #{index} ({location}) combina 'contains' con exists=false"
                )
            logger.warning(
                f"Verificación #{index} ({location}): 'contains' se ignora cuando exists=false"
            )

        return CheckDefinition(
            location=location, must_exist=must_exist, content_pattern=contains
        )


class YamlCheckFileParser(StructuredCheckFileParser):
    """YAML vía PyYAML (safe_load). Acepta también JSON, que es YAML válido."""

    def _load(self, stream: TextIO) -> Any:
        try:
            return yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise DocumentParseError(f"YAML mal formado: {e}", e) from e


class JsonCheckFileParser(StructuredCheckFileParser):
    def _load(self, stream: TextIO) -> Any:
        try:
            return json.load(stream)
        except json.JSONDecodeError as e:
            raise DocumentParseError(f"JSON mal formado: {e}", e) from e


class XmlCheckFileParser(StructuredCheckFileParser):
    """
    Formato XML heredado (verifications.xml de los builds existentes).
    Los namespaces se ignoran; 'exists' acepta true/false sin distinguir mayúsculas.
    El texto de cada elemento se recorta (un <contains> multilínea busca solo su contenido).
    """

    ROOT_TAG = "verifications"

    @staticmethod
    def _local_name(tag: str) -> str:
        return tag.rsplit("}", 1)[-1]

    def _load(self, stream: TextIO) -> Any:
        try:
            root = ET.parse(stream).getroot()
        except ET.ParseError as e:
            raise DocumentParseError(f"XML mal formado: {e}", e) from e

        if self._local_name(root.tag) != self.ROOT_TAG:
            raise DocumentParseError(
                f"Se esperaba <{self.ROOT_TAG}> como raíz (got=<{self._local_name(root.tag)}>)"
            )

        entries: list[dict[str, Any]] = []
        for files in root:
            if self._local_name(files.tag) != "files":
                raise DocumentParseError(f"Elemento inesperado <{self._local_name(files.tag)}>")
            for file_el in files:
                entries.append(self._entry_from_element(file_el))
        return {"files": entries}

    def _entry_from_element(self, element: ET.Element) -> dict[str, Any]:
        if self._local_name(element.tag) != "file":
            raise DocumentParseError(
                f"Elemento inesperado <{self._local_name(element.tag)}> dentro de <files>"
            )
        entry: dict[str, Any] = {}
        for child in element:
            name = self._local_name(child.tag)
            text = (child.text or "").strip()
            if name == "exists":
                entry[name] = self._parse_bool(text)
            else:
                # Como el lector XML heredado: todo valor textual se recorta.
                entry[name] = text
        return entry

    @staticmethod
    def _parse_bool(text: str) -> bool:
        value = text.lower()
        if value == "true":
            return True
        if value == "false":
            return False
        raise DocumentParseError(f"Valor inválido para <exists>: {text!r}")


PARSERS_BY_SUFFIX: dict[str, type[StructuredCheckFileParser]] = {
    ".yaml": YamlCheckFileParser,
    ".yml": YamlCheckFileParser,
    ".json": JsonCheckFileParser,
    ".xml": XmlCheckFileParser,
}


def parser_for(path: Union[str, Path], strict: bool = False) -> CheckFileParser:
    """Elige el parser por extensión; YAML por defecto (también lee JSON)."""
    parser_cls = PARSERS_BY_SUFFIX.get(Path(path).suffix.lower(), YamlCheckFileParser)
    return parser_cls(strict=strict)


def load_check_file(path: Union[str, Path], strict: bool = False) -> CheckList:
    """
    Abre y parsea el archivo de verificaciones.

    Raises:
        CheckFileError: El archivo no existe o no se puede leer.
        DocumentParseError / MissingLocationError: Documento inválido.
    """
    parser = parser_for(path, strict=strict)
    try:
        with open(path, encoding="utf-8") as stream:
            return parser.parse(stream, source=str(path))
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"El archivo {path} no es texto UTF-8 válido", e) from e
    except OSError as e:
        raise CheckFileError(f"No se pudo leer el archivo de verificaciones: {path}", e) from e
