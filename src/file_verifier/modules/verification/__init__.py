# src/file_verifier/modules/verification/__init__.py
"""
Módulo de Verificación de Archivos.
"""

from __future__ import annotations

# Application
from .application.engine import VerificationEngine
from .application.use_cases import OutcomeStatus, VerificationOutcome, VerifyFiles

# Domain
from .domain.entities import VerificationResult
from .domain.exceptions import (
    CheckFileError,
    ContentReadError,
    DocumentParseError,
    InvalidCheckError,
    MissingLocationError,
    PatternError,
    VerificationError,
)
from .domain.path_resolver import resolve_location
from .domain.value_objects import CheckDefinition, CheckList, FailureKind, ResolvedCheck

# Infrastructure
from .infrastructure.adapters import FakeFileSystem, LocalFileSystemAdapter
from .infrastructure.parsers import load_check_file
from .infrastructure.reporters import ConsoleResultReporter, JsonResultReporter

__all__ = [
    "CheckDefinition",
    "CheckList",
    "ResolvedCheck",
    "FailureKind",
    "VerificationResult",
    "resolve_location",
    "VerificationError",
    "CheckFileError",
    "DocumentParseError",
    "MissingLocationError",
    "InvalidCheckError",
    "PatternError",
    "ContentReadError",
    "VerificationEngine",
    "VerifyFiles",
    "VerificationOutcome",
    "OutcomeStatus",
    "LocalFileSystemAdapter",
    "FakeFileSystem",
    "load_check_file",
    "ConsoleResultReporter",
    "JsonResultReporter",
]
