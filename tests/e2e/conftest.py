# tests/e2e/conftest.py
import pytest


@pytest.fixture
def project_factory(tmp_path):
    """
    Factory para crear un árbol de proyecto con archivos y un archivo de verificaciones.
    `files` mapea ruta relativa → contenido (None crea un directorio).
    """

    def _create_project(files: dict, checks: str, checks_name: str = "verifications.yaml"):
        for relative, content in files.items():
            target = tmp_path / relative
            if content is None:
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

        checks_path = tmp_path / "src" / "test" / "verifier" / checks_name
        checks_path.parent.mkdir(parents=True, exist_ok=True)
        checks_path.write_text(checks, encoding="utf-8")
        return tmp_path

    return _create_project
