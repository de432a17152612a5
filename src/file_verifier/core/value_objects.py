from __future__ import annotations


class NonEmptyString:
    """
    Value Object universal: valida invariante (texto no vacío ni solo espacios).
    Building block reusable en CUALQUIER sistema que requiera identificadores o rutas.
    """

    def __init__(self, value: str | None):
        if value is None or not str(value).strip():
            raise ValueError("Must be a non-empty string")
        self.value = str(value)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmptyString):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
