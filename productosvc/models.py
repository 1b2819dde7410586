"""Product entity and its JSON and document representations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from bson import ObjectId

_ZERO_ID_HEX = "0" * 24


def _parse_id(value: Any) -> ObjectId | None:
    if value is None or value == "":
        return None
    if isinstance(value, ObjectId):
        return None if str(value) == _ZERO_ID_HEX else value
    if not isinstance(value, str) or len(value) != 24:
        raise ValueError(f"invalid product id: {value!r}")
    try:
        raw = bytes.fromhex(value)
    except ValueError as exc:
        raise ValueError(f"invalid product id: {value!r}") from exc
    oid = ObjectId(raw)
    return None if value == _ZERO_ID_HEX else oid


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


@dataclass
class Producto:
    """A product; ``id`` is None until the store assigns one."""

    id: ObjectId | None = None
    nombre: str = ""
    descripcion: str = ""
    precio: float = 0.0

    @classmethod
    def from_json(cls, data: Any) -> "Producto":
        """Build a product from a decoded JSON object; missing fields stay empty."""
        if not isinstance(data, Mapping):
            raise ValueError("product JSON must be an object")
        return cls(
            id=_parse_id(data.get("id")),
            nombre=_text(data, "nombre"),
            descripcion=_text(data, "descripcion"),
            precio=_number(data, "precio"),
        )

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object form; an unset id is the all-zero id."""
        return {
            "id": str(self.id) if self.id is not None else _ZERO_ID_HEX,
            "nombre": self.nombre,
            "descripcion": self.descripcion,
            "precio": self.precio,
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Producto":
        """Build a product from a stored document."""
        return cls(
            id=_parse_id(document.get("_id")),
            nombre=_text(document, "nombre"),
            descripcion=_text(document, "descripcion"),
            precio=_number(document, "precio"),
        )

    def to_document(self) -> dict[str, Any]:
        """Return the stored document form, leaving out an unset id."""
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document.update(
            nombre=self.nombre, descripcion=self.descripcion, precio=self.precio
        )
        return document