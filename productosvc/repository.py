"""Product storage on a MongoDB database."""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from .models import Producto

COLLECTION_NAME = "productos"


class DocumentoNoEncontradoError(LookupError):
    """No stored document matched the query."""


def _object_id(producto_id: str) -> ObjectId:
    if not isinstance(producto_id, str) or len(producto_id) != 24:
        raise ValueError(f"invalid object id: {producto_id!r}")
    try:
        return ObjectId(bytes.fromhex(producto_id))
    except ValueError as exc:
        raise ValueError(f"invalid object id: {producto_id!r}") from exc


class ProductoRepository:
    """CRUD operations on the ``productos`` collection."""

    def __init__(self, db: Any) -> None:
        self.collection = db[COLLECTION_NAME]

    def crear_producto(self, producto: Producto) -> None:
        self.collection.insert_one(producto.to_document())

    def obtener_productos(self) -> list[Producto]:
        return [Producto.from_document(doc) for doc in self.collection.find({})]

    def obtener_producto_por_id(self, producto_id: str) -> Producto:
        oid = _object_id(producto_id)
        document = self.collection.find_one({"_id": oid})
        if document is None:
            raise DocumentoNoEncontradoError(producto_id)
        return Producto.from_document(document)

    def actualizar_producto(self, producto_id: str, producto: Producto) -> None:
        """Set the non-empty fields of ``producto`` on the stored product."""
        oid = _object_id(producto_id)
        update: dict[str, Any] = {}
        if producto.nombre:
            update["nombre"] = producto.nombre
        if producto.descripcion:
            update["descripcion"] = producto.descripcion
        if producto.precio != 0:
            update["precio"] = producto.precio
        if not update:
            raise ValueError("no hay campos válidos para actualizar")
        result = self.collection.update_one({"_id": oid}, {"$set": update})
        if result.matched_count == 0:
            raise DocumentoNoEncontradoError(producto_id)

    def eliminar_producto(self, producto_id: str) -> None:
        oid = _object_id(producto_id)
        self.collection.delete_one({"_id": oid})