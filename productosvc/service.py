"""Business rules for products on top of the repository."""

from __future__ import annotations

from typing import Any

from .models import Producto
from .repository import DocumentoNoEncontradoError


class IdVacioError(ValueError):
    """The product id is empty."""

    def __init__(self) -> None:
        super().__init__("el ID no puede estar vacío")


class SinCamposError(ValueError):
    """An update carries no field to change."""

    def __init__(self) -> None:
        super().__init__("no hay campos para actualizar")


class ProductoNoEncontradoError(LookupError):
    """The product to update does not exist."""

    def __init__(self) -> None:
        super().__init__("producto no encontrado")


class ProductoService:
    """Product operations with validation."""

    def __init__(self, repo: Any) -> None:
        self.repo = repo

    def crear_producto(self, producto: Producto) -> None:
        self.repo.crear_producto(producto)

    def obtener_productos(self) -> list[Producto]:
        return self.repo.obtener_productos()

    def obtener_producto_por_id(self, producto_id: str) -> Producto:
        return self.repo.obtener_producto_por_id(producto_id)

    def eliminar_producto(self, producto_id: str) -> None:
        self.repo.eliminar_producto(producto_id)

    def actualizar_producto(self, producto_id: str, producto: Producto) -> None:
        if not producto_id.strip():
            raise IdVacioError()
        if not producto.nombre and not producto.descripcion and producto.precio == 0:
            raise SinCamposError()
        try:
            self.repo.actualizar_producto(producto_id, producto)
        except DocumentoNoEncontradoError as exc:
            raise ProductoNoEncontradoError() from exc