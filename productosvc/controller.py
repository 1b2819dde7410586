"""HTTP handlers for the product API."""

from __future__ import annotations

import json
from typing import Any

from flask import Flask, Response, request

from .models import Producto
from .service import IdVacioError, ProductoNoEncontradoError, SinCamposError

_Respuesta = tuple[Any, int]


def _decode_producto(body: bytes | str) -> Producto:
    """Decode the first JSON value of ``body`` into a product."""
    text = body.decode("utf-8") if isinstance(body, bytes) else body
    data, _ = json.JSONDecoder().raw_decode(text.lstrip())
    return Producto.from_json(data)


class ProductoController:
    """Turns requests into service calls and results into (payload, status).

    A ``str`` payload is a plain-text error message; anything else is JSON.
    """

    def __init__(self, service: Any) -> None:
        self.service = service

    def crear_producto(self, body: bytes | str) -> _Respuesta:
        try:
            producto = _decode_producto(body)
        except ValueError:
            return "Error al decodificar el producto", 400
        try:
            self.service.crear_producto(producto)
        except Exception:
            return "Error al crear el producto", 500
        return {"mensaje": "Producto creado correctamente"}, 201

    def obtener_productos(self) -> _Respuesta:
        try:
            productos = self.service.obtener_productos()
        except Exception:
            return "Error al obtener productos", 500
        return [producto.to_json() for producto in productos], 200

    def obtener_producto_por_id(self, producto_id: str) -> _Respuesta:
        if not producto_id:
            return "ID del producto requerido", 400
        try:
            producto = self.service.obtener_producto_por_id(producto_id)
        except Exception:
            return "Producto no encontrado", 404
        return producto.to_json(), 200

    def actualizar_producto(self, producto_id: str, body: bytes | str) -> _Respuesta:
        try:
            producto = _decode_producto(body)
        except ValueError:
            return "JSON inválido", 400
        try:
            self.service.actualizar_producto(producto_id, producto)
        except (IdVacioError, SinCamposError) as exc:
            return str(exc), 400
        except ProductoNoEncontradoError as exc:
            return str(exc), 404
        except Exception:
            return "Error interno del servidor", 500
        try:
            actualizado = self.service.obtener_producto_por_id(producto_id).to_json()
        except Exception:
            actualizado = None
        return {
            "mensaje": "Producto actualizado correctamente",
            "producto": actualizado,
        }, 200

    def eliminar_producto(self, producto_id: str) -> _Respuesta:
        if not producto_id:
            return "ID del producto requerido", 400
        try:
            self.service.eliminar_producto(producto_id)
        except Exception:
            return "Error al eliminar el producto", 500
        return {"mensaje": "Producto eliminado correctamente"}, 200


def _to_response(result: _Respuesta) -> Response:
    payload, status = result
    if isinstance(payload, str):
        return Response(payload + "\n", status=status, mimetype="text/plain")
    return Response(
        json.dumps(payload, ensure_ascii=False) + "\n",
        status=status,
        mimetype="application/json",
    )


def create_app(controller: ProductoController) -> Flask:
    """Build the Flask application with the RESTful product routes."""
    app = Flask(__name__)

    @app.route("/productos", methods=["POST"])
    def crear_producto() -> Response:
        return _to_response(controller.crear_producto(request.get_data()))

    @app.route("/productos", methods=["GET"])
    def obtener_productos() -> Response:
        return _to_response(controller.obtener_productos())

    @app.route("/productos/<producto_id>", methods=["GET"])
    def obtener_producto_por_id(producto_id: str) -> Response:
        return _to_response(controller.obtener_producto_por_id(producto_id))

    @app.route("/productos/<producto_id>", methods=["PUT"])
    def actualizar_producto(producto_id: str) -> Response:
        return _to_response(
            controller.actualizar_producto(producto_id, request.get_data())
        )

    @app.route("/productos/<producto_id>", methods=["DELETE"])
    def eliminar_producto(producto_id: str) -> Response:
        return _to_response(controller.eliminar_producto(producto_id))

    return app