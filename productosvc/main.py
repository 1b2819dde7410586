"""Command that configures and starts the product HTTP service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Sequence

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .controller import ProductoController, create_app
from .repository import ProductoRepository
from .service import ProductoService

DEFAULT_PORT = 8084

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Service configuration read from the environment."""

    port: int
    mongo_uri: str
    db_name: str


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read PORT, MONGO_URI and DB_NAME; raise ValueError when one is unusable."""
    if environ is None:
        environ = os.environ
    raw_port = environ.get("PORT", "")
    if raw_port:
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise ValueError(f"Error: PORT no es un número válido: {raw_port!r}") from exc
    else:
        port = DEFAULT_PORT
    mongo_uri = environ.get("MONGO_URI", "")
    if not mongo_uri:
        raise ValueError("Error: La variable de entorno MONGO_URI no está definida")
    db_name = environ.get("DB_NAME", "")
    if not db_name:
        raise ValueError("Error: La variable de entorno DB_NAME no está definida")
    return Settings(port=port, mongo_uri=mongo_uri, db_name=db_name)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the service; command-line arguments are not used."""
    logging.basicConfig(level=logging.INFO)
    if not load_dotenv(".env"):
        logger.warning(
            "Advertencia: No se pudo cargar el archivo .env, "
            "se usará configuración por defecto"
        )

    try:
        settings = load_settings(os.environ)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    try:
        client: MongoClient = MongoClient(
            settings.mongo_uri, serverSelectionTimeoutMS=10_000
        )
        client.admin.command("ping")
    except (PyMongoError, ValueError) as exc:
        logger.error("No se pudo conectar con MongoDB: %s", exc)
        return 1
    print("✅ Conectado a MongoDB correctamente")

    db = client[settings.db_name]
    controller = ProductoController(ProductoService(ProductoRepository(db)))
    app = create_app(controller)

    print(f"🚀 Servidor corriendo en http://localhost:{settings.port}")
    try:
        app.run(host="0.0.0.0", port=settings.port)
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())