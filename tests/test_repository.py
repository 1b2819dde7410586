from types import SimpleNamespace

import pytest
from bson import ObjectId

from productosvc.models import Producto
from productosvc.repository import DocumentoNoEncontradoError, ProductoRepository


class FakeCollection:
    def __init__(self):
        self.docs = []

    def _matches(self, doc, query):
        return all(doc.get(k) == v for k, v in query.items())

    def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.docs.append(dict(document))
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, query):
        return iter([dict(d) for d in self.docs if self._matches(d, query)])

    def find_one(self, query):
        return next(self.find(query), None)

    def update_one(self, query, update):
        for doc in self.docs:
            if self._matches(doc, query):
                doc.update(update["$set"])
                return SimpleNamespace(matched_count=1)
        return SimpleNamespace(matched_count=0)

    def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def repo(collection):
    return ProductoRepository({"productos": collection})


def test_create_then_list(repo):
    repo.crear_producto(Producto(nombre="Producto A", precio=100.0))
    productos = repo.obtener_productos()
    assert len(productos) == 1
    assert productos[0].nombre == "Producto A"
    assert productos[0].id is not None


def test_list_empty(repo):
    assert repo.obtener_productos() == []


def test_get_by_id(repo, collection):
    oid = ObjectId()
    repo.crear_producto(Producto(oid, "Producto X", "d", 55.0))
    assert repo.obtener_producto_por_id(str(oid)) == Producto(oid, "Producto X", "d", 55.0)


def test_get_by_id_missing(repo):
    with pytest.raises(DocumentoNoEncontradoError):
        repo.obtener_producto_por_id(str(ObjectId()))


@pytest.mark.parametrize("bad_id", ["123", "", "x" * 24])
def test_invalid_id_raises(repo, bad_id):
    with pytest.raises(ValueError):
        repo.obtener_producto_por_id(bad_id)
    with pytest.raises(ValueError):
        repo.eliminar_producto(bad_id)
    with pytest.raises(ValueError):
        repo.actualizar_producto(bad_id, Producto(nombre="n"))


def test_update_only_non_empty_fields(repo):
    oid = ObjectId()
    repo.crear_producto(Producto(oid, "Viejo", "desc", 10.0))
    repo.actualizar_producto(str(oid), Producto(nombre="Actualizado"))
    assert repo.obtener_producto_por_id(str(oid)) == Producto(oid, "Actualizado", "desc", 10.0)


def test_update_without_fields(repo):
    oid = ObjectId()
    repo.crear_producto(Producto(oid, "Viejo"))
    with pytest.raises(ValueError, match="no hay campos válidos para actualizar"):
        repo.actualizar_producto(str(oid), Producto())


def test_update_missing_document(repo):
    with pytest.raises(DocumentoNoEncontradoError):
        repo.actualizar_producto(str(ObjectId()), Producto(precio=5.0))


def test_delete(repo):
    oid = ObjectId()
    repo.crear_producto(Producto(oid, "Borrar"))
    repo.eliminar_producto(str(oid))
    assert repo.obtener_productos() == []


def test_delete_missing_is_silent(repo):
    repo.crear_producto(Producto(nombre="Queda"))
    repo.eliminar_producto(str(ObjectId()))
    assert [p.nombre for p in repo.obtener_productos()] == ["Queda"]