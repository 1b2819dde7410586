# productosvc

A small REST service for managing a catalogue of products. Each product has a
name (`nombre`), a description (`descripcion`) and a price (`precio`). Products
are stored in a MongoDB collection called `productos`.

## Installation

```
pip install productosvc
```

## Configuration

The service reads its settings from environment variables. If a `.env` file
is present in the working directory, it is loaded first. If there is none, a
warning is logged and the environment is used as it is.

| Variable    | Required | Default | Meaning                         |
|-------------|----------|---------|---------------------------------|
| `MONGO_URI` | yes      |         | MongoDB connection string       |
| `DB_NAME`   | yes      |         | Name of the database to use     |
| `PORT`      | no       | `8084`  | Port the HTTP server listens on |

Example `.env`:

```
MONGO_URI=mongodb://localhost:27017
DB_NAME=tienda
PORT=8084
```

## Running

```
productosvc
```

The command does the following:

- It reads the settings.
- It connects to MongoDB and sends a `ping`, waiting at most 10 seconds for a
  server.
- It serves the API on all interfaces at the configured port, using Flask's
  built-in server.

It logs an error and exits with status 1 in these cases:

- `MONGO_URI` or `DB_NAME` is missing.
- `PORT` is not an integer.
- MongoDB cannot be reached.
- The server cannot bind its port.

## HTTP API

| Method   | Path              | Action                          | Success |
|----------|-------------------|---------------------------------|---------|
| `POST`   | `/productos`      | Create a product                | `201`   |
| `GET`    | `/productos`      | List all products               | `200`   |
| `GET`    | `/productos/{id}` | Fetch one product by its id     | `200`   |
| `PUT`    | `/productos/{id}` | Update the fields that are sent | `200`   |
| `DELETE` | `/productos/{id}` | Delete a product                | `200`   |

### Products as JSON

Products are exchanged as JSON objects:

```json
{"id": "65f1c0a2b3c4d5e6f7a8b9c0", "nombre": "Lápiz", "descripcion": "HB", "precio": 1.5}
```

- Missing fields are taken as empty.
- When an `id` is given, it must be 24 hexadecimal characters.
- `nombre` and `descripcion` must be strings, and `precio` must be a number.
- A product without an id is written with the all-zero id
  `"000000000000000000000000"`.

### Responses

Successful responses are JSON. Creating, updating and deleting answer with a
`mensaje` field. Creating does not return the new product's id.

Errors are answered with a plain-text message:

| Status | When                                                                                  |
|--------|---------------------------------------------------------------------------------------|
| `400`  | The body of a `POST` or `PUT` is not valid JSON or not a valid product                |
| `400`  | An update has an empty id                                                             |
| `400`  | An update carries no field that is non-empty or non-zero                              |
| `404`  | `GET /productos/{id}` finds no product, including when the id is not a valid object id |
| `404`  | `PUT /productos/{id}` matches no product                                              |
| `500`  | The store fails                                                                       |
| `500`  | An update or delete is given an id that is not a valid object id                      |

### Updates

An update changes only the fields that are non-empty or non-zero. A price
cannot be set to `0` this way.

A successful update answers with:

```json
{"mensaje": "Producto actualizado correctamente", "producto": { ... }}
```

Here `producto` is the product as it now stands. It is `null` if the product
could not be read back.

### Deletes

Deleting an id that matches no product still answers `200`.

## Using it as a library

You can put the layers together yourself, for example with a different
database handle or in tests:

```python
from pymongo import MongoClient

from productosvc.controller import ProductoController, create_app
from productosvc.repository import ProductoRepository
from productosvc.service import ProductoService

db = MongoClient("mongodb://localhost:27017")["tienda"]
service = ProductoService(ProductoRepository(db))
app = create_app(ProductoController(service))
app.run(port=8084)
```

### `productosvc.models`

`Producto` is a dataclass with the fields `id`, `nombre`, `descripcion` and
`precio`. Its `id` is a `bson.ObjectId`, or `None`.

- `from_json` and `to_json` convert to and from the API's JSON form.
- `from_document` and `to_document` convert to and from the stored document
  form.

### `productosvc.repository`

`ProductoRepository` runs the CRUD operations on the collection. It raises:

- `DocumentoNoEncontradoError` when a fetched or updated product does not
  exist.
- `ValueError` for an invalid object id or an update with no fields.

### `productosvc.service`

`ProductoService` adds validation and raises:

- `IdVacioError` for an empty id.
- `SinCamposError` for an update with no fields.
- `ProductoNoEncontradoError` when the product to update is missing.

### `productosvc.controller`

`ProductoController` maps calls and errors to a `(payload, status)` pair. A
`str` payload is a plain-text error. `create_app` wraps a controller in a
Flask application with the routes above.

### `productosvc.main`

- `load_settings` reads a mapping of environment variables into a `Settings`
  object with `port`, `mongo_uri` and `db_name`. It raises `ValueError` when a
  required value is missing or the port is not an integer.
- `main` is the entry point of the `productosvc` command.

## Limitations

The service has no authentication, pagination or filtering. It runs on Flask's
development server rather than a production WSGI server.