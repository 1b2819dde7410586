[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "productosvc"
version = "0.1.0"
description = "A small REST service for managing products stored in MongoDB"
requires-python = ">=3.10"
keywords = ["rest", "microservice", "mongodb", "flask", "products", "crud"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "pymongo",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
productosvc = "productosvc.main:main"

[tool.hatch.build.targets.wheel]
packages = ["productosvc"]

[tool.pytest.ini_options]
addopts = "-ra"
