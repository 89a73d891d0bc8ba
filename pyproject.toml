[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libfunctions"
version = "0.1.0"
description = "Helpers for database configuration, connections, migrations, pagination and CPF/CNPJ validation"
requires-python = ">=3.10"
keywords = ["database", "sqlalchemy", "dotenv", "pagination", "migrations", "cpf", "cnpj"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Database",
]
dependencies = [
    "python-dotenv",
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["libfunctions"]

[tool.pytest.ini_options]
addopts = "-ra"
