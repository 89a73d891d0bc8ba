"""Database configuration, .env loading, SQLAlchemy engines, migrations, pagination and CPF/CNPJ validation."""

__version__ = "0.1.0"
__all__ = ["config", "database", "env", "migrate", "models", "pagination", "text"]