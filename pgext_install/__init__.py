"""pgext-install — release-artifact installer for PostgreSQL extensions."""

__version__ = "0.1.0"
