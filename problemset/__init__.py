"""Solutions to classic algorithm exercises and a README index updater."""

__version__ = "0.1.0"