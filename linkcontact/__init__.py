"""A terminal address book with contacts, search, editing and CSV import and export."""

__version__ = "0.0.1"
__all__ = ["__version__"]