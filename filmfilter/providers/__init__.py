"""Concrete adapters for the interfaces in ``filmfilter.interfaces``."""
