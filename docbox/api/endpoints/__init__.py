"""Typed endpoint functions for the Docbox archive API."""
