"""
Top‑level package for the Travel Guide API.

This file makes ``travel_guide_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``travel_guide_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
