"""Pylint plugin requiring explicit generics on configured calls.

Enable with ``load-plugins=explicit_generics_linter``.
"""

from explicit_generics_linter.infrastructure.checker import register

__all__ = ["register"]
