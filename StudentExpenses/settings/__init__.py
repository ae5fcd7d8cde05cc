"""
Settings package: configuration API and localisation helpers.

This package provides:

- :mod:`StudentExpenses.settings.lib` – Application paths, settings.json loading and schema validation.
- :mod:`StudentExpenses.settings.locale` – Babel-based currency formatting.
"""
