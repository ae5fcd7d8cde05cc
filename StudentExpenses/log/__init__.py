"""
Logging subsystem: handlers, models, and views for application logging.

Modules:

- :mod:`StudentExpenses.log.log` – Root logger setup, Qt message bridge and the in-memory log tank.
- :mod:`StudentExpenses.log.model` – Table model and proxy for displaying and filtering the stored logs.
- :mod:`StudentExpenses.log.view` – Qt view and dock widget for reading log messages.
"""
