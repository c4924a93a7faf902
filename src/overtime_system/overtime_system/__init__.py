"""Overtime System package.

Feature modules (calendars, schedules, overtime, ...) follow the same split as
the rest of the code base: frozen dataclass models, Protocol repositories with
MySQL implementations, services holding the rules and thin Flask controllers.
"""
