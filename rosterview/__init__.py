"""Weekly staff roster view.

Modules:
- dates: week start, week days, ISO week numbers, display formatting
- errors: error taxonomy and the Result wrapper
- config: load and validate configuration (JSON or YAML)
- domain: value types, SQLAlchemy document models and repositories
- services: categories, roster, weekly overrides, shift types, integrity guard, workspace
- engine: merge roster and overrides into the grouped view; copy weeks
- io: CSV import/export
- cli: command-line interface entrypoints
"""

__all__ = [
    "dates",
    "errors",
    "config",
    "domain",
    "services",
    "engine",
    "io",
    "cli",
]
