"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # Endpoint resolution and the shared GET helper
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return the raw response body; nothing here parses payloads.
Failures surface as :class:`weather_manager.errors.RequestError`.
"""
