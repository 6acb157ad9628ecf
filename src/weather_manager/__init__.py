"""Weather Manager - locations, weather variables, Open-Meteo fetches and export.

Architecture::

    schemas.py      Location record (pydantic)
    locations.py    In-memory location registry
    variables.py    Named weather variable store
    menu.py         Interactive command loop over the variable store
    datasources/    External APIs (Open-Meteo forecast + history, raw bodies)
    services/       Shared utilities (long-lived HTTP session)
    export.py       CSV / JSON export of name -> value records
    cli.py          Command-line entry point

Data flow: locations/variables -> datasources (fetch) -> export (files)
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from weather_manager.config import Settings
from weather_manager.locations import LocationRegistry
from weather_manager.schemas import Location
from weather_manager.variables import VariableStore

__all__ = ["Location", "LocationRegistry", "Settings", "VariableStore", "__version__"]
