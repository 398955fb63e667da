"""
Data sources for the ourairports_json package.

Sources return the raw CSV text of an OurAirports table, read from disk
or downloaded, optionally through a local cache.
"""

from .cached import CachedSource
from .ourairports import OurAirportsSource, CachedOurAirportsSource

__all__ = [
    'CachedSource',
    'OurAirportsSource',
    'CachedOurAirportsSource',
]
