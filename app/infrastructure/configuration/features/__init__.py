"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.og import OgSettings
from infrastructure.configuration.features.subscribe import SubscribeFormatterSettings

__all__ = [
    "OgSettings",
    "SubscribeFormatterSettings",
]
