# Test Fixtures Package
# Provides factory functions for generating backend payloads

from .alerts import VoeAlertFactory, create_sample_alert, ALERT_TEMPLATES
from .literature import LiteratureResultFactory, SAMPLE_TITLES

__all__ = [
    # Alert fixtures
    "VoeAlertFactory",
    "create_sample_alert",
    "ALERT_TEMPLATES",
    # Literature fixtures
    "LiteratureResultFactory",
    "SAMPLE_TITLES",
]
