"""Client singletons for external API interactions."""
from placescout.clients.places_client import PlacesClient

__all__ = ["PlacesClient"]
