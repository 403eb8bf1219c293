class PlaceScoutError(Exception):
    """Base exception for all placescout errors"""
    pass


class SearchInputError(PlaceScoutError):
    """Search submitted without a location or search term"""
    pass


class WebhookError(PlaceScoutError):
    """
    The places webhook could not be reached or its response could not be read.
    Non-2xx statuses are not errors; they come back in the response envelope.
    """
    pass
