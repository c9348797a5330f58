from fastapi.responses import PlainTextResponse

from boardcamp.core.config import Settings


def empty_list_response(items: list, settings: Settings) -> PlainTextResponse | None:
    """
    Return the configured plain-text message when a list result is empty.

    Returns None when there are items or no message is configured, in which
    case the route returns its JSON array as usual.
    """
    if items or settings.empty_list_message is None:
        return None
    return PlainTextResponse(settings.empty_list_message)
