"""Parameter binding source."""

from enum import Enum


class BindingSource(str, Enum):
    """Where a parameter value is bound from.

    Attributes:
        PATH: Route value (keys, function parameters)
        QUERY: Query string
        BODY: Request payload
        OTHER: Headers, services, or anything else
    """

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    OTHER = "other"
