"""
Exceptions raised by the TVDB client
"""


class TVDBError(Exception):
    """Base class for all client errors"""

    pass


class TransportError(TVDBError):
    """Network or HTTP failure while fetching a document"""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        original_exception: Exception | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.original_exception = original_exception


class NotFoundError(TVDBError):
    """A lookup did not resolve to any series"""

    pass


class FormatError(TVDBError):
    """A non-blank field could not be parsed into its expected type"""

    def __init__(self, field: str, value: str, expected: str):
        super().__init__(f"Cannot parse {field}={value!r} as {expected}")
        self.field = field
        self.value = value
        self.expected = expected


class MalformedDocumentError(TVDBError):
    """The document is not valid XML or lacks its expected structure"""

    pass
