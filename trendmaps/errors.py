"""
Exceptions raised by the trendmaps client
"""
from typing import Optional


class TrendsError(Exception):
    """Base class for all trendmaps errors"""


class KeywordNotSetError(TrendsError, LookupError):
    """Raised when a keyword was not registered on the client"""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(
            f"Keyword '{keyword}' is not set on the client. "
            f"Register it in Keywords before requesting its data."
        )


class ClientNotBuiltError(TrendsError, RuntimeError):
    """Raised when a request is attempted on a client that was not built"""

    def __init__(self):
        super().__init__(
            "Client has not been built. Call Client.build() before sending requests."
        )


class InvalidFilterError(TrendsError, ValueError):
    """Raised for an unknown resolution filter or one the geography does not allow"""


class InvalidKeywordsError(TrendsError, ValueError):
    """Raised when a keyword set cannot be compared by Google Trends"""


class SchemaMismatchError(TrendsError):
    """Raised when a payload does not match the expected wire layout"""


class ResponseError(TrendsError):
    """Raised when Google Trends answers with an unexpected status"""

    def __init__(self, message: str, status_code: Optional[int] = None, response=None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response

    @classmethod
    def from_response(cls, response) -> 'ResponseError':
        """Build the error from a requests.Response"""
        return cls(
            f"The request failed: Google returned a response with code {response.status_code}",
            status_code=response.status_code,
            response=response
        )


class TooManyRequestsError(ResponseError):
    """Raised when Google Trends rate limits the caller (HTTP 429)"""
