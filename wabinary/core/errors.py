from typing import Optional


class WabinaryError(Exception):
    """Base exception for wabinary."""
    pass


class EncodeError(WabinaryError, ValueError):
    """Raised when a node tree cannot be encoded."""
    pass


class LengthOverflowError(EncodeError):
    """Raised when a string or payload is too large for a 32-bit length prefix."""
    def __init__(self, length: int):
        super().__init__(f"string too large to encode: {length}")
        self.length = length


class InvalidTokenError(EncodeError):
    def __init__(self, token: int):
        super().__init__(f"invalid token: {token}")
        self.token = token


class DictionaryPageOutOfRangeError(EncodeError):
    def __init__(self, token: str, index: int):
        super().__init__(f"double byte dict token out of range: {token}, {index}")
        self.token = token
        self.index = index


class ListTooLargeError(EncodeError):
    def __init__(self, size: int, max_size: Optional[int] = None):
        message = f"list too large: {size}"
        if max_size is not None:
            message += f" (max {max_size})"
        super().__init__(message)
        self.size = size


class InvalidNodeError(EncodeError):
    """Raised when a value is not an exact tag/attrs/content triple."""
    pass


class InvalidChildrenError(EncodeError):
    """Raised when node content is not text, a node list or an opaque payload."""
    pass
