"""
Exception types raised by the decoder.

Structural failures (unparseable envelope, malformed top-level Content-Type)
abort a decode. Content-level failures are deferred until a decoded stream is
read and surface as ContentDecodeError.
"""


class EmlDecodeError(ValueError):
    """Base class for all decoder errors."""


class MalformedEnvelopeError(EmlDecodeError):
    """The message header block could not be parsed."""


class MediaTypeError(EmlDecodeError):
    """A Content-Type header value is malformed."""


class NoMediaTypeError(MediaTypeError):
    """No media type was declared at all."""


class ContentDecodeError(EmlDecodeError):
    """Encoded part content is invalid (raised while reading a decoded stream)."""
