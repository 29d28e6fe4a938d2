"""Chat completions client and response protocol handler."""

from .client import PerplexityClient
from .response_helpers import handle_response
from .stream_helpers import StreamMetrics

__all__ = ["PerplexityClient", "handle_response", "StreamMetrics"]
