from .transport import (
    HttpTransport,
    ReloginHook,
    Transport,
    TransportResponse,
    TransportResult,
)

__all__ = [
    "HttpTransport",
    "ReloginHook",
    "Transport",
    "TransportResponse",
    "TransportResult",
]
