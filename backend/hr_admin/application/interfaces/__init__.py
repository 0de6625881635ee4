from .auth_gateway import AuthGateway, AuthReply
from .resource_backend import (
    DownloadedFile,
    PayloadStyle,
    ReconcileMode,
    ResourceBackend,
    ResourceEndpoint,
)

__all__ = [
    "AuthGateway",
    "AuthReply",
    "DownloadedFile",
    "PayloadStyle",
    "ReconcileMode",
    "ResourceBackend",
    "ResourceEndpoint",
]
