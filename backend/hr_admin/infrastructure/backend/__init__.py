from .http_auth_gateway import HttpAuthGateway
from .http_resource_backend import HttpResourceBackend

__all__ = ["HttpAuthGateway", "HttpResourceBackend"]
