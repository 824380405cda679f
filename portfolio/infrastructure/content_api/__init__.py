from .http_content_gateway import HttpContentGateway

__all__ = ["HttpContentGateway"]
