from ._request_client import RequestClient

__all__ = ["RequestClient"]
