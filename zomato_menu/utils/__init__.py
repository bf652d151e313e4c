from .http_client import HttpClient, default_headers
from .text_utils import clean_text

__all__ = [
    "HttpClient",
    "default_headers",
    "clean_text",
]
