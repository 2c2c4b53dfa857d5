from .request_id import RequestIDMiddleware
from .logging import LoggingMiddleware
from .json_body import JSONBodyMiddleware

__all__ = [
    "RequestIDMiddleware",
    "LoggingMiddleware",
    "JSONBodyMiddleware",
]
