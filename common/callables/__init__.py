"""
Callables module - Firebase callable protocol over FastAPI.
"""

from common.callables.protocol import read_callable_data
from common.callables.handlers import (
    api_exception_handler,
    unhandled_exception_handler,
    register_callable_exception_handlers,
)

__all__ = [
    "read_callable_data",
    "api_exception_handler",
    "unhandled_exception_handler",
    "register_callable_exception_handlers",
]
