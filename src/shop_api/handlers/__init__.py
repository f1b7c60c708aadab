"""Handler layer for HTTP endpoints.

Handlers map a request descriptor to one collaborator call and return an
Outcome. They depend on the ResourceStore protocol, not on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .auto_catch import auto_catch, forward_errors
from .store_handler import StoreHandler, build_handler_table, to_number

__all__ = [
    "StoreHandler",
    "auto_catch",
    "build_handler_table",
    "forward_errors",
    "to_number",
]
