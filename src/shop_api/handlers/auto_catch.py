"""Error-forwarding adapter for handler tables.

Wraps every handler so that a raised exception comes back as an ``Err``
outcome instead of escaping. The HTTP boundary then forwards the reason
to the centralized exception handlers.
"""

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from shop_api.entities import Err, Outcome

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


def forward_errors(name: str, handler: Handler) -> Handler:
    """Wrap one handler so failures become ``Err(reason)``.

    Sync and async handlers are both accepted; the wrapper is always a
    coroutine function. Only ``Exception`` subclasses are captured, so
    cancellation still propagates.

    Args:
        name: Operation name, used in log lines
        handler: The handler to wrap

    Returns:
        The wrapped handler with the same signature
    """

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> Outcome:
        try:
            result = handler(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.debug("Handler %s failed with %s", name, type(e).__name__)
            return Err(e)
        return result

    return wrapper


def auto_catch(handlers: Mapping[str, Handler]) -> dict[str, Handler]:
    """Wrap every handler in a name -> handler mapping.

    Args:
        handlers: Operation names mapped to handler callables

    Returns:
        A new mapping with the same keys and wrapped handlers

    Example:
        ```python
        table = auto_catch({"get_product": handler.get_product})
        outcome = await table["get_product"](request)
        ```
    """
    return {name: forward_errors(name, handler) for name, handler in handlers.items()}
