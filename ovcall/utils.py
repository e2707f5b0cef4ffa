import asyncio
import inspect
from typing import Awaitable, Callable, TypeVar

R = TypeVar('R')
    
def ensure_future(callback: Callable[..., R] | Callable[..., Awaitable[R]], *args, loop: asyncio.AbstractEventLoop | None = None, **kwargs) -> asyncio.Future[R]:
    exc = None 
    try:
        res = callback(*args, **kwargs)
    except BaseException as e:
        res = None
        exc = e
    if exc is None and inspect.isawaitable(res):
        future = asyncio.ensure_future(res, loop=loop)
    else:
        future = asyncio.Future(loop=loop)
        if exc is None:
            future.set_result(res)
        else:
            future.set_exception(exc)
    return future
