import uuid
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Tuple

Pair = Tuple[str, Any]

request_id: ContextVar[str] = ContextVar("request_id", default="")
bound_attributes: ContextVar[Tuple[Pair, ...]] = ContextVar(
    "bound_attributes", default=()
)


def get_request_id() -> str:
    """Get current request ID"""
    return request_id.get("")


def set_request_id(req_id: str) -> None:
    """Set request ID for current context"""
    request_id.set(req_id)


def get_bound_attributes() -> Tuple[Pair, ...]:
    """Get attributes bound to the current context, outermost first"""
    return bound_attributes.get(())


def set_bound_attributes(*pairs: Pair) -> None:
    """Replace the attributes bound to the current context"""
    bound_attributes.set(tuple(pairs))


def get_context_attributes() -> Tuple[Pair, ...]:
    """Everything a record logged right now inherits from its context"""
    req_id = get_request_id()
    if req_id:
        return (("request_id", req_id),) + get_bound_attributes()
    return get_bound_attributes()


@contextmanager
def bind_attributes(**attributes: Any) -> Generator[None, None, None]:
    """Attach attributes to every record logged inside the block"""
    token = bound_attributes.set(get_bound_attributes() + tuple(attributes.items()))
    try:
        yield
    finally:
        bound_attributes.reset(token)


@contextmanager
def request_context(**attributes: Any) -> Generator[str, None, None]:
    """Context manager for setting up request-scoped logging context"""
    req_id = str(uuid.uuid4())

    old_request_id = get_request_id()
    old_attributes = get_bound_attributes()

    try:
        set_request_id(req_id)
        set_bound_attributes(*old_attributes, *attributes.items())

        yield req_id
    finally:
        set_request_id(old_request_id)
        set_bound_attributes(*old_attributes)
