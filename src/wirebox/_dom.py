from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ._errors import MissingElementError


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence

# Node.ELEMENT_NODE
ELEMENT_NODE = 1


@runtime_checkable
class Element(Protocol):
    """The slice of a host DOM element the container relies on."""

    nodeType: int  # noqa: N815

    def addEventListener(self, event_name: str, handler: Callable[..., Any]) -> None: ...  # noqa: N802

    def querySelectorAll(self, selector: str) -> Iterable[Element]: ...  # noqa: N802


def is_element(obj: object) -> bool:
    return isinstance(obj, Element) and obj.nodeType == ELEMENT_NODE


def first_element_argument(args: Sequence[object], name: str | None = None) -> Element:
    """Return the first argument that is an element.

    Raise MissingElementError, naming the controller `name` if given, when
    none of `args` is one.
    """
    for arg in args:
        if is_element(arg):
            return arg  # type: ignore[return-value]
    raise MissingElementError(name)


def bind_events(events: Mapping[str, str], el: Element, controller: object) -> None:
    """Attach controller methods as listeners, Marionette style.

    Keys are either a bare event name (`"click"`), bound on `el` itself, or a
    selector followed by the event name (`"ul li click"`), bound on every
    descendant of `el` matching the selector. The event name is whatever
    follows the last space. Values name the handler method on `controller`.
    """
    for key, handler_name in events.items():
        selector, _, event_name = key.rpartition(" ")
        handler = _handler(controller, handler_name)

        if not selector:
            logger.debug("Binding %r on root element to %s", event_name, handler_name)
            el.addEventListener(event_name, handler)
            continue

        targets = el.querySelectorAll(selector)
        count = 0
        for target in targets:
            target.addEventListener(event_name, handler)
            count += 1
        logger.debug("Binding %r on %d element(s) matching %r to %s", event_name, count, selector, handler_name)


def _handler(controller: object, handler_name: str) -> Callable[..., Any]:
    # bound method, so the controller is `self` inside the handler
    handler = getattr(controller, handler_name)
    if not callable(handler):
        msg = f"Event handler {handler_name!r} on {type(controller).__name__} is not callable"
        raise TypeError(msg)
    return handler
