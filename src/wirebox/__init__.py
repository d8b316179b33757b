"""Minimal dependency injection container for DOM controllers.

This package wires named services and controllers together on demand. Services
are lazy singletons; controllers are created fresh for every request, receive
the element they are attached to, and may declare an `events` map whose
handlers get bound to DOM event listeners.

Exports:
- `Container`: Registry of definitions plus the context of resolved values.
- `Provider`: Enum of provider strategies (service or controller).
- `create_default_container`: Container with the built-in `$window`,
  `$document` and `$module` values registered.
- `Element`: Protocol describing the host DOM element the container needs.
"""

from ._container import Container, Definition, Provider, create_default_container, define, instantiate
from ._dom import ELEMENT_NODE, Element, bind_events, first_element_argument, is_element
from ._errors import (
    ContainerError,
    InvalidDefinitionError,
    InvalidNameError,
    MissingElementError,
    NotDefinedError,
    RegistrationError,
    ResolutionError,
    UnresolvedDependencyError,
)


__all__ = [
    "ELEMENT_NODE",
    "Container",
    "ContainerError",
    "Definition",
    "Element",
    "InvalidDefinitionError",
    "InvalidNameError",
    "MissingElementError",
    "NotDefinedError",
    "Provider",
    "RegistrationError",
    "ResolutionError",
    "UnresolvedDependencyError",
    "bind_events",
    "create_default_container",
    "define",
    "first_element_argument",
    "instantiate",
    "is_element",
]
