from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ._dom import bind_events, first_element_argument
from ._errors import (
    InvalidDefinitionError,
    InvalidNameError,
    NotDefinedError,
    UnresolvedDependencyError,
)


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    # Either a bare callable or [*dependency_names, callable]
    DefinitionSpec = Callable[..., Any] | Sequence[Any]
    Strategy = Callable[["Definition", list[Any], tuple[Any, ...]], Any]


class Provider(Enum):
    SERVICE = "service"
    CONTROLLER = "controller"


@dataclass(frozen=True)
class Definition:
    """Everything needed to create a registered thing on demand."""

    name: str
    dependencies: tuple[str, ...]
    build: Callable[..., Any]
    provider: Provider
    container: Container = field(repr=False, compare=False)


def define(container: Container, provider: Provider, name: str, spec: DefinitionSpec) -> Definition:
    """Build a definition from a bare callable or a `[*deps, callable]` list.

    Dependency names are positional: the n-th name is passed as the n-th
    argument of the callable.
    """
    if not isinstance(name, str):
        raise InvalidNameError(name)

    if callable(spec):
        dependencies: tuple[Any, ...] = ()
        build = spec
    elif isinstance(spec, (list, tuple)) and spec:
        dependencies = tuple(spec[:-1])
        build = spec[-1]
    else:
        raise InvalidDefinitionError(name, "expected a callable or a non-empty list ending with one")

    if not callable(build):
        raise InvalidDefinitionError(name, "must define a callable as the last element of the definition")

    bad = [dep for dep in dependencies if not isinstance(dep, str)]
    if bad:
        raise InvalidDefinitionError(name, f"dependency names must be strings, got {bad!r}")

    return Definition(
        name=name,
        dependencies=dependencies,
        build=build,
        provider=provider,
        container=container,
    )


def instantiate(definition: Definition, *args: Any) -> Any:
    """Create a new thing from its definition alone.

    Dependencies are looked up in the definition's own container, so a
    definition can be instantiated from any container. Only controllers make
    use of `args`.
    """
    container = definition.container
    resolved: list[Any] = []

    for dep in definition.dependencies:
        if dep in container.context:
            resolved.append(container.context[dep])
        elif dep in container.definitions:
            # no caching here; a service stores itself on construction
            resolved.append(instantiate(container.definitions[dep]))
        else:
            raise UnresolvedDependencyError(dep, definition.name)

    return _STRATEGIES[definition.provider](definition, resolved, args)


def _provide_service(definition: Definition, dependencies: list[Any], args: tuple[Any, ...]) -> Any:
    service = definition.build(*dependencies)
    definition.container.context[definition.name] = service
    logger.debug("Created service %r", definition.name)
    return service


def _provide_controller(definition: Definition, dependencies: list[Any], args: tuple[Any, ...]) -> Any:
    el = first_element_argument(args, name=definition.name)

    constructor = definition.build(*dependencies)
    controller = constructor(*args)
    logger.debug("Created controller %r", definition.name)

    events: Mapping[str, str] | None = getattr(controller, "events", None)
    if events:
        bind_events(events, el, controller)

    return controller


_STRATEGIES: dict[Provider, Strategy] = {
    Provider.SERVICE: _provide_service,
    Provider.CONTROLLER: _provide_controller,
}


class Container:
    """Minimal DI container.

    - `value`: store a ready-made value
    - `service`: lazy singleton, built on first request
    - `controller`: new instance per request, bound to a DOM element
    - `get`: look up or build by name.

    Values and built services share one namespace (the context), which always
    wins over a definition of the same name.
    """

    instantiate = staticmethod(instantiate)

    def __init__(self) -> None:
        self.definitions: dict[str, Definition] = {}
        self.context: dict[str, Any] = {}

    def __contains__(self, name: object) -> bool:
        return name in self.context or name in self.definitions

    def value(self, name: str, value: Any) -> Container:
        self.context[name] = value
        logger.debug("Registered value %r", name)
        return self

    def service(self, name: str, spec: DefinitionSpec) -> Container:
        """Register a singleton helper or abstraction.

        Example:
          container.service("logger", Logger)
          container.service("repo", ["db", "logger", Repo])

        """
        self._register(define(self, Provider.SERVICE, name, spec))
        return self

    def controller(self, name: str, spec: DefinitionSpec) -> Container:
        """Register a controller, created fresh for each element it is attached to.

        `spec` resolves to a function receiving the dependencies and returning
        the controller class (or factory), which is then called with the
        arguments given to `get`. One of those must be an element.

        Example:
          container.controller("widget", ["logger", lambda logger: Widget])
          container.get("widget", el)

        """
        self._register(define(self, Provider.CONTROLLER, name, spec))
        return self

    def get(self, name: str, *args: Any) -> Any:
        """Get or instantiate a thing.

        - If `name` is in the context: return it, ignoring `args`.
        - If `name` is defined: instantiate it with `args`.
        """
        if name in self.context:
            return self.context[name]

        definition = self.definitions.get(name)
        if definition is None:
            raise NotDefinedError(name)

        return instantiate(definition, *args)

    def _register(self, definition: Definition) -> None:
        if definition.name in self.definitions:
            logger.warning("Replacing existing definition for %r", definition.name)

        self.definitions[definition.name] = definition
        logger.debug(
            "Registered %s %r with dependencies %s",
            definition.provider.value,
            definition.name,
            list(definition.dependencies),
        )


def create_default_container(window: object = None, document: object = None) -> Container:
    """Create a container with the built-in `$` values registered.

    - `$window`: the host global object
    - `$document`: the host document
    - `$module`: the container itself.
    """
    container = Container()
    return container.value("$window", window).value("$document", document).value("$module", container)
