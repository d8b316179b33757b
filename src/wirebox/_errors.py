from __future__ import annotations


class ContainerError(RuntimeError):
    pass


class RegistrationError(ContainerError):
    pass


class InvalidNameError(RegistrationError, TypeError):
    """Raised when a definition is registered under a non-string name."""

    def __init__(self, name: object) -> None:
        self.name = name
        msg = f"Name must be a string, got {type(name).__name__}: {name!r}"
        super().__init__(msg)


class InvalidDefinitionError(RegistrationError, TypeError):
    """Raised when a definition spec does not end with a callable."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        msg = f"Invalid definition for {name!r}: {reason}"
        super().__init__(msg)


class ResolutionError(ContainerError):
    pass


class UnresolvedDependencyError(ResolutionError):
    def __init__(self, name: str, dependant: str) -> None:
        self.name = name
        self.dependant = dependant
        msg = f"{name!r} not defined (required by {dependant!r})"
        super().__init__(msg)


class NotDefinedError(ResolutionError, KeyError):
    def __init__(self, name: object) -> None:
        self.name = name
        msg = f"{name!r} is not defined"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MissingElementError(ResolutionError):
    def __init__(self, name: str | None = None) -> None:
        self.name = name
        msg = "Must have element to bind controller"
        if name is not None:
            msg = f"{msg} {name!r}"
        super().__init__(msg)
