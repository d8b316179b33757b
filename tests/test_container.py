import logging

import pytest

from wirebox import Container, NotDefinedError, Provider, create_default_container


def test_get_unregistered_name_raises():
    c = Container()
    with pytest.raises(NotDefinedError):
        c.get("unknown-name")


def test_not_defined_error_is_a_key_error():
    c = Container()
    with pytest.raises(KeyError) as ctx:
        c.get("unknown-name")
    assert str(ctx.value) == "'unknown-name' is not defined"


def test_value_is_returned_as_is():
    c = Container()
    config = {"debug": True}

    c.value("config", config)

    assert c.get("config") is config


def test_falsy_values_are_still_values():
    c = Container()
    c.value("zero", 0).value("empty", "").value("nothing", None)

    assert c.get("zero") == 0
    assert c.get("empty") == ""
    assert c.get("nothing") is None


def test_registration_is_chainable():
    c = Container()

    class Logger: ...

    returned = (
        c.value("debug", True)
        .service("logger", Logger)
        .controller("widget", lambda: lambda el: object())
    )

    assert returned is c
    assert set(c.definitions) == {"logger", "widget"}


def test_value_takes_priority_over_definition_of_same_name():
    c = Container()

    class Logger: ...

    replacement = object()
    c.service("logger", Logger)
    c.value("logger", replacement)

    assert c.get("logger") is replacement


def test_reregistering_a_name_replaces_the_definition():
    c = Container()

    class First: ...

    class Second: ...

    c.service("thing", First)
    c.service("thing", Second)

    assert isinstance(c.get("thing"), Second)


def test_definitions_record_provider_and_container():
    c = Container()

    class Logger: ...

    c.service("logger", Logger)
    c.controller("widget", ["logger", lambda logger: Logger])

    assert c.definitions["logger"].provider is Provider.SERVICE
    assert c.definitions["widget"].provider is Provider.CONTROLLER
    assert c.definitions["widget"].dependencies == ("logger",)
    assert c.definitions["widget"].container is c


def test_contains_covers_values_and_definitions():
    c = Container()

    class Logger: ...

    c.value("debug", False).service("logger", Logger)

    assert "debug" in c
    assert "logger" in c
    assert "missing" not in c


def test_containers_are_isolated():
    a = Container()
    b = Container()

    class Logger: ...

    a.service("logger", Logger)
    a.value("debug", True)

    with pytest.raises(NotDefinedError):
        b.get("logger")
    with pytest.raises(NotDefinedError):
        b.get("debug")


def test_default_container_registers_builtin_values():
    window = object()
    document = object()

    c = create_default_container(window=window, document=document)

    assert c.get("$window") is window
    assert c.get("$document") is document
    assert c.get("$module") is c


def test_default_containers_are_independent():
    first = create_default_container()
    second = create_default_container()

    assert first is not second
    assert first.get("$module") is first
    assert second.get("$module") is second


def test_reregistering_a_name_logs_a_warning(caplog):
    c = Container()

    class Logger: ...

    c.service("logger", Logger)
    with caplog.at_level(logging.WARNING, logger="wirebox"):
        c.service("logger", Logger)

    assert "Replacing existing definition for 'logger'" in caplog.text
