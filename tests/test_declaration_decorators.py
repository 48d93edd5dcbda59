"""Tests for decorator declarations and class discovery."""

import logging

import pytest

from textcrate.declaration import (
    CallSite,
    CodeSpec,
    MessageSpec,
    PropertySpec,
    code_spec,
    discover,
    message_formatter,
    message_property,
    message_spec,
    repository,
)
from textcrate.diagnostics import ConfigurationError
from textcrate.formatters import ToStringFormatter
from textcrate.runtime import BlueprintFactory, Message

# ============================================================================
# REPOSITORIES UNDER TEST
# ============================================================================


@code_spec("[APP]:{}-code", offset=2000)
@message_property("one", "1")
@message_property("two", "2")
@message_property("one", "last")
class AppMessages:
    @message_spec(112, "Hello, {}!")
    def hello(self, name: str) -> Message: ...

    @message_spec(113, "{} of {}")
    def progress(self, done: int, total: int) -> str: ...

    def missing(self, argument: str) -> Message: ...

    def untyped(self, argument): ...  # noqa: ANN001, ANN201

    def _private(self) -> Message: ...


@message_formatter("to-string")
class FormattedMessages:
    @message_spec(1, "x")
    def only(self) -> Message: ...


class BaseMessages:
    @message_spec(1, "Base")
    def base(self) -> Message: ...

    @message_spec(2, "Overridden")
    def overridden(self) -> Message: ...


class DerivedMessages(BaseMessages):
    @message_spec(3, "Derived")
    def overridden(self) -> Message: ...


@code_spec("{}")
class DecoratedBase:
    pass


class UndecoratedChild(DecoratedBase):
    pass


class ForwardReferenceMessages:
    @message_spec(1, "{}")
    def unresolved(self, value: "NotDefinedAnywhere") -> Message: ...  # type: ignore[name-defined]  # noqa: F821


class EmptyMessages:
    pass


# ============================================================================
# TESTS
# ============================================================================


class TestDecorators:
    """Decorators attach declarations without changing behavior."""

    def test_message_spec_returns_same_function(self) -> None:
        def func(self: object) -> None: ...

        assert message_spec(1, "p")(func) is func

    def test_message_spec_validates_eagerly(self) -> None:
        with pytest.raises(ConfigurationError):
            message_spec(True, "p")

    def test_class_decorators_return_same_class(self) -> None:
        class Target:
            pass

        assert code_spec("{}")(Target) is Target
        assert message_formatter("pattern")(Target) is Target
        assert message_property("a", "b")(Target) is Target


class TestDiscover:
    """Reading a RepositorySpec from a class."""

    def test_type_name(self) -> None:
        assert discover(AppMessages).type_name == f"{__name__}.AppMessages"

    def test_code_spec(self) -> None:
        assert discover(AppMessages).code == CodeSpec("[APP]:{}-code", 2000)

    def test_properties_in_source_order(self) -> None:
        assert discover(AppMessages).properties == (
            PropertySpec("one", "1"),
            PropertySpec("two", "2"),
            PropertySpec("one", "last"),
        )
        assert dict(discover(AppMessages).property_map()) == {"one": "last", "two": "2"}

    def test_public_functions_become_call_sites(self) -> None:
        assert sorted(discover(AppMessages).call_sites) == [
            "hello",
            "missing",
            "progress",
            "untyped",
        ]

    def test_call_site_details(self) -> None:
        spec = discover(AppMessages)
        assert spec.call_site("hello") == CallSite(
            f"{__name__}.AppMessages", "hello", MessageSpec(112, "Hello, {}!"), Message, (str,)
        )
        assert spec.call_site("progress").return_type is str
        assert spec.call_site("progress").argument_types == (int, int)
        assert spec.call_site("missing").message is None

    def test_unannotated_parameters(self) -> None:
        site = discover(AppMessages).call_site("untyped")
        assert site.return_type is None
        assert site.argument_types == (object,)

    def test_formatter(self) -> None:
        assert discover(FormattedMessages).formatter == "to-string"
        assert discover(AppMessages).formatter is None

    def test_inherited_call_sites(self) -> None:
        spec = discover(DerivedMessages)
        assert sorted(spec.call_sites) == ["base", "overridden"]
        overridden = spec.call_site("overridden").message
        assert overridden == MessageSpec(3, "Derived")
        assert spec.call_site("base").declaring_type == f"{__name__}.DerivedMessages"

    def test_class_declarations_not_inherited(self) -> None:
        assert discover(DecoratedBase).code == CodeSpec("{}")
        assert discover(UndecoratedChild).code is None

    def test_forward_reference_falls_back_to_raw_annotations(self) -> None:
        site = discover(ForwardReferenceMessages).call_site("unresolved")
        assert site.message == MessageSpec(1, "{}")
        assert site.return_type is Message
        assert site.argument_types == ("NotDefinedAnywhere",)

    def test_empty_class(self) -> None:
        assert dict(discover(EmptyMessages).call_sites) == {}

    def test_defaults_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="textcrate.declaration.decorators"):
            discover(EmptyMessages)
        assert any("Default will be used" in r.getMessage() for r in caplog.records)

    def test_none_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Class cannot be None"):
            discover(None)  # type: ignore[arg-type]

    def test_instance_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="is not a class"):
            discover(AppMessages())  # type: ignore[arg-type]


class TestBuilderDecoratorEquivalence:
    """Both declaration styles produce interchangeable blueprints."""

    def test_same_blueprints(self) -> None:
        built = (
            repository("elsewhere.AppMessages")
            .code_format("[APP]:{}-code", offset=2000)
            .property("one", "1")
            .property("two", "2")
            .property("one", "last")
            .message("hello", 112, "Hello, {}!", returns=Message, arguments=(str,))
            .build()
        )
        discovered = discover(AppMessages)

        from_builder = BlueprintFactory(built).create_blueprint(built.call_site("hello").message)  # type: ignore[arg-type]
        from_class = BlueprintFactory(discovered).create_blueprint(
            discovered.call_site("hello").message  # type: ignore[arg-type]
        )
        assert from_builder == from_class
        assert hash(from_builder) == hash(from_class)

    def test_formatter_declaration_equivalent(self) -> None:
        built = repository("x.F").formatter("to-string").build()
        assert BlueprintFactory(built).message_formatter == BlueprintFactory(
            discover(FormattedMessages)
        ).message_formatter
        assert BlueprintFactory(built).message_formatter.format("x") == ToStringFormatter().format(
            "x"
        )
