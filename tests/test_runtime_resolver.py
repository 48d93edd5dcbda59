"""Tests for Resolver call-site resolution and caching."""

import logging

import pytest

from textcrate.declaration import CallSite, MessageSpec, repository
from textcrate.diagnostics import ConfigurationError, DiagnosticCode
from textcrate.formatters import ToStringFormatter
from textcrate.runtime import Message, MessageBlueprint, Resolver, UnannotatedBlueprint


class FailingFormatter:
    def format(self, pattern: str | None, /, *arguments: object) -> str:
        msg = "format"
        raise NotImplementedError(msg)


class Unprintable:
    def __str__(self) -> str:
        msg = "no str"
        raise ValueError(msg)


SPEC = (
    repository("app.TestMessages")
    .code_format("[APP]:{}-code", offset=2000)
    .property("one", "1")
    .message("hello", 112, "Hello, {}!", returns=Message, arguments=(str,))
    .message("text", 0, "Hi", returns=str)
    .message("void", 200, "Hi", returns=type(None))
    .message("implicit", 5, "Implicit {}")
    .unannotated("missing", arguments=(str,))
    .unannotated("missing_text", returns=str, arguments=(str,))
    .build()
)


class TestResolve:
    """Shaping results by return kind."""

    def test_message_result(self) -> None:
        result = Resolver(SPEC).invoke("hello", "France")
        assert isinstance(result, Message)
        assert result.message() == "Hello, France!"
        assert result.code() == "[APP]:2112-code"
        assert result.arguments() == ("France",)
        assert result.property("one") == "1"

    def test_text_result(self) -> None:
        assert Resolver(SPEC).invoke("text") == "Hi"

    def test_undeclared_return_type_is_message(self) -> None:
        result = Resolver(SPEC).invoke("implicit", 1)
        assert isinstance(result, Message)
        assert result.message() == "Implicit 1"

    def test_unsupported_return_type(self) -> None:
        with pytest.raises(ConfigurationError, match=r"textcrate\.Message") as exc_info:
            Resolver(SPEC).invoke("void")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNSUPPORTED_RETURN_TYPE

    def test_none_arguments(self) -> None:
        result = Resolver(SPEC).resolve(SPEC.call_site("text"), None)
        assert result == "Hi"

    def test_resolve_with_sequence(self) -> None:
        result = Resolver(SPEC).resolve(SPEC.call_site("hello"), ["Spain"])
        assert isinstance(result, Message)
        assert result.arguments() == ("Spain",)

    def test_unknown_member(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            Resolver(SPEC).invoke("nope")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CALL_SITE_NOT_FOUND

    def test_ad_hoc_call_site(self) -> None:
        call_site = CallSite("app.TestMessages", "adhoc", MessageSpec(999, "Ad {}"), str)
        assert Resolver(SPEC).resolve(call_site, ["hoc"]) == "Ad hoc"


class TestUnannotated:
    """Call sites declared without a message."""

    def test_fallback_message(self) -> None:
        message = Resolver(SPEC).invoke("missing", "argument")
        assert isinstance(message, Message)
        assert message.arguments() == ("argument",)
        assert message.code() == "2147483647"
        assert message.pattern() == "app.TestMessages:missing"
        assert message.message() == "Unannotated message: app.TestMessages#missing([argument])"

    def test_fallback_text(self) -> None:
        assert Resolver(SPEC).invoke("missing_text", "argument") == (
            "Unannotated message: app.TestMessages#missing_text([argument])"
        )

    def test_properties_retained(self) -> None:
        message = Resolver(SPEC).invoke("missing", "x")
        assert isinstance(message, Message)
        assert message.property("one") == "1"

    def test_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="textcrate.runtime.resolver"):
            Resolver(SPEC).invoke("missing", "x")
        assert any("app.TestMessages#missing" in r.getMessage() for r in caplog.records)


class TestResilience:
    """Formatter failures never reach the caller."""

    def test_failing_formatter_falls_back(self) -> None:
        spec = (
            repository("app.ResilientMessages")
            .formatter(FailingFormatter)
            .message("is_alive", 1, "{} is still alive!")
            .build()
        )
        message = Resolver(spec).invoke("is_alive", "This method")
        assert isinstance(message, Message)
        assert message.pattern() == "{} is still alive!"
        assert message.message() == "Pattern: '{} is still alive!'. Arguments: [This method]"

    def test_failing_formatter_code_falls_back(self) -> None:
        spec = (
            repository("app.ResilientMessages")
            .formatter(FailingFormatter)
            .code_format("E{}")
            .message("is_alive", 1, "alive")
            .build()
        )
        message = Resolver(spec).invoke("is_alive")
        assert isinstance(message, Message)
        assert message.code() == "Pattern: 'E{}'. Arguments: [1]"

    def test_failing_argument_str_falls_back(self) -> None:
        spec = repository("app.P").message("hi", 1, "Hi {}").build()
        message = Resolver(spec).invoke("hi", Unprintable())
        assert isinstance(message, Message)
        assert message.message() == "Pattern: 'Hi {}'. Arguments: [<unprintable Unprintable>]"

    def test_failing_argument_str_unannotated(self) -> None:
        message = Resolver(SPEC).invoke("missing", Unprintable())
        assert isinstance(message, Message)
        assert message.message() == (
            "Unannotated message: app.TestMessages#missing([<unprintable Unprintable>])"
        )

    def test_missing_argument_keeps_placeholder(self) -> None:
        message = Resolver(SPEC).invoke("hello")
        assert isinstance(message, Message)
        assert message.message() == "Hello, {}!"

    def test_default_formatter_override(self) -> None:
        resolver = Resolver(SPEC, default_formatter=ToStringFormatter())
        assert resolver.invoke("text") == "Pattern: 'Hi'. Arguments: []"


class TestCaching:
    """One blueprint per call site."""

    def test_blueprint_reused(self) -> None:
        resolver = Resolver(SPEC)
        first = resolver.invoke("hello", "a")
        second = resolver.invoke("hello", "b")
        assert isinstance(first, Message)
        assert isinstance(second, Message)
        assert first.blueprint is second.blueprint

    def test_blueprint_for(self) -> None:
        resolver = Resolver(SPEC)
        call_site = SPEC.call_site("hello")
        blueprint = resolver.blueprint_for(call_site)
        assert isinstance(blueprint, MessageBlueprint)
        assert resolver.blueprint_for(call_site) is blueprint
        assert isinstance(resolver.blueprint_for(SPEC.call_site("missing")), UnannotatedBlueprint)

    def test_blueprint_for_none(self) -> None:
        with pytest.raises(ConfigurationError):
            Resolver(SPEC).blueprint_for(None)  # type: ignore[arg-type]

    def test_cache_stats(self) -> None:
        resolver = Resolver(SPEC)
        assert resolver.cache_stats() == {"size": 0, "hits": 0, "misses": 0}
        resolver.invoke("hello", "a")
        resolver.invoke("hello", "b")
        resolver.invoke("text")
        assert resolver.cache_stats() == {"size": 2, "hits": 1, "misses": 2}

    def test_clear_cache(self) -> None:
        resolver = Resolver(SPEC)
        resolver.invoke("text")
        resolver.clear_cache()
        assert resolver.cache_stats()["size"] == 0

    def test_unsupported_return_type_still_caches_blueprint(self) -> None:
        resolver = Resolver(SPEC)
        with pytest.raises(ConfigurationError):
            resolver.invoke("void")
        assert resolver.cache_stats()["size"] == 1


class TestResolverIdentity:
    """Equality by repository type name."""

    def test_equal_for_same_repository(self) -> None:
        assert Resolver(SPEC) == Resolver(SPEC)
        assert hash(Resolver(SPEC)) == hash(Resolver(SPEC))

    def test_equal_for_same_type_name(self) -> None:
        other = repository("app.TestMessages").build()
        assert Resolver(SPEC) == Resolver(other)

    def test_not_equal_for_other_repository(self) -> None:
        assert Resolver(SPEC) != Resolver(repository("app.Other").build())
        assert Resolver(SPEC) != "app.TestMessages"

    def test_repr(self) -> None:
        assert repr(Resolver(SPEC)) == "Resolver(repository='app.TestMessages')"

    def test_none_repository(self) -> None:
        with pytest.raises(ConfigurationError):
            Resolver(None)  # type: ignore[arg-type]
