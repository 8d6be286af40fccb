"""
Tests for hubgen.metadata.

Tests cover:
- Decorators attach descriptors without changing the decorated object
- Descriptor defaults
- Argument descriptors and the Hidden marker inside Annotated
"""

from typing import Annotated

import pytest

from hubgen.metadata import (
    Arg,
    ArgMeta,
    AutoDiscover,
    Hidden,
    HubMeta,
    MethodMeta,
    OperationType,
    get_arg_meta,
    get_hub_meta,
    get_method_meta,
    hidden,
    is_hidden,
    is_hidden_arg,
    signalr_hub,
    signalr_method,
    strip_annotated,
)


class TestSignalrHub:
    """Tests for the @signalr_hub decorator."""

    def test_returns_class_unchanged(self):
        @signalr_hub("chat/[Hub]")
        class ChatHub:
            custom_attr = "value"

        assert ChatHub.custom_attr == "value"
        assert ChatHub.__name__ == "ChatHub"

    def test_defaults(self):
        @signalr_hub()
        class ChatHub:
            pass

        assert get_hub_meta(ChatHub) == HubMeta(
            path=None,
            auto_discover=AutoDiscover.METHODS_AND_ARGS,
            document_names=(),
        )

    def test_single_document_name_string(self):
        @signalr_hub(document_names="v1")
        class ChatHub:
            pass

        assert get_hub_meta(ChatHub).document_names == ("v1",)

    def test_document_names_iterable(self):
        @signalr_hub(document_names=["v1", "v2"])
        class ChatHub:
            pass

        assert get_hub_meta(ChatHub).document_names == ("v1", "v2")

    def test_undecorated_class_has_no_meta(self):
        class Plain:
            pass

        assert get_hub_meta(Plain) is None

    def test_meta_is_frozen(self):
        meta = HubMeta(path="x")
        with pytest.raises(AttributeError):
            meta.path = "y"


class TestSignalrMethod:
    """Tests for the @signalr_method decorator."""

    def test_defaults(self):
        @signalr_method()
        def SendMessage(self):
            pass

        meta = get_method_meta(SendMessage)
        assert meta == MethodMeta()
        assert meta.name == "[Method]"
        assert meta.operation_type is None
        assert meta.auto_discover is AutoDiscover.ARGS

    def test_all_fields(self):
        @signalr_method(
            "send",
            operation_type=OperationType.GET,
            auto_discover=AutoDiscover.NONE,
            summary="Send",
            description="Sends a message",
        )
        def SendMessage(self):
            pass

        meta = get_method_meta(SendMessage)
        assert meta.name == "send"
        assert meta.operation_type is OperationType.GET
        assert meta.auto_discover is AutoDiscover.NONE
        assert meta.summary == "Send"
        assert meta.description == "Sends a message"

    def test_function_still_callable(self):
        @signalr_method()
        def add(self, a, b):
            return a + b

        assert add(None, 1, 2) == 3


class TestHidden:
    def test_hidden_class(self):
        @hidden
        class Secret:
            pass

        assert is_hidden(Secret)

    def test_hidden_function(self):
        @hidden
        def secret(self):
            pass

        assert is_hidden(secret)

    def test_not_hidden_by_default(self):
        def visible(self):
            pass

        assert not is_hidden(visible)


class TestAnnotatedArguments:
    def test_arg_meta_found(self):
        annotation = Annotated[str, Arg("The user")]
        assert get_arg_meta(annotation) == ArgMeta(description="The user")

    def test_plain_type_has_no_arg_meta(self):
        assert get_arg_meta(str) is None

    def test_annotated_without_arg(self):
        assert get_arg_meta(Annotated[str, "unrelated"]) is None

    def test_hidden_marker(self):
        assert is_hidden_arg(Annotated[str, Hidden])
        assert not is_hidden_arg(Annotated[str, Arg()])
        assert not is_hidden_arg(str)

    def test_hidden_is_singleton(self):
        assert type(Hidden)() is Hidden

    def test_strip_annotated(self):
        assert strip_annotated(Annotated[int, Arg("n")]) is int
        assert strip_annotated(int) is int
