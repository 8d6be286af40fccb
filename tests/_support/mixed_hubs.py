"""Hubs exercising every discovery rule, plus classes that are not hubs."""

from typing import Annotated

from hubgen.metadata import (
    Arg,
    AutoDiscover,
    Hidden,
    OperationType,
    hidden,
    signalr_hub,
    signalr_method,
)
from tests._support.chat_hubs import IChatHub  # noqa: F401  re-export, not a type of this module
from tests._support.models import ChatMessage, Mood, Point


class NotAHub:
    def Ping(self):
        pass


@hidden
@signalr_hub()
class HiddenHub:
    def Ping(self):
        pass


@signalr_hub("/admin/[Hub]", document_names=("admin",))
class AdminHub:
    def Kick(self, user: str):
        pass


@signalr_hub("/hubs/[Hub]", auto_discover=AutoDiscover.NONE)
class StrictHub:
    def Undescribed(self, a: str):
        pass

    @signalr_method(
        "[Method]Async",
        operation_type=OperationType.PUT,
        auto_discover=AutoDiscover.NONE,
        summary="Described method",
        description="Only described arguments",
    )
    def Described(self, a: str, count: Annotated[int, Arg("How many")]):
        pass

    @signalr_method(auto_discover=AutoDiscover.ARGS)
    def Relaxed(self, a: str, point: Point):
        pass

    @hidden
    @signalr_method()
    def Secret(self):
        pass


@signalr_hub(auto_discover=AutoDiscover.METHODS)
class MethodsHub:
    def Plain(self, a: str, b: Annotated[str, Arg("described")]):
        pass

    def _private(self):
        pass

    @staticmethod
    def Static():
        pass

    @classmethod
    def Cls(cls):
        pass


@signalr_hub("/open/[Hub]")
class OpenHub:
    def Everything(
        self,
        message: ChatMessage,
        mood: Mood,
        token: Annotated[str, Hidden],
        *args,
        **kwargs,
    ):
        pass

    @signalr_method(auto_discover=AutoDiscover.NONE)
    def Strict(self, a: str, b: Annotated[str, Arg("kept")]):
        pass

    @signalr_method("rename", operation_type=OperationType.GET)
    def Renamed(self):
        pass


@signalr_hub(document_names="v2")
class IVersionedHub(OpenHub):
    def Extra(self, untyped):
        pass
