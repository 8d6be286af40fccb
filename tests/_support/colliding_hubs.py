"""Two unrelated hubs whose methods resolve to the same path."""

from hubgen.metadata import signalr_hub, signalr_method


@signalr_hub("shared")
class FirstHub:
    def Ping(self):
        pass


@signalr_hub("shared")
class SecondHub:
    @signalr_method("Ping")
    def Pong(self):
        pass
