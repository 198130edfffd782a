from __future__ import annotations


class ToneLadderError(ValueError):
    """Base class for every validation failure raised by the engine."""


class InvalidColorFormat(ToneLadderError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"invalid hex color: {value!r}. Expected 6 hex digits (e.g. #2F6FED)"
        )


class InvalidArgument(ToneLadderError):
    def __init__(self, parameter: str, value: object, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {parameter}: {value!r}. {reason}")


__all__ = ["ToneLadderError", "InvalidColorFormat", "InvalidArgument"]
