import abc
import dataclasses
from collections.abc import Callable
from typing import Any, cast

from zodchy.codex.cqea import Error, Message, View


class Serializer(abc.ABC):
    def __init__(
        self,
        message_serializer: Callable[[Any], Any] | None = None,
    ):
        self._message_serializer = message_serializer

    @abc.abstractmethod
    def __call__(self, *messages: Message) -> Any:
        raise NotImplementedError()

    def _serialize(self, value: Any) -> Any:
        return self._message_serializer(value) if self._message_serializer else value


class EventMapping(Serializer):
    """
    Event fields as a flat JSON object; a batch of events becomes a list.
    """

    def __call__(self, *messages: Message) -> Any:
        data = [self._serialize(self._fields(message)) for message in messages]
        return data[0] if len(data) == 1 else data

    @staticmethod
    def _fields(message: Message) -> Any:
        return dataclasses.asdict(message) if dataclasses.is_dataclass(message) else vars(message)


class ViewMapping(Serializer):
    """
    The view data as the whole body. Pagination travels in headers, never in the body.
    """

    def __call__(self, *messages: Message) -> Any:
        if len(messages) == 0:
            return []
        view = cast(View, messages[0])
        return self._serialize(view.data())


class ErrorMapping(Serializer):
    def __call__(self, *messages: Message) -> Any:
        error = cast(Error, messages[0])
        return {"message": self._serialize(getattr(error, "message", "Internal server error"))}
