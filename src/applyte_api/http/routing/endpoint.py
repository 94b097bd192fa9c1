import collections.abc
import inspect
from typing import Any

import fastapi
from zodchy.codex.cqea import Message
from zodchy.toolbox.processing import AsyncMessageStreamContract

from ..contracts import (
    PipelineCodeType,
    PipelineRegistryContract,
    RequestDescriberContract,
    RequestParameterContract,
    ResponseDescriberContract,
)


class Batch:
    def __init__(
        self,
        *messages: Message,
    ):
        self._messages = list(messages)

    def append(self, message: Message) -> None:
        self._messages.append(message)

    @property
    def message_type(self) -> type[Message] | None:
        return type(self._messages[0]) if self._messages else None

    def __iter__(self) -> collections.abc.Generator[Message, None, None]:
        yield from self._messages


class Endpoint:
    """
    Glues one route to one pipeline: request parameters become messages,
    the pipeline's output stream is grouped into batches of one message type,
    and the first batch an interceptor accepts becomes the response.
    """

    def __init__(
        self,
        request: RequestDescriberContract,
        response: ResponseDescriberContract,
        pipeline_code: PipelineCodeType,
    ):
        self.request = request
        self.response = response
        self._pipeline_code = pipeline_code

    @property
    def pipeline_code(self) -> PipelineCodeType:
        return self._pipeline_code

    def __call__(self, pipeline_registry: PipelineRegistryContract) -> collections.abc.Callable[..., Any]:
        if self._pipeline_code not in pipeline_registry:
            raise RuntimeError(f"Pipeline '{self._pipeline_code}' is not registered")
        pipeline = pipeline_registry[self._pipeline_code]

        async def func(**kwargs: Any) -> fastapi.Response:
            params: dict[str, RequestParameterContract] = {}
            for parameter in self.request.get_schema():
                if parameter.get_name() in kwargs:
                    parameter.set_value(kwargs[parameter.get_name()])
                    params[parameter.get_name()] = parameter
            tasks = self.request.get_adapter()(**params)

            async for batch in self._group_stream(pipeline(*tasks)):
                for interceptor in self.response.get_interceptors():
                    if batch.message_type is not None and issubclass(
                        batch.message_type, interceptor.get_desired_type()
                    ):
                        return interceptor(*batch)

            raise RuntimeError(f"Pipeline '{self._pipeline_code}' produced no message the endpoint can answer with")

        sig = inspect.signature(func)
        _params = []
        _exists: set[str] = set()
        for parameter in self.request.get_schema():
            if parameter.get_name() in _exists:
                continue
            _exists.add(parameter.get_name())
            _params.append(
                inspect.Parameter(
                    parameter.get_name(),
                    inspect.Parameter.POSITIONAL_OR_KEYWORD,
                    annotation=parameter.get_type(),
                )
            )
        func.__signature__ = sig.replace(parameters=_params, return_annotation=fastapi.Response)  # type: ignore
        return func

    async def _group_stream(self, stream: AsyncMessageStreamContract) -> collections.abc.AsyncGenerator[Batch, None]:
        batch = None
        async for message in stream:
            if batch is None:
                batch = Batch(message)
                continue
            if batch.message_type is not None and isinstance(message, batch.message_type):
                batch.append(message)
            else:
                yield batch
                batch = Batch(message)
        if batch is not None:
            yield batch
