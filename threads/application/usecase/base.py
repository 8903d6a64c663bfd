"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application flow: validate a request, call services, shape a response."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
