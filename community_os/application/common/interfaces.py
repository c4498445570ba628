"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class PublishPostCommand(Command[PostDto]):
        post_id: str

    class PublishPostHandler(CommandHandler[PostDto]):
        def __init__(self, post_repository: PostRepository):
            self._post_repository = post_repository

        @translate_errors(PostError)
        async def execute(self, command: PublishPostCommand) -> PostDto:
            post = await self._post_repository.find_by_id(command.post_id)
            post.publish()
            return to_post_dto(await self._post_repository.update(post))
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
