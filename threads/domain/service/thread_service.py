"""Thread tree domain service."""

from collections import defaultdict
from datetime import datetime
from uuid import uuid4

import logfire

from threads.domain.error import (
    NotFoundError,
    StructuralIntegrityError,
    storage_operation,
)
from threads.domain.model import Thread
from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
    WriteCoordinator,
)
from threads.domain.value import CommunityId, ExternalCommunityId, ThreadId, UserId

from .base import Service
from .invalidation import PathInvalidator


class ThreadService(Service):
    """Domain service for the reply tree.

    Creates posts and replies, resolves descendants and deletes whole
    subtrees while keeping User and Community back-references in step.
    """

    def __init__(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        community_repository: CommunityRepository,
        coordinator: WriteCoordinator,
        invalidator: PathInvalidator,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            user_repository: User repository
            community_repository: Community repository
            coordinator: Write coordinator grouping multi-entity writes
            invalidator: Port used to announce stale paths
        """
        self.thread_repository = thread_repository
        self.user_repository = user_repository
        self.community_repository = community_repository
        self.coordinator = coordinator
        self.invalidator = invalidator

    async def create_thread(
        self,
        text: str,
        author_id: UserId,
        community_external_id: ExternalCommunityId | None,
        path: str,
    ) -> Thread:
        """Create a top-level thread.

        An unknown community id is not an error, the thread is simply
        created outside any community.

        Args:
            text: Thread body
            author_id: Author user ID
            community_external_id: External id of the community, if any
            path: Presentation path to invalidate

        Returns:
            Created thread

        Raises:
            PersistenceError: If any write fails
        """
        with logfire.span(
            "thread_service.create_thread",
            author_id=str(author_id),
            community_external_id=community_external_id,
        ):
            thread = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                created_at=datetime.now(),
            )

            async with self.coordinator.unit("creating thread") as unit:
                community = None
                if community_external_id:
                    community = await self.community_repository.find_by_external_id(
                        community_external_id
                    )
                    if community is None:
                        logfire.warn(
                            "Community not found, creating thread without community",
                            community_external_id=community_external_id,
                        )
                if community is not None:
                    thread = thread.model_copy(update={"community_id": community.id})

                thread = await self.thread_repository.save(thread)
                await unit.checkpoint()

                await self.user_repository.push_thread(author_id, thread.id)

                if community is not None:
                    await unit.checkpoint()
                    await self.community_repository.push_thread(community.id, thread.id)

            logfire.info(
                "Thread created",
                thread_id=str(thread.id),
                author_id=str(author_id),
                community_id=str(thread.community_id) if thread.community_id else None,
            )

            await self.invalidator.invalidate(path)
            return thread

    async def fetch_all_descendants(self, thread_id: ThreadId) -> list[Thread]:
        """Get every reply below a thread, at any depth.

        Args:
            thread_id: Root thread ID

        Returns:
            Descendants in pre-order: each reply followed by its own replies

        Raises:
            StructuralIntegrityError: If parent links form a cycle
            PersistenceError: If a read fails
        """
        with logfire.span(
            "thread_service.fetch_all_descendants", thread_id=str(thread_id)
        ):
            with storage_operation("fetching thread descendants"):
                descendants = await self._collect_descendants(thread_id)
            logfire.info(
                "Descendants resolved",
                thread_id=str(thread_id),
                count=len(descendants),
            )
            return descendants

    async def delete_thread_subtree(self, thread_id: ThreadId, path: str) -> int:
        """Delete a thread together with every reply below it.

        Steps:
        1. Resolve the root and all descendants
        2. Batch delete the whole set
        3. Pull the deleted ids from every author and community involved
        4. Detach the root from its parent, when it is a reply

        Args:
            thread_id: Root of the subtree
            path: Presentation path to invalidate

        Returns:
            Number of threads deleted

        Raises:
            NotFoundError: If the thread does not exist
            StructuralIntegrityError: If parent links form a cycle
            PersistenceError: If any write fails
        """
        with logfire.span(
            "thread_service.delete_thread_subtree", thread_id=str(thread_id)
        ):
            async with self.coordinator.unit("deleting thread") as unit:
                root = await self.thread_repository.find_by_id(thread_id)
                if root is None:
                    logfire.warn("Thread not found for deletion", thread_id=str(thread_id))
                    raise NotFoundError("Thread", str(thread_id))

                descendants = await self._collect_descendants(thread_id)
                subtree = [root, *descendants]
                deleted_ids = [thread.id for thread in subtree]

                author_ids: list[UserId] = list(
                    dict.fromkeys(t.author_id for t in subtree if t.author_id)
                )
                community_ids: list[CommunityId] = list(
                    dict.fromkeys(t.community_id for t in subtree if t.community_id)
                )

                # Rows first, then back-references
                await self.thread_repository.delete_many(deleted_ids)
                await unit.checkpoint()

                if author_ids:
                    await self.user_repository.pull_threads(author_ids, deleted_ids)
                    await unit.checkpoint()
                if community_ids:
                    await self.community_repository.pull_threads(
                        community_ids, deleted_ids
                    )
                    await unit.checkpoint()
                if root.parent_id is not None:
                    await self.thread_repository.pull_child(root.parent_id, root.id)

            logfire.info(
                "Thread subtree deleted",
                thread_id=str(thread_id),
                deleted=len(deleted_ids),
                authors=len(author_ids),
                communities=len(community_ids),
            )

            await self.invalidator.invalidate(path)
            return len(deleted_ids)

    async def attach_comment(
        self,
        parent_id: ThreadId,
        text: str,
        author_id: UserId,
        path: str,
    ) -> Thread:
        """Reply to a thread.

        The reply is linked from its parent's children and from its
        author's threads, same as a top-level post.

        Args:
            parent_id: Thread being replied to
            text: Reply body
            author_id: Author user ID
            path: Presentation path to invalidate

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent thread does not exist
            PersistenceError: If any write fails
        """
        with logfire.span(
            "thread_service.attach_comment",
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            comment = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            async with self.coordinator.unit("adding comment to thread") as unit:
                parent = await self.thread_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn("Parent thread not found", parent_id=str(parent_id))
                    raise NotFoundError("Thread", str(parent_id))

                comment = await self.thread_repository.save(comment)
                await unit.checkpoint()

                await self.thread_repository.push_child(parent_id, comment.id)
                await unit.checkpoint()

                await self.user_repository.push_thread(author_id, comment.id)

            logfire.info(
                "Comment attached",
                comment_id=str(comment.id),
                parent_id=str(parent_id),
                author_id=str(author_id),
            )

            await self.invalidator.invalidate(path)
            return comment

    async def _collect_descendants(self, root_id: ThreadId) -> list[Thread]:
        """Walk the reply tree one level per query.

        Levels are fetched breadth first with an explicit frontier, then
        flattened to pre-order with an explicit stack, so tree depth never
        touches the Python call stack.
        """
        seen: set[ThreadId] = {root_id}
        replies: dict[ThreadId, list[Thread]] = defaultdict(list)

        frontier: list[ThreadId] = [root_id]
        while frontier:
            level = await self.thread_repository.find_children(frontier)
            frontier = []
            for child in level:
                if child.id in seen:
                    logfire.error(
                        "Cycle in reply tree",
                        root_id=str(root_id),
                        repeated_id=str(child.id),
                    )
                    raise StructuralIntegrityError(str(root_id), str(child.id))
                seen.add(child.id)
                frontier.append(child.id)
                parent_id = child.parent_id
                if parent_id is not None:
                    replies[parent_id].append(child)

        ordered: list[Thread] = []
        stack = list(reversed(replies.get(root_id, [])))
        while stack:
            thread = stack.pop()
            ordered.append(thread)
            stack.extend(reversed(replies.get(thread.id, [])))
        return ordered
