"""Read-side domain service.

Builds the denormalized views the presentation layer renders: the feed,
a single thread with its replies, a user's posts, user search and the
replies a user received.
"""

from typing import Sequence

import logfire

from threads.domain.error import ValidationError, storage_operation
from threads.domain.model import (
    AuthorSummary,
    Community,
    CommunitySummary,
    FeedPage,
    Thread,
    ThreadView,
    User,
    UserPage,
    UserPostsView,
    UserProfileView,
)
from threads.domain.repository import (
    CommunityRepository,
    ThreadRepository,
    UserRepository,
)
from threads.domain.value import (
    CommunityId,
    ExternalUserId,
    SortOrder,
    ThreadId,
    UserFilter,
    UserId,
)

from .base import Service

# Reply levels expanded per view
FEED_REPLY_DEPTH = 1
DETAIL_REPLY_DEPTH = 2
USER_POSTS_REPLY_DEPTH = 1


def _page_offset(page_number: int, page_size: int) -> int:
    if page_number < 1:
        raise ValidationError("Page number must be at least 1")
    if page_size < 1:
        raise ValidationError("Page size must be at least 1")
    return (page_number - 1) * page_size


def _author_summary(user: User) -> AuthorSummary:
    return AuthorSummary(
        id=user.id,
        external_id=user.external_id,
        name=user.name,
        image=user.image,
    )


def _community_summary(community: Community) -> CommunitySummary:
    return CommunitySummary(
        id=community.id,
        external_id=community.external_id,
        name=community.name,
        image=community.image,
    )


class ReadService(Service):
    """Domain service for paginated, denormalized reads."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
        community_repository: CommunityRepository,
    ) -> None:
        """Initialize read service.

        Args:
            thread_repository: Thread repository
            user_repository: User repository
            community_repository: Community repository
        """
        self.thread_repository = thread_repository
        self.user_repository = user_repository
        self.community_repository = community_repository

    async def fetch_feed(self, page_number: int = 1, page_size: int = 20) -> FeedPage:
        """Get a page of top-level threads, newest first.

        Each post carries its author, community and direct replies with
        their authors.

        Args:
            page_number: 1-based page number
            page_size: Posts per page

        Returns:
            Page of posts and whether another page follows

        Raises:
            ValidationError: If page arguments are below 1
            PersistenceError: If a read fails
        """
        offset = _page_offset(page_number, page_size)
        with logfire.span(
            "read_service.fetch_feed", page_number=page_number, page_size=page_size
        ):
            with storage_operation("fetching threads"):
                total = await self.thread_repository.count_top_level()
                threads = await self.thread_repository.find_top_level(
                    limit=page_size, offset=offset
                )
                posts = await self._render(threads, FEED_REPLY_DEPTH)

            has_next = total > offset + len(posts)
            logfire.info(
                "Feed fetched", count=len(posts), total=total, has_next=has_next
            )
            return FeedPage(posts=posts, has_next=has_next)

    async def fetch_thread_detail(self, thread_id: ThreadId) -> ThreadView | None:
        """Get one thread with two levels of replies.

        Args:
            thread_id: Thread ID

        Returns:
            The thread view, or None if the thread does not exist
        """
        with logfire.span(
            "read_service.fetch_thread_detail", thread_id=str(thread_id)
        ):
            with storage_operation("fetching thread"):
                thread = await self.thread_repository.find_by_id(thread_id)
                if thread is None:
                    logfire.warn("Thread not found", thread_id=str(thread_id))
                    return None
                [view] = await self._render([thread], DETAIL_REPLY_DEPTH)
            return view

    async def fetch_user_posts(
        self, external_id: ExternalUserId
    ) -> UserPostsView | None:
        """Get a user with the threads they authored.

        Threads keep the order of the user's threads list and carry their
        community and direct replies.

        Args:
            external_id: External user id

        Returns:
            User and threads, or None if the user does not exist
        """
        with logfire.span("read_service.fetch_user_posts", external_id=external_id):
            with storage_operation("fetching user posts"):
                user = await self.user_repository.find_by_external_id(external_id)
                if user is None:
                    logfire.warn("User not found", external_id=external_id)
                    return None
                threads = await self.thread_repository.find_by_ids(user.threads)
                views = await self._render(threads, USER_POSTS_REPLY_DEPTH)

            logfire.info(
                "User posts fetched", external_id=external_id, count=len(views)
            )
            return UserPostsView(user=user, threads=views)

    async def fetch_users(
        self,
        requesting_user_id: ExternalUserId,
        user_filter: UserFilter,
        page_number: int = 1,
        page_size: int = 20,
        sort: SortOrder = SortOrder.DESC,
    ) -> UserPage:
        """Get a page of users other than the requester.

        Args:
            requesting_user_id: External id of the caller, always excluded
            user_filter: AnyUser or MatchingUsers
            page_number: 1-based page number
            page_size: Users per page
            sort: Creation time ordering

        Returns:
            Page of users and whether another page follows
        """
        offset = _page_offset(page_number, page_size)
        with logfire.span(
            "read_service.fetch_users",
            filter=user_filter.kind,
            page_number=page_number,
            page_size=page_size,
            sort=sort.value,
        ):
            with storage_operation("fetching users"):
                total = await self.user_repository.count(
                    exclude=requesting_user_id, user_filter=user_filter
                )
                users = await self.user_repository.search(
                    exclude=requesting_user_id,
                    user_filter=user_filter,
                    sort=sort,
                    limit=page_size,
                    offset=offset,
                )

            has_next = total > offset + len(users)
            logfire.info("Users fetched", count=len(users), total=total)
            return UserPage(users=users, has_next=has_next)

    async def fetch_user_activity(self, user_id: UserId) -> list[ThreadView]:
        """Get replies other users left on a user's threads, newest first.

        Args:
            user_id: The user whose threads were replied to

        Returns:
            Replies with their authors
        """
        with logfire.span("read_service.fetch_user_activity", user_id=str(user_id)):
            with storage_operation("fetching activity"):
                authored = await self.thread_repository.find_by_author(user_id)
                reply_ids = list(
                    dict.fromkeys(child for t in authored for child in t.children)
                )
                replies = [
                    reply
                    for reply in await self.thread_repository.find_by_ids(reply_ids)
                    if reply.author_id != user_id
                ]
                replies.sort(key=lambda reply: reply.created_at, reverse=True)
                views = await self._render(replies, 0, with_community=False)

            logfire.info("Activity fetched", user_id=str(user_id), count=len(views))
            return views

    async def fetch_user(self, external_id: ExternalUserId) -> UserProfileView | None:
        """Get a user with their communities.

        Args:
            external_id: External user id

        Returns:
            Profile view, or None if the user does not exist
        """
        with logfire.span("read_service.fetch_user", external_id=external_id):
            with storage_operation("fetching user"):
                user = await self.user_repository.find_by_external_id(external_id)
                if user is None:
                    return None
                found = {
                    c.id: c
                    for c in await self.community_repository.find_by_ids(
                        user.communities
                    )
                }
            communities = [
                _community_summary(found[cid]) for cid in user.communities if cid in found
            ]
            return UserProfileView(user=user, communities=communities)

    async def _render(
        self,
        threads: Sequence[Thread],
        reply_depth: int,
        with_community: bool = True,
    ) -> list[ThreadView]:
        """Resolve references and expand replies for a batch of threads.

        Each reply level costs one query, authors and communities one query
        each for the whole batch. Replies below ``reply_depth`` are left as
        ids only.
        """
        levels: list[list[Thread]] = [list(threads)]
        for _ in range(reply_depth):
            child_ids = [cid for thread in levels[-1] for cid in thread.children]
            levels.append(
                await self.thread_repository.find_by_ids(child_ids) if child_ids else []
            )

        loaded: dict[ThreadId, Thread] = {t.id: t for level in levels for t in level}

        author_ids: list[UserId] = list(dict.fromkeys(t.author_id for t in loaded.values()))
        authors = {
            user.id: _author_summary(user)
            for user in await self.user_repository.find_by_ids(author_ids)
        }

        communities: dict[CommunityId, CommunitySummary] = {}
        if with_community:
            community_ids: list[CommunityId] = list(
                dict.fromkeys(t.community_id for t in loaded.values() if t.community_id)
            )
            if community_ids:
                communities = {
                    c.id: _community_summary(c)
                    for c in await self.community_repository.find_by_ids(community_ids)
                }

        def build(thread: Thread, depth: int) -> ThreadView:
            children = []
            if depth < reply_depth:
                children = [
                    build(loaded[cid], depth + 1)
                    for cid in thread.children
                    if cid in loaded
                ]
            return ThreadView(
                id=thread.id,
                text=thread.text,
                parent_id=thread.parent_id,
                created_at=thread.created_at,
                author=authors.get(thread.author_id),
                community=communities.get(thread.community_id)
                if thread.community_id
                else None,
                child_ids=list(thread.children),
                children=children,
            )

        return [build(thread, 0) for thread in threads]
