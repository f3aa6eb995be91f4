"""Thread domain service.

Turns the flat reply list of a post into the nested tree shown on the post
view, and answers queries against that tree.
"""

from collections.abc import Callable, Iterator, Sequence
from datetime import datetime

import logfire

from discuss.config import ThreadingSettings
from discuss.domain.model.reply import Reply, ReplyNode
from discuss.domain.value import ReplyId, ReplySortOrder

from .base import Service

# Returned by get_reply_depth when no node matches
NOT_FOUND = -1


def _created_at(node: ReplyNode) -> datetime:
    return node.created_at


def _score(node: ReplyNode) -> int:
    return node.score


def _engagement(node: ReplyNode) -> int:
    return node.engagement


# order -> (sort key, descending)
# "controversial" ranks by vote volume, not by how evenly votes are split
_SORT_KEYS: dict[ReplySortOrder, tuple[Callable[[ReplyNode], object], bool]] = {
    ReplySortOrder.NEWEST: (_created_at, True),
    ReplySortOrder.OLDEST: (_created_at, False),
    ReplySortOrder.BEST: (_score, True),
    ReplySortOrder.CONTROVERSIAL: (_engagement, True),
}


class ThreadService(Service):
    """Domain service for building, shaping and querying reply trees.

    Every operation returns new nodes; inputs are never mutated. Traversals
    use explicit stacks so unflattened trees of any depth are safe.
    """

    def __init__(self, settings: ThreadingSettings) -> None:
        """Initialize thread service.

        Args:
            settings: Threading settings (default depth limit and sort order)
        """
        self.settings = settings

    def build_tree(self, replies: Sequence[Reply]) -> list[ReplyNode]:
        """Organize flat replies into a nested tree.

        Algorithm:
        1. Map reply id -> fresh childless node, in input order
        2. Walk the map in order: top-level replies become roots, the rest
           are appended to their parent's children
        3. A reply whose parent is not in the list is promoted to a root

        Parent cycles are not detected. Replies on a cycle are never reached
        from a root and so drop out of the tree.

        Args:
            replies: Flat replies of one post

        Returns:
            Root nodes with children populated to unlimited depth
        """
        with logfire.span("thread_service.build_tree", reply_count=len(replies)):
            nodes: dict[ReplyId, ReplyNode] = {}
            parents: dict[ReplyId, ReplyId | None] = {}
            for reply in replies:
                nodes[reply.id] = ReplyNode.from_reply(reply)
                parents[reply.id] = reply.parent_reply_id

            roots: list[ReplyNode] = []
            dangling = 0
            for reply_id, node in nodes.items():
                parent_id = parents[reply_id]
                if parent_id is None:
                    roots.append(node)
                elif parent_id in nodes:
                    nodes[parent_id].children.append(node)
                else:
                    dangling += 1
                    roots.append(node)

            if dangling:
                logfire.warn(
                    "Replies with unknown parent promoted to top level",
                    count=dangling,
                )
            logfire.info(
                "Built reply tree",
                reply_count=len(nodes),
                root_count=len(roots),
            )
            return roots

    def flatten(
        self, roots: Sequence[ReplyNode], max_depth: int | None = None
    ) -> list[ReplyNode]:
        """Limit nesting so only nodes up to ``max_depth`` have children.

        A node at ``max_depth`` keeps all of its descendants, but as one flat
        list in pre-order with their own children stripped. Those descendants
        sit one level below the limit and are always leaves; the nesting they
        had is lost.

        Args:
            roots: Root nodes from build_tree
            max_depth: Deepest level to nest to (defaults to settings)

        Returns:
            New root nodes

        Raises:
            ValueError: If max_depth is negative
        """
        if max_depth is None:
            max_depth = self.settings.max_depth
        if max_depth < 0:
            raise ValueError("max_depth must be zero or greater")

        with logfire.span("thread_service.flatten", max_depth=max_depth):
            result: list[ReplyNode] = []
            stack: list[tuple[Sequence[ReplyNode], int, list[ReplyNode]]] = [
                (roots, 0, result)
            ]
            while stack:
                nodes, depth, target = stack.pop()
                for node in nodes:
                    if depth >= max_depth:
                        target.append(node.with_children(self._descendants(node)))
                    else:
                        copy = node.with_children([])
                        target.append(copy)
                        stack.append((node.children, depth + 1, copy.children))
            return result

    def sort(
        self, roots: Sequence[ReplyNode], order: ReplySortOrder | str
    ) -> list[ReplyNode]:
        """Sort the root list and every children list by the same order.

        Sorting is stable, so ties keep their incoming order.

        Args:
            roots: Root nodes (flattened or not)
            order: Sort order

        Returns:
            New, sorted root nodes
        """
        order = ReplySortOrder(order)
        key, descending = _SORT_KEYS[order]

        with logfire.span("thread_service.sort", order=order.value):
            result: list[ReplyNode] = []
            stack: list[tuple[Sequence[ReplyNode], list[ReplyNode]]] = [
                (roots, result)
            ]
            while stack:
                nodes, target = stack.pop()
                for node in sorted(nodes, key=key, reverse=descending):
                    copy = node.with_children([])
                    target.append(copy)
                    stack.append((node.children, copy.children))
            return result

    def build_thread(
        self,
        replies: Sequence[Reply],
        order: ReplySortOrder | str | None = None,
        max_depth: int | None = None,
    ) -> list[ReplyNode]:
        """Build the display tree for a post: build, flatten, then sort.

        Args:
            replies: Flat replies of one post
            order: Sort order (defaults to settings)
            max_depth: Nesting limit (defaults to settings)

        Returns:
            Sorted, depth-limited root nodes
        """
        order = ReplySortOrder(order or self.settings.default_sort)
        with logfire.span(
            "thread_service.build_thread",
            reply_count=len(replies),
            order=order.value,
        ):
            tree = self.build_tree(replies)
            tree = self.flatten(tree, max_depth)
            return self.sort(tree, order)

    def count_total_replies(self, roots: Sequence[ReplyNode]) -> int:
        """Count every node in the forest, nested ones included."""
        return sum(1 for _ in self._walk(roots))

    def get_reply_depth(self, reply_id: ReplyId, roots: Sequence[ReplyNode]) -> int:
        """Get the depth of a reply in the tree (0 = top-level).

        Returns:
            Depth of the first match in depth-first order, or NOT_FOUND
        """
        for node, depth in self._walk(roots):
            if node.id == reply_id:
                return depth
        return NOT_FOUND

    def find_reply_by_id(
        self, reply_id: ReplyId, roots: Sequence[ReplyNode]
    ) -> ReplyNode | None:
        """Find a reply anywhere in the tree.

        Returns:
            First match in depth-first order, or None
        """
        for node, _ in self._walk(roots):
            if node.id == reply_id:
                return node
        return None

    @staticmethod
    def _walk(roots: Sequence[ReplyNode]) -> Iterator[tuple[ReplyNode, int]]:
        """Yield (node, depth) in pre-order, left to right."""
        stack = [(node, 0) for node in reversed(roots)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((child, depth + 1) for child in reversed(node.children))

    @staticmethod
    def _descendants(node: ReplyNode) -> list[ReplyNode]:
        """All strict descendants in pre-order, each without children."""
        result: list[ReplyNode] = []
        stack = list(reversed(node.children))
        while stack:
            current = stack.pop()
            result.append(current.with_children([]))
            stack.extend(reversed(current.children))
        return result
