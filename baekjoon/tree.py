import logging
from typing import Callable

from .acmicpc import PROBLEMSET_LISTING, STEP_LISTING, extract_listing
from .base import ListingSchema
from .cache import ProblemCache
from .catalog import list_categories, list_steps, resolve_category_id
from .clients import JudgeClient
from .models import (
    FetchResult,
    GroupKind,
    ListingKey,
    ListingKind,
    NodeKind,
    OpenCommand,
    Problem,
    TreeNode,
)

logger = logging.getLogger(__name__)

STEP_GROUP_LABEL = "단계별로 풀어보기"
CATEGORY_GROUP_LABEL = "알고리즘 분류"

ChangeListener = Callable[[TreeNode | None], None]


def group_node(group: GroupKind) -> TreeNode:
    label = STEP_GROUP_LABEL if group is GroupKind.BY_STEP else CATEGORY_GROUP_LABEL
    return TreeNode(kind=NodeKind.GROUP, label=label, group=group)


def step_node(number: int, name: str) -> TreeNode:
    return TreeNode(
        kind=NodeKind.LISTING, label=f"{number}. {name}", key=ListingKey.step(number)
    )


def category_node(name: str) -> TreeNode:
    return TreeNode(kind=NodeKind.LISTING, label=name, key=ListingKey.category(name))


def problem_node(problem: Problem) -> TreeNode:
    return TreeNode(
        kind=NodeKind.PROBLEM,
        label=f"{problem.title} ({problem.id}번)",
        problem_id=problem.id,
        tooltip=problem.difficulty,
        command=OpenCommand(arguments=[problem.id]),
    )


class ProblemTree:
    """Lazy tree of root, groups, listings and problems.

    Listing children come from the cache, or from one fetch that fills it.
    """

    def __init__(
        self, client: JudgeClient | None = None, cache: ProblemCache | None = None
    ):
        self.client = client or JudgeClient()
        self.cache = cache if cache is not None else ProblemCache()
        self._listeners: list[ChangeListener] = []

    def on_did_change_tree_data(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def dispose() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    def refresh(self) -> None:
        self.cache.clear()
        for listener in list(self._listeners):
            listener(None)

    def get_tree_item(self, node: TreeNode) -> TreeNode:
        return node

    async def get_children(self, node: TreeNode | None = None) -> list[TreeNode]:
        if node is None or node.kind is NodeKind.ROOT:
            return [group_node(GroupKind.BY_STEP), group_node(GroupKind.BY_CATEGORY)]
        if node.kind is NodeKind.GROUP:
            if node.group is GroupKind.BY_STEP:
                return [step_node(n, name) for n, name in list_steps()]
            return [category_node(name) for name in list_categories()]
        if node.kind is NodeKind.LISTING and node.key is not None:
            problems = await self.resolve_listing(node.key)
            return [problem_node(p) for p in problems]
        return []

    async def resolve_listing(self, key: ListingKey) -> list[Problem]:
        schema: ListingSchema
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if key.kind is ListingKind.STEP:
            schema = STEP_LISTING
            result = await self.client.fetch_listing_by_step(key.value)
        else:
            category_id = resolve_category_id(key.value)
            if category_id is None:
                return []
            schema = PROBLEMSET_LISTING
            result = await self.client.fetch_listing_by_category_id(category_id)

        problems = self._extract(result, key, schema)
        if problems is None:
            return []
        self.cache.put(key, problems)
        return problems

    def _extract(
        self, result: FetchResult, key: ListingKey, schema: ListingSchema
    ) -> list[Problem] | None:
        if not result.success:
            logger.warning(
                "no problems for %s %s: %s", key.kind.value, key.value, result.error
            )
            return None
        try:
            return extract_listing(result.markup, schema)
        except Exception:
            logger.exception("failed to extract %s listing %s", schema.name, key.value)
            return None
