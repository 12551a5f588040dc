import logging

from .cache import ProblemCache
from .clients import JudgeClient
from .document import ActiveDocument, HostWindow, ProblemViewer
from .models import FetcherConfig
from .tree import ProblemTree

logger = logging.getLogger(__name__)

VIEW_ID = "baekjoonExplorer"
REFRESH_COMMAND = "baekjoon.refresh"
OPEN_PROBLEM_COMMAND = "baekjoon.openProblem"
REFRESH_MESSAGE = "백준 문제 목록을 새로고침했습니다."


class BaekjoonExplorer:
    def __init__(
        self,
        host: HostWindow,
        client: JudgeClient | None = None,
        cache: ProblemCache | None = None,
    ):
        self.host = host
        self.client = client or JudgeClient()
        self.tree = ProblemTree(self.client, cache)
        self.viewer = ProblemViewer(host, self.client, ActiveDocument())

    def refresh(self) -> None:
        self.tree.refresh()
        self.host.show_info(REFRESH_MESSAGE)

    async def open_problem(self, problem_id: str):
        return await self.viewer.open_problem(problem_id)


def activate(
    host: HostWindow, config: FetcherConfig | None = None
) -> BaekjoonExplorer:
    explorer = BaekjoonExplorer(host, JudgeClient(config))
    host.register_tree_data_provider(VIEW_ID, explorer.tree)
    host.register_command(REFRESH_COMMAND, explorer.refresh)
    host.register_command(OPEN_PROBLEM_COMMAND, explorer.open_problem)
    logger.info("baekjoon explorer activated")
    return explorer
