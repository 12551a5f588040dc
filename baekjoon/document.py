import logging
from typing import Any, Awaitable, Callable, Protocol

from .acmicpc import PROBLEM_PAGE, extract_problem_detail
from .base import DetailSchema
from .clients import JudgeClient
from .models import ProblemDetail
from .render import render_problem

logger = logging.getLogger(__name__)

DOCUMENT_LANGUAGE = "markdown"
LOAD_ERROR_MESSAGE = "문제를 불러오는 중 오류가 발생했습니다."
OPEN_ERROR_MESSAGE = "문제를 여는 중 오류가 발생했습니다."


class HostWindow(Protocol):
    """What the editor provides to the explorer."""

    def register_tree_data_provider(self, view_id: str, provider: Any) -> None: ...

    def register_command(
        self, command: str, handler: Callable[..., Awaitable[Any] | Any]
    ) -> None: ...

    async def create_document(self, content: str, language: str) -> Any: ...

    async def replace_content(self, handle: Any, content: str) -> None: ...

    def is_closed(self, handle: Any) -> bool: ...

    async def focus(self, handle: Any) -> None: ...

    def show_info(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...


class ActiveDocument:
    """The one document that shows problem content.

    A new document is created when none is bound or the bound one was
    closed; otherwise the bound document is rewritten in place.
    """

    def __init__(self) -> None:
        self.handle: Any = None

    @property
    def is_bound(self) -> bool:
        return self.handle is not None

    def is_live(self, host: HostWindow) -> bool:
        return self.handle is not None and not host.is_closed(self.handle)

    async def show(self, host: HostWindow, content: str) -> Any:
        if not self.is_live(host):
            self.handle = await host.create_document(content, DOCUMENT_LANGUAGE)
            return self.handle
        await host.replace_content(self.handle, content)
        await host.focus(self.handle)
        return self.handle

    def release(self) -> None:
        self.handle = None


class ProblemViewer:
    def __init__(
        self,
        host: HostWindow,
        client: JudgeClient | None = None,
        active: ActiveDocument | None = None,
        schema: DetailSchema = PROBLEM_PAGE,
    ):
        self.host = host
        self.client = client or JudgeClient()
        self.active = active or ActiveDocument()
        self.schema = schema

    async def load_problem(self, problem_id: str) -> ProblemDetail | None:
        result = await self.client.fetch_problem(problem_id)
        if not result.success:
            logger.warning("could not fetch problem %s: %s", problem_id, result.error)
            return None
        try:
            return extract_problem_detail(result.markup, self.schema)
        except Exception:
            logger.exception("failed to extract problem %s", problem_id)
            return None

    async def open_problem(self, problem_id: str) -> Any:
        detail = await self.load_problem(problem_id)
        if detail is None:
            self.host.show_error(LOAD_ERROR_MESSAGE)
            return None

        content = render_problem(detail)
        try:
            return await self.active.show(self.host, content)
        except Exception:
            logger.exception("failed to show problem %s", problem_id)
            self.host.show_error(OPEN_ERROR_MESSAGE)
            return None
