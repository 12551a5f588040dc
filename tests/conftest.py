from pathlib import Path
from typing import Any

import httpx
import pytest

from baekjoon.clients import JudgeClient
from baekjoon.models import FetcherConfig

FIX = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixture_text():
    def _load(name: str) -> str:
        p = FIX / name
        return p.read_text(encoding="utf-8")

    return _load


class OfflineSite:
    """Serves canned pages keyed by path and query, and records every request."""

    def __init__(self, pages: dict[str, str | int | Exception] | None = None):
        self.pages: dict[str, str | int | Exception] = dict(pages or {})
        self.calls: list[str] = []
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.raw_path.decode("ascii")
        self.calls.append(path)
        self.requests.append(request)
        page = self.pages.get(path, 404)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, int):
            return httpx.Response(page, text="")
        return httpx.Response(200, text=page)

    def client(self, **config: Any) -> JudgeClient:
        config.setdefault("max_retries", 1)
        return JudgeClient(
            FetcherConfig(**config), transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture
def offline_site():
    return OfflineSite()


class FakeDocument:
    def __init__(self, content: str, language: str):
        self.content = content
        self.language = language
        self.closed = False


class FakeHost:
    def __init__(self) -> None:
        self.documents: list[FakeDocument] = []
        self.focused: list[FakeDocument] = []
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.providers: dict[str, Any] = {}
        self.commands: dict[str, Any] = {}

    def register_tree_data_provider(self, view_id: str, provider: Any) -> None:
        self.providers[view_id] = provider

    def register_command(self, command: str, handler: Any) -> None:
        self.commands[command] = handler

    async def create_document(self, content: str, language: str) -> FakeDocument:
        doc = FakeDocument(content, language)
        self.documents.append(doc)
        return doc

    async def replace_content(self, handle: FakeDocument, content: str) -> None:
        handle.content = content

    def is_closed(self, handle: FakeDocument) -> bool:
        return handle.closed

    async def focus(self, handle: FakeDocument) -> None:
        self.focused.append(handle)

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def host():
    return FakeHost()
