import logging
from typing import Any

import backoff
import httpx

from .acmicpc import problem_path, problemset_path, step_path
from .models import FetcherConfig, FetchResult

logger = logging.getLogger(__name__)

SOURCE_NAME = "acmicpc"
RETRY_STATUS = {429, 500, 502, 503, 504}


def _giveup_httpx(exc: Exception) -> bool:
    return (
        isinstance(exc, httpx.HTTPStatusError)
        and exc.response.status_code not in RETRY_STATUS
    )


class JudgeClient:
    """Fetches raw pages from the judge site.

    Every call resolves to a ``FetchResult``; transport problems are reported
    through ``success``/``error`` and never raised.
    """

    def __init__(
        self,
        config: FetcherConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or FetcherConfig()
        self.transport = transport
        self._get = backoff.on_exception(
            backoff.expo,
            (httpx.TransportError, httpx.HTTPStatusError),
            max_tries=self.config.max_retries,
            jitter=backoff.full_jitter,
            giveup=_giveup_httpx,
        )(self._get_once)

    async def _get_once(self, client: httpx.AsyncClient, url: str) -> str:
        kwargs: dict[str, Any] = {}
        if self.config.timeout_seconds is not None:
            kwargs["timeout"] = self.config.timeout_seconds
        r = await client.get(url, **kwargs)
        r.raise_for_status()
        return r.text

    def _create_fetch_error(self, error_msg: str, url: str = "") -> FetchResult:
        return FetchResult(
            success=False,
            error=f"{SOURCE_NAME}: {error_msg}",
            url=url,
        )

    async def fetch(self, path: str) -> FetchResult:
        url = self.config.base_url + path
        try:
            async with httpx.AsyncClient(
                headers=self.config.headers, transport=self.transport
            ) as client:
                markup = await self._get(client, url)
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", url, e)
            return self._create_fetch_error(str(e) or type(e).__name__, url)
        except Exception as e:
            logger.exception("GET %s failed unexpectedly", url)
            return self._create_fetch_error(str(e) or type(e).__name__, url)
        return FetchResult(success=True, error="", url=url, markup=markup)

    async def fetch_listing_by_step(self, step: int | str) -> FetchResult:
        return await self.fetch(step_path(step))

    async def fetch_listing_by_category_id(self, category_id: int) -> FetchResult:
        return await self.fetch(problemset_path(category_id))

    async def fetch_problem(self, problem_id: str) -> FetchResult:
        return await self.fetch(problem_path(problem_id))
