from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ListingKind(str, Enum):
    STEP = "step"
    CATEGORY = "category"


class ListingKey(BaseModel):
    kind: ListingKind
    value: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def step(cls, number: int) -> "ListingKey":
        return cls(kind=ListingKind.STEP, value=str(number))

    @classmethod
    def category(cls, name: str) -> "ListingKey":
        return cls(kind=ListingKind.CATEGORY, value=name)


class Problem(BaseModel):
    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    difficulty: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class ProblemDetail(BaseModel):
    title: str = ""
    description_html: str = ""
    input_html: str = ""
    output_html: str = ""
    sample_inputs: list[str] = Field(default_factory=list)
    sample_outputs: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class FetchResult(BaseModel):
    success: bool
    error: str
    url: str = ""
    markup: str = ""

    model_config = ConfigDict(extra="forbid")


class FetcherConfig(BaseModel):
    base_url: str = "https://www.acmicpc.net"
    timeout_seconds: float | None = None
    max_retries: int = 3
    headers: dict[str, str] = Field(
        default_factory=lambda: {
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        }
    )

    model_config = ConfigDict(extra="forbid")


class NodeKind(str, Enum):
    ROOT = "root"
    GROUP = "group"
    LISTING = "listing"
    PROBLEM = "problem"


class GroupKind(str, Enum):
    BY_STEP = "by_step"
    BY_CATEGORY = "by_category"


class OpenCommand(BaseModel):
    command: str = "baekjoon.openProblem"
    title: str = "문제 열기"
    arguments: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class TreeNode(BaseModel):
    kind: NodeKind
    label: str
    group: GroupKind | None = None
    key: ListingKey | None = None
    problem_id: str | None = None
    tooltip: str | None = None
    command: OpenCommand | None = None

    model_config = ConfigDict(extra="forbid")

    @property
    def collapsible(self) -> bool:
        return self.kind is not NodeKind.PROBLEM

    @property
    def icon(self) -> str:
        return "folder" if self.collapsible else "file"
