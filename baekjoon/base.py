from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag

from .models import Problem, ProblemDetail


def _text(tag: Tag | None) -> str:
    return tag.get_text().strip() if tag else ""


def _inner_html(tag: Tag | None) -> str:
    return tag.decode_contents() if tag else ""


class ListingSchema(ABC):
    """Where a listing page keeps its problem rows.

    Column indices are 1-based, matching ``td:nth-child``.
    """

    id_column: int
    title_column: int
    difficulty_column: int | None = None
    limit: int | None = None

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def row_selector(self) -> str: ...

    def parse_row(self, row: Tag) -> Problem | None:
        pid = _text(row.select_one(f"td:nth-child({self.id_column})"))
        title = _text(row.select_one(f"td:nth-child({self.title_column}) > a"))
        if not pid or not title:
            return None
        difficulty = ""
        if self.difficulty_column is not None:
            difficulty = _text(
                row.select_one(f"td:nth-child({self.difficulty_column})")
            )
        return Problem(id=pid, title=title, difficulty=difficulty or None)

    def extract(self, markup: str) -> list[Problem]:
        soup = BeautifulSoup(markup, "html.parser")
        out: list[Problem] = []
        for row in soup.select(self.row_selector):
            problem = self.parse_row(row)
            if problem is not None:
                out.append(problem)
        if self.limit is not None:
            return out[: self.limit]
        return out


class DetailSchema(ABC):
    title_selector: str
    description_selector: str
    input_selector: str
    output_selector: str
    sample_input_selector: str
    sample_output_selector: str

    @property
    @abstractmethod
    def name(self) -> str: ...

    def extract(self, markup: str) -> ProblemDetail:
        soup = BeautifulSoup(markup, "html.parser")
        return ProblemDetail(
            title=_text(soup.select_one(self.title_selector)),
            description_html=_inner_html(soup.select_one(self.description_selector)),
            input_html=_inner_html(soup.select_one(self.input_selector)),
            output_html=_inner_html(soup.select_one(self.output_selector)),
            sample_inputs=[_text(t) for t in soup.select(self.sample_input_selector)],
            sample_outputs=[
                _text(t) for t in soup.select(self.sample_output_selector)
            ],
        )
