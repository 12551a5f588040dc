from .base import DetailSchema, ListingSchema
from .models import Problem, ProblemDetail

STEP_PATH = "/step/{step}"
PROBLEMSET_PATH = "/problemset?sort=ac_desc&algo={category_id}&page=1"
PROBLEM_PATH = "/problem/{problem_id}"

CATEGORY_LISTING_LIMIT = 50


class StepListingSchema(ListingSchema):
    id_column = 2
    title_column = 3
    difficulty_column = 4

    @property
    def name(self) -> str:
        return "step"

    @property
    def row_selector(self) -> str:
        return "table.table > tbody > tr"


class ProblemsetListingSchema(ListingSchema):
    id_column = 1
    title_column = 2
    difficulty_column = 4
    limit = CATEGORY_LISTING_LIMIT

    @property
    def name(self) -> str:
        return "problemset"

    @property
    def row_selector(self) -> str:
        return "#problemset > tbody > tr"


class ProblemPageSchema(DetailSchema):
    title_selector = "#problem_title"
    description_selector = "#problem_description"
    input_selector = "#problem_input"
    output_selector = "#problem_output"
    sample_input_selector = ".sample-input"
    sample_output_selector = ".sample-output"

    @property
    def name(self) -> str:
        return "problem"


STEP_LISTING = StepListingSchema()
PROBLEMSET_LISTING = ProblemsetListingSchema()
PROBLEM_PAGE = ProblemPageSchema()


def extract_listing(markup: str, schema: ListingSchema) -> list[Problem]:
    return schema.extract(markup)


def extract_problem_detail(
    markup: str, schema: DetailSchema = PROBLEM_PAGE
) -> ProblemDetail:
    return schema.extract(markup)


def step_path(step: int | str) -> str:
    return STEP_PATH.format(step=step)


def problemset_path(category_id: int) -> str:
    return PROBLEMSET_PATH.format(category_id=category_id)


def problem_path(problem_id: str) -> str:
    return PROBLEM_PATH.format(problem_id=problem_id)
