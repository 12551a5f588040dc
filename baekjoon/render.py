from .models import ProblemDetail

FENCE = "```"


def _sample_at(samples: list[str], i: int) -> str:
    return samples[i] if i < len(samples) else ""


def _fenced(heading: str, body: str) -> str:
    return f"## {heading}\n{FENCE}\n{body}\n{FENCE}\n\n"


def sample_count(detail: ProblemDetail) -> int:
    return max(len(detail.sample_inputs), len(detail.sample_outputs))


def render_problem(detail: ProblemDetail) -> str:
    """Render a problem statement as markdown.

    Samples are paired by position; a side with fewer blocks renders the
    missing ones as empty.
    """
    parts = [
        f"# {detail.title}\n\n",
        f"## 문제\n{detail.description_html}\n\n",
        f"## 입력\n{detail.input_html}\n\n",
        f"## 출력\n{detail.output_html}\n\n",
    ]
    for i in range(sample_count(detail)):
        n = i + 1
        parts.append(_fenced(f"예제 입력 {n}", _sample_at(detail.sample_inputs, i)))
        parts.append(_fenced(f"예제 출력 {n}", _sample_at(detail.sample_outputs, i)))
    return "".join(parts)
