import pytest


@pytest.fixture
def step_markup():
    def _build(n: int) -> str:
        rows = "".join(
            f'<tr><td>{i + 1}</td><td>{2000 + i}</td>'
            f'<td><a href="/problem/{2000 + i}">문제 {i}</a></td><td>브론즈 V</td></tr>'
            for i in range(n)
        )
        return f'<table class="table"><tbody>{rows}</tbody></table>'

    return _build


@pytest.fixture
def problemset_markup():
    def _build(n: int) -> str:
        rows = "".join(
            f'<tr><td>{1000 + i}</td><td><a href="/problem/{1000 + i}">문제 {i}</a></td>'
            f"<td></td><td>{i}</td></tr>"
            for i in range(n)
        )
        return f'<table id="problemset"><tbody>{rows}</tbody></table>'

    return _build


@pytest.fixture
def mock_problem_html():
    return """
    <span id="problem_title">A-B</span>
    <div id="problem_description"><p>A-B를 출력한다.</p></div>
    <pre class="sample-input">3 2</pre>
    <pre class="sample-input">10 4</pre>
    <pre class="sample-output">1</pre>
    """
