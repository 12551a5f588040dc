CATEGORY_IDS: dict[str, int] = {
    "구현": 102,
    "다이나믹 프로그래밍": 25,
    "그래프 이론": 7,
    "자료 구조": 175,
    "문자열": 158,
    "그리디 알고리즘": 33,
    "브루트포스 알고리즘": 125,
    "수학": 124,
    "정렬": 97,
    "이분 탐색": 12,
    "기하학": 100,
    "정수론": 95,
    "트리": 120,
    "사칙연산": 699,
    "시뮬레이션": 141,
    "DFS": 127,
    "BFS": 126,
    "백트래킹": 5,
    "분할 정복": 24,
    "스택": 71,
    "큐": 72,
    "우선순위 큐": 59,
    "해시를 사용한 집합과 맵": 136,
}

# ordered by step number, starting at 1
STEP_NAMES: list[str] = [
    "입출력과 사칙연산",
    "조건문",
    "반복문",
    "1차원 배열",
    "문자열",
    "심화 1",
    "2차원 배열",
    "일반 수학 1",
    "약수, 배수와 소수",
    "기하: 직사각형과 삼각형",
    "시간 복잡도",
    "브루트 포스",
    "정렬",
    "집합과 맵",
    "약수, 배수와 소수 2",
    "스택, 큐, 덱",
    "조합론",
    "심화 2",
    "재귀",
    "백트래킹",
    "동적 계획법 1",
    "누적 합",
    "그리디 알고리즘",
    "분할 정복",
    "이분 탐색",
    "우선순위 큐",
    "동적 계획법 2",
    "DFS와 BFS",
    "최단 경로",
    "투 포인터",
    "동적 계획법과 최단거리 역추적",
]


def resolve_category_id(name: str) -> int | None:
    return CATEGORY_IDS.get(name)


def list_categories() -> list[str]:
    return list(CATEGORY_IDS)


def list_steps() -> list[tuple[int, str]]:
    return list(enumerate(STEP_NAMES, start=1))
