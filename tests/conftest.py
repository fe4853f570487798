import pytest

SAMPLE_CORPUS = [
    "I love programming",
    "Java is my favorite programming language",
    "I enjoy writing code in Java",
    "Java is another popular programming language",
    "I find programming fascinating",
    "I love Java",
    "I prefer Java over Python",
]


@pytest.fixture
def sample_corpus() -> list[str]:
    return list(SAMPLE_CORPUS)
