import pytest

from domain_brainstormer.scoring import DomainScorer


@pytest.fixture
def scorer():
    return DomainScorer()


def test_taskify_scores_well(scorer):
    result = scorer.score("taskify")

    assert result.breakdown.pronounceability == 100
    assert result.breakdown.length == 100
    assert result.breakdown.brandability == 95
    assert result.breakdown.memorability == 65
    assert result.breakdown.typing_ease == 90
    assert result.overall == 93
    assert result.grade == 'A'


def test_unpronounceable_name_ranks_below_brandable_one(scorer):
    bad = scorer.score("xyzqrt")

    assert bad.breakdown.pronounceability == 0
    assert bad.overall < scorer.score("taskify").overall
    assert bad.overall == 56
    assert bad.grade == 'C-'


@pytest.mark.parametrize("name,expected", [
    ("abc", 40),
    ("abcd", 60),
    ("abcde", 75),
    ("abcdef", 100),
    ("abcdefgh", 100),
    ("abcdefghi", 90),
    ("abcdefghijk", 75),
    ("abcdefghijkl", 60),
    ("abcdefghijklm", 45),
    ("abcdefghijklmn", 30),
    ("abcdefghijklmnopq", 20),
])
def test_length_table(scorer, name, expected):
    assert scorer.score_length(name) == expected


def test_brandability_penalties_stack(scorer):
    assert scorer.score_brandability("my-app1") == 40
    assert scorer.score_brandability("Taskify") == 85


def test_memorability(scorer):
    assert scorer.score_memorability("aaaa") == 0
    assert scorer.score_memorability("google") == 65
    assert scorer.score_memorability("booook") == 40
    assert scorer.score_memorability("planner") == 80


def test_typing_ease(scorer):
    assert scorer.score_typing_ease("sofa") == 90
    assert scorer.score_typing_ease("kilo") == 70
    assert scorer.score_typing_ease("xzab") == 40


@pytest.mark.parametrize("score,grade", [
    (100, 'A+'), (95, 'A+'), (94.9, 'A'), (90, 'A'), (85, 'A-'), (80, 'B+'),
    (75, 'B'), (70, 'B-'), (65, 'C+'), (60, 'C'), (55, 'C-'), (50, 'D'), (49, 'F'), (0, 'F'),
])
def test_grades(scorer, score, grade):
    assert scorer.get_grade(score) == grade


@pytest.mark.parametrize("name", ["a", "taskify", "xyzqrt", "my-app1", "zzzzzzzzzzzzzzzzzzzzzz", "Q-9"])
def test_scores_are_bounded(scorer, name):
    result = scorer.score(name)
    assert 0 <= result.overall <= 100
    for value in result.breakdown.to_dict().values():
        assert 0 <= value <= 100


def test_rank_domains_filters_and_sorts(scorer):
    ranked = scorer.rank_domains(["xyzqrt", "taskify", "planner"], min_score=60)

    assert [s.name for s in ranked][0] == "taskify"
    assert all(s.score >= 60 for s in ranked)
    assert [s.score for s in ranked] == sorted((s.score for s in ranked), reverse=True)


def test_to_dict_uses_camel_case_typing_key(scorer):
    data = scorer.suggest("taskify").to_dict()
    assert data['name'] == "taskify"
    assert data['scoring']['breakdown']['typingEase'] == 90
