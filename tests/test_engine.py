import pytest
from collections import Counter
from wordler.engine import score, normalize_guess, InvalidLength, LetterBudget, Letter, MatchKind

G, Y, A = MatchKind.EXACT_LOCATION, MatchKind.PRESENT_IN_WORD, MatchKind.ABSENT_IN_WORD


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("ELITE", "GREED", "Y---Y"),
    ("ARIEL", "ARIEL", "GGGGG"),
    ("KELLY", "TRULY", "---GG"),
    ("GREED", "GLIDE", "G-Y-Y"),
    ("BELLE", "LEVEL", "-GYYY"),
    ("LEMON", "LEVEL", "GG---"),
    ("COOLS", "SCOOP", "YYG-Y"),
    ("RAISE", "CRANE", "YY--G"),
    ("STARE", "CRANE", "--GYG"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer).pattern == expected


def test_score_greed_elite_letters_and_kinds():
    attempt = score("ELITE", "GREED")
    assert [(s.char, s.kind) for s in attempt] == [
        ("E", Y), ("L", A), ("I", A), ("T", A), ("E", Y),
    ]
    assert attempt.word == "ELITE"
    assert not attempt.solved


def test_leftmost_occurrence_claims_budget_first():
    # one E in the answer, two misplaced Es in the guess
    assert score("SPEED", "ABIDE").pattern == "--Y-Y"
    # the exact E at the end is paid for before the misplaced ones
    assert score("EERIE", "THREE").pattern == "Y-G-G"


@pytest.mark.parametrize("guess,answer", [
    ("ELITE", "GREED"), ("KELLY", "TRULY"), ("GREED", "GLIDE"),
    ("LLAMA", "HELLO"), ("EERIE", "THREE"), ("ABBEY", "BABES"),
])
def test_duplicate_letter_conservation(guess, answer):
    attempt = score(guess, answer)
    credited = Counter(s.char for s in attempt if s.kind is not A)
    in_answer = Counter(answer)
    for c, n in credited.items():
        assert n <= in_answer[c]
    exact = sum(1 for g, a in zip(guess, answer) if g == a)
    assert sum(1 for s in attempt if s.kind is G) == exact


def test_score_rejects_unnormalized_input():
    with pytest.raises(ValueError):
        score("abc", "ARIEL")
    with pytest.raises(ValueError):
        score("ar1el", "ARIEL")


def test_letter_budget():
    budget = LetterBudget("GREED")
    assert budget[Letter.E] == 2
    assert budget.take(Letter.E) and budget.take(Letter.E)
    assert budget.take(Letter.E) is False
    assert budget[Letter.Z] == 0


def test_normalize_guess():
    assert normalize_guess("  ariel\n") == "ARIEL"
    with pytest.raises(InvalidLength) as e:
        normalize_guess("arie")
    assert e.value.length == 4
    with pytest.raises(InvalidLength):
        normalize_guess("ariels")
