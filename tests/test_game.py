import pytest

from wordle_api.game import (
    GameStore, GuessesExhausted, NoActiveRound, RoundAlreadyActive, check_word, is_solved
)


def test_check_word_mixed_verdict():
    assert check_word("mayor", "humor") == "pwwcc"


def test_check_word_exact_match():
    assert check_word("humor", "humor") == "ccccc"
    assert is_solved("ccccc")


def test_check_word_no_common_letters():
    assert check_word("bliss", "humor") == "wwwww"


def test_check_word_ignores_case():
    assert check_word("HuMoR", "humor") == "ccccc"


def test_check_word_does_not_cap_repeated_letters():
    # only one 'o' in the secret, but every misplaced 'o' is marked present
    assert check_word("ooooo", "humor") == "pppcp"


def test_check_word_length_mismatch():
    with pytest.raises(ValueError):
        check_word("four", "humor")


def test_start_twice_conflicts():
    games = GameStore()
    games.start("1.2.3.4", "humor")
    with pytest.raises(RoundAlreadyActive):
        games.start("1.2.3.4", "apple")
    # other clients are independent
    games.start("5.6.7.8", "apple")
    assert len(games) == 2


def test_guess_without_round():
    games = GameStore()
    with pytest.raises(NoActiveRound):
        games.submit_guess("1.2.3.4", "humor")


def test_winning_guess_ends_round():
    games = GameStore()
    games.start("me", "humor")
    assert games.submit_guess("me", "mayor") == "pwwcc"
    assert games.get("me").num_guesses == 1
    assert games.submit_guess("me", "humor") == "ccccc"
    assert games.get("me") is None


def test_fifth_guess_ends_round():
    games = GameStore()
    games.start("me", "humor")
    for _ in range(4):
        games.submit_guess("me", "mayor")
    assert games.get("me").num_guesses == 4
    assert games.submit_guess("me", "mayor") == "pwwcc"
    assert games.get("me") is None


def test_exhausted_round_is_cleared():
    games = GameStore(max_guesses=5)
    rnd = games.start("me", "humor")
    rnd.num_guesses = 5
    with pytest.raises(GuessesExhausted):
        games.ensure_active("me")
    assert games.get("me") is None
    games.start("me", "apple")
