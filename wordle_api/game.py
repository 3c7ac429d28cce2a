# Guess evaluation and in-memory round management.
# Marking rules (simplified Wordle):
# - 'c' when the letter sits in the same position in the secret word,
# - 'p' when the letter appears anywhere else in the secret word,
# - 'w' otherwise.
# Present letters are not capped by how often they occur in the secret, so a
# guess with a repeated letter can get several 'p' marks for a single match.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional
import logging
from .config import MAX_GUESSES

logger = logging.getLogger(__name__)

CORRECT = "c"
PRESENT = "p"
WRONG = "w"

def check_word(guess: str, word: str) -> str:
    guess = guess.lower()
    word = word.lower()
    if len(guess) != len(word):
        raise ValueError(f"guess has {len(guess)} letters, expected {len(word)}")

    marks = []
    for i, ch in enumerate(guess):
        if ch == word[i]:
            marks.append(CORRECT)
        elif ch in word:
            marks.append(PRESENT)
        else:
            marks.append(WRONG)
    return "".join(marks)

def is_solved(result: str) -> bool:
    return bool(result) and all(m == CORRECT for m in result)

class RoundError(ValueError):
    pass

class RoundAlreadyActive(RoundError):
    pass

class NoActiveRound(RoundError):
    pass

class GuessesExhausted(NoActiveRound):
    pass

@dataclass
class Round:
    word: str
    num_guesses: int = 0

class GameStore:
    """Rounds in progress, keyed by an opaque client identifier.

    A client has at most one round. The round is dropped as soon as it is won
    or its guesses run out, which lets the same client start a new one.
    """

    def __init__(self, max_guesses: int = MAX_GUESSES):
        self.max_guesses = max_guesses
        self._rounds: Dict[str, Round] = {}

    def __len__(self) -> int:
        return len(self._rounds)

    def get(self, client_id: str) -> Optional[Round]:
        return self._rounds.get(client_id)

    def start(self, client_id: str, word: str) -> Round:
        if client_id in self._rounds:
            raise RoundAlreadyActive("A round is already in progress.")
        rnd = Round(word=word.lower())
        self._rounds[client_id] = rnd
        logger.info("Round started for %s", client_id)
        return rnd

    def end(self, client_id: str) -> None:
        self._rounds.pop(client_id, None)

    def clear(self) -> None:
        self._rounds.clear()

    def ensure_active(self, client_id: str) -> Round:
        rnd = self._rounds.get(client_id)
        if rnd is None:
            raise NoActiveRound("No round in progress.")
        if rnd.num_guesses >= self.max_guesses:
            self.end(client_id)
            raise GuessesExhausted("Round is already over.")
        return rnd

    def submit_guess(self, client_id: str, guess: str) -> str:
        rnd = self.ensure_active(client_id)
        rnd.num_guesses += 1
        result = check_word(guess, rnd.word)

        if is_solved(result) or rnd.num_guesses >= self.max_guesses:
            self.end(client_id)
            logger.debug(
                "Round over for %s after %d guesses (%s)",
                client_id, rnd.num_guesses, "won" if is_solved(result) else "lost",
            )
        return result
