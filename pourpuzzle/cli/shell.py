"""
Interactive shell for the pouring puzzle.

Reads pours as two whitespace-separated 1-based bucket numbers, on one
line or split across lines, renders the buckets after every turn, and offers a replay once the puzzle is solved.

The shell never validates bucket numbers itself: it hands them to
attempt_pour and reports whatever the puzzle rejects. Bad input never
changes the puzzle.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

from ..config import (
    INVALID_INPUT_MESSAGE,
    OUT_OF_BOUNDS_MESSAGE,
    POUR_PROMPT,
    REPLAY_PROMPT,
    WIN_MESSAGE,
)
from ..errors import PuzzleErrorKind
from ..puzzle import PuzzleState
from ..validation import attempt_pour

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_number_list(numbers: Sequence[int]) -> str:
    """Format numbers as prose: '8', '8 and 5', '8, 5, and 3'."""
    words = [str(n) for n in numbers]
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} and {words[1]}"
    return f"{', '.join(words[:-1])}, and {words[-1]}"


def format_greeting(state: PuzzleState) -> str:
    """Build the welcome text for this puzzle's buckets and targets."""
    capacities = state.get_capacity()
    total = state.get_capacity(0)
    example_to = 2 if state.get_size() > 1 else 1

    return (
        "\n"
        f"welcome! suppose you have {state.get_size()} buckets of water with capacities\n"
        f"of {format_number_list(capacities)}. can you figure out how to end up with\n"
        f"volumes of {format_number_list(state.get_target())} (respectively) by pouring "
        f"{total} gallons\n"
        f"of water between them? to begin, all {total} gallons are in the\n"
        "first bucket. to pour water from bucket to bucket, type\n"
        "the number of the bucket you'd like to pour from and the\n"
        "number of the bucket you'd like to fill up, separated by a\n"
        f"space. for example, to pour 1 into {example_to}, type '1 {example_to}'. "
        "good luck!\n\n(ctrl + c to quit)\n"
    )


def format_volumes(state: PuzzleState) -> str:
    """Render every bucket with its 1-based number, capacity and volume."""
    lines = ["current volumes: "]
    for i in range(state.get_size()):
        lines.append(
            f"\tbucket {i + 1} (capacity: {state.get_capacity(i)}): "
            f"{state.get_current_volume(i)}"
        )
    return "\n".join(lines)


def parse_bucket_number(token: str) -> Optional[int]:
    """
    Parse one bucket number as typed (1-based).

    Returns:
        The number, or None if the token is not an integer
    """
    try:
        return int(token)
    except ValueError:
        return None


# =============================================================================
# SHELL
# =============================================================================

class PuzzleShell:
    """
    Token-based game loop around a PuzzleState.

    Input is read as whitespace-separated tokens, so a move may be typed
    on one line ('1 2') or split across lines. Rejected input drops the
    rest of its line. End of input or ctrl+c ends the session at any
    prompt.
    """

    def __init__(
        self,
        state: PuzzleState,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.state = state
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        # Unread tokens of the current input line
        self._tokens: list[str] = []

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _write_prompt(self, prompt: str) -> None:
        self.stdout.write(prompt)
        self.stdout.flush()

    def _next_token(self) -> str:
        """Return the next token, reading more lines as needed."""
        while not self._tokens:
            line = self.stdin.readline()
            if not line:
                raise EOFError
            self._tokens = line.split()
        return self._tokens.pop(0)

    def _discard_line(self) -> None:
        self._tokens = []

    def run(self) -> int:
        """Greet the player and play rounds until they stop."""
        self._print(format_greeting(self.state))

        try:
            rounds = 0
            while True:
                self.play_round()
                rounds += 1
                if not self.ask_play_again():
                    break
        except (EOFError, KeyboardInterrupt):
            self._print()
            logger.info("Session ended by user")
            return 0

        logger.info("Session finished after %d round(s)", rounds)
        return 0

    def read_move(self) -> Optional[tuple[int, int]]:
        """
        Read a source and destination bucket number.

        Returns:
            The two numbers as typed (1-based), or None after reporting
            invalid input
        """
        self._write_prompt(POUR_PROMPT)

        pour_from = parse_bucket_number(self._next_token())
        if pour_from is None:
            self._print(INVALID_INPUT_MESSAGE)
            self._discard_line()
            return None

        pour_to = parse_bucket_number(self._next_token())
        self._discard_line()
        if pour_to is None:
            self._print(INVALID_INPUT_MESSAGE)
            return None

        return pour_from, pour_to

    def play_round(self) -> None:
        """Take turns until the puzzle is solved, then reset it."""
        pours = 0

        while not self.state.is_over():
            self._print(format_volumes(self.state))

            move = self.read_move()
            if move is None:
                continue

            result = self.take_turn(*move)
            if result is not None:
                self._print(result)
                continue
            pours += 1

        self._print(WIN_MESSAGE)
        logger.info("Puzzle solved in %d pour(s)", pours)
        self.state.reset()

    def take_turn(self, pour_from: int, pour_to: int) -> Optional[str]:
        """
        Apply one pour given 1-based bucket numbers.

        Returns:
            None if the pour happened, otherwise the message to show
        """
        result = attempt_pour(self.state, pour_from - 1, pour_to - 1)
        if result.accepted:
            return None
        if result.error is not None and result.error.kind is PuzzleErrorKind.INVALID_INDEX:
            return OUT_OF_BOUNDS_MESSAGE
        return INVALID_INPUT_MESSAGE

    def ask_play_again(self) -> bool:
        """
        Ask for a replay until the answer starts with y or n.

        Only the first character of the next token counts,
        case-insensitively. Blank lines are skipped.
        """
        while True:
            self._write_prompt(REPLAY_PROMPT)
            answer = self._next_token().lower()
            self._discard_line()
            if answer[0] == "y":
                return True
            if answer[0] == "n":
                return False
