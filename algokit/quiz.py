"""A five-question multiple-choice quiz."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, TextIO

__all__ = ["Question", "QUESTIONS", "POINTS_PER_QUESTION", "score", "run_quiz", "main"]

POINTS_PER_QUESTION = 10


@dataclass(frozen=True)
class Question:
    """A prompt with numbered options; ``answer`` is the 1-based correct option."""

    prompt: str
    options: tuple[str, ...]
    answer: int

    def is_correct(self, answer: Optional[int]) -> bool:
        """Tell whether ``answer`` picks the right option."""
        return answer == self.answer


QUESTIONS: tuple[Question, ...] = (
    Question("What is capital city of Nepal?", ("Pokhara", "Kathmandu", "Mahendranagar"), 2),
    Question("How many bits are there in one Byte?", ("Three", "Five", "Eight"), 3),
    Question("What is the collection of 4 bits called?", ("One Byte", "One Nibble", "One KiloBye"), 2),
    Question("What is capital city of USA?", ("Washington DC", "New York", "LA"), 1),
    Question("What is capital city of India?", ("Chennai", "Mumbai", "Delhi"), 3),
)

MAX_SCORE = POINTS_PER_QUESTION * len(QUESTIONS)


def score(answers: Iterable[Optional[int]]) -> int:
    """Return the points earned by ``answers`` given in question order."""
    return sum(
        POINTS_PER_QUESTION
        for question, answer in zip(QUESTIONS, answers)
        if question.is_correct(answer)
    )


def _read_int(input_func: Callable[[], str]) -> Optional[int]:
    try:
        return int(input_func().strip())
    except (ValueError, EOFError):
        return None


def run_quiz(input_func: Callable[[], str] = input, output: Optional[TextIO] = None) -> int:
    """Play the quiz interactively and return the score."""
    out = output if output is not None else sys.stdout
    print("Hey , Welcome to small Quiz app", file=out)
    print("Press 1 to start", file=out)
    answers: list[Optional[int]] = []
    if _read_int(input_func) == 1:
        for question in QUESTIONS:
            print(question.prompt, file=out)
            for number, option in enumerate(question.options, start=1):
                print(f"{number}.{option}", file=out)
            print("Give ans in numbers ", file=out)
            answers.append(_read_int(input_func))
    points = score(answers)
    print(f"You scored {points} points out of {MAX_SCORE} points", file=out)
    return points


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the quiz on the terminal."""
    parser = argparse.ArgumentParser(description="A small multiple-choice quiz.")
    parser.parse_args(argv)
    run_quiz(input, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())