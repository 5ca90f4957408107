# src/minstd/sequence.py
"""
Driving loop: step the generator from the seed and emit "<index> - <value>"
lines, one per step.
"""

import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from .config import RUN
from .rng import MinstdRand

def generate(seed: int = RUN.seed, count: int = RUN.count) -> Iterator[Tuple[int, int]]:
    """
    Yield (index, value) for index 0..count-1. Each value is the state AFTER
    stepping, so the first value is one step past the seed, never the seed itself.
    """
    # Raw state, not MinstdRand.seeded(): seed 0 must stay on the fixed point.
    rng = MinstdRand(state=seed)
    for i in range(count):
        yield i, rng.next32()

def format_line(index: int, value: int) -> str:
    return f"{index} - {value}"

def sequence_lines(seed: int = RUN.seed, count: int = RUN.count) -> List[str]:
    return [format_line(i, v) for i, v in generate(seed, count)]

def render_text(seed: int = RUN.seed, count: int = RUN.count) -> str:
    return "".join(line + "\n" for line in sequence_lines(seed, count))

def print_sequence(out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    for line in sequence_lines():
        print(line, file=out)
