#!/usr/bin/env python3
"""Standalone minstd reference: bare step function plus print loop.

Kept independent of the package on purpose so the two can be diffed
line-for-line. Semantics: seed 1234, step first, then print, 10 times.
"""

# Lehmer / minstd constants
MULTIPLIER = 48271
MODULUS = 2147483647  # 2^31-1


def next_random(previous: int) -> int:
    return (previous * MULTIPLIER) % MODULUS


def run(write=print) -> None:
    seed = 1234
    random = next_random(seed)
    for i in range(10):
        write(f"{i} - {random}")
        random = next_random(random)


def main():
    run()


if __name__ == "__main__":
    main()
