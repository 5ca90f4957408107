from dataclasses import dataclass

from .rng import SEED

@dataclass(frozen=True)
class RunConfig:
    # Fixed: the program recognizes no arguments or environment.
    seed: int = SEED
    count: int = 10

RUN = RunConfig()
