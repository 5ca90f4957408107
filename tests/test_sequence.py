import io
import os

from minstd.config import RUN
from minstd.rng import M
from minstd.sequence import format_line, generate, print_sequence, render_text, sequence_lines

GOLDEN = os.path.join(os.path.dirname(__file__), "..", "data", "golden", "minstd_1234.txt")

def read_golden(path=GOLDEN):
    with open(path, encoding="utf-8") as f:
        return f.read()

def test_run_config_is_fixed():
    assert (RUN.seed, RUN.count) == (1234, 10)

def test_format_line():
    assert format_line(0, 59566414) == "0 - 59566414"

def test_golden_sequence():
    assert render_text() == read_golden()

def test_first_value_is_stepped_not_seed():
    idx, v = next(generate())
    assert (idx, v) == (0, 59566414)

def test_always_ten_lines():
    for seed in (1, 42, RUN.seed, M - 1, 0):
        lines = sequence_lines(seed)
        assert len(lines) == 10, f"seed {seed}"
        assert [ln.split(" - ")[0] for ln in lines] == [str(i) for i in range(10)]

def test_zero_seed_stays_zero():
    assert [v for _, v in generate(0)] == [0] * 10

def test_print_sequence_writes_stream():
    buf = io.StringIO()
    print_sequence(buf)
    assert buf.getvalue() == read_golden()

def test_generate_follows_engine():
    from minstd.rng import MinstdRand
    rng = MinstdRand(state=RUN.seed)
    assert [v for _, v in generate()] == [rng() for _ in range(RUN.count)]
