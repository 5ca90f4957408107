import argparse

from .sequence import print_sequence

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="minstd",
        description="Print 10 minstd (48271, 2^31-1) values from seed 1234.",
        add_help=False,
    )
    # No options are recognized; whatever is passed is ignored.
    ap.parse_known_args(argv)
    print_sequence()
    return 0
