import sys

from prefixsum.checks import run_sanity_checks
from prefixsum.demo import run_demo


def main(stream=None):
    stream = sys.stdout if stream is None else stream

    n_checked = run_sanity_checks()
    print(f'Sanity checks passed ({n_checked} queries)', file=stream)
    return run_demo(stream)


if __name__ == '__main__':
    main()
