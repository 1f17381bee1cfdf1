#!/usr/bin/env python3
"""
Benchmark: simplified harmonic sum 1/1 + 1/2 + ... + 1/n.

Every step reduces the pair with the scanning gcd, so the cost grows with
the size of the denominators.
"""

import argparse
import logging
import sys
import time
sys.path.append('.')

from rationals.simplified import SimplifiedRational

logging.basicConfig(level=logging.INFO)


def harmonic_sum(n):
    total = SimplifiedRational(0, 1)
    for k in range(1, n + 1):
        total = total.add(SimplifiedRational(1, k))
    return total


if __name__ == "__main__":
    argparser = argparse.ArgumentParser()
    argparser.add_argument('--count', type=int, default=12)
    args = argparser.parse_args()

    start = time.time()
    result = harmonic_sum(args.count)
    logging.info('H(%d) = %s, time: %.2fs', args.count, result, time.time() - start)
