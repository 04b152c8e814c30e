"""
This script draws random pairs of permutations of a given length and reports, for every metric, summary
statistics of the normalized distances between them. It is a quick way to see how differently the metrics
spread out a search space. The argument order is: length, then optional flags.
"""

import argparse
import random
import time

import pandas as pd

import permdist
from permdist.tabulate import compare

parser = argparse.ArgumentParser('Compare permutation distance metrics on random pairs')
parser.add_argument('n', type=int, help='Length of the permutations')
parser.add_argument('--pairs', type=int, default=1000, help='Number of random pairs to draw')
parser.add_argument('--k', type=int, default=3, help='Cycle length for the k-cycle distance')
parser.add_argument('--seed', type=int, default=1, help='Random seed')
parser.add_argument('--csv', type=str, help='Name of a CSV file to save the distances of every pair to')

args = parser.parse_args()
assert args.n >= 0
assert args.pairs >= 1


# Utility to time blocks of code.
class elapsed:
    def __enter__(self):
        self.time = time.perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        self.time = time.perf_counter() - self.time


def measurers(n: int, k: int, rand: random.Random):
    return {
        'exact_match': permdist.ExactMatchDistance(),
        'deviation': permdist.DeviationDistance(),
        'squared_deviation': permdist.SquaredDeviationDistance(),
        'lee': permdist.LeeDistance(),
        'r_type': permdist.RTypeDistance(),
        'cyclic_r_type': permdist.CyclicRTypeDistance(),
        'acyclic_edge': permdist.AcyclicEdgeDistance(),
        'cyclic_edge': permdist.CyclicEdgeDistance(),
        'cycle': permdist.CycleDistance(),
        'cycle_edit': permdist.CycleEditDistance(),
        f'{k}_cycle': permdist.KCycleDistance(k),
        'block_interchange': permdist.BlockInterchangeDistance(),
        'kendall_tau': permdist.KendallTauDistance(),
        'weighted_kendall_tau': permdist.WeightedKendallTauDistance([rand.uniform(1, 10) for _ in range(n)]),
        'reinsertion': permdist.ReinsertionDistance(),
        'edit': permdist.EditDistance(),
    }


def main():
    rand = random.Random(args.seed)
    metrics = measurers(args.n, args.k, rand)
    pairs = [(permdist.Permutation.random(args.n, rand), permdist.Permutation.random(args.n, rand)) for _ in range(args.pairs)]

    print(f"Comparing {len(metrics)} metrics on {args.pairs:,} random pairs of length {args.n}, random seed {args.seed}.")
    with elapsed() as t:
        frame = compare(metrics, pairs)
    print(f"Computing distances took {t.time:.2f} seconds")

    with pd.option_context('display.max_rows', None, 'display.width', 120):
        print(frame.describe().T[['mean', 'std', 'min', 'max']])

    if args.csv is not None:
        frame.to_csv(args.csv, index_label='pair')
        print(f"Saved to {args.csv}")


if __name__ == '__main__':
    main()
