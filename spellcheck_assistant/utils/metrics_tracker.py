# metrics_tracker.py - running averages for query timings (per CLI session)

from collections import defaultdict


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n[key] == 0: return 0.0
        return self.m[key] / self.n[key]

    def summary(self):
        """key -> (count, average)"""
        return {k: (self.n[k], self.avg(k)) for k in self.m}
