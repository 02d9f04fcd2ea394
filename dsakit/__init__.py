"""Classic algorithms and data structures: sorting, searching, bits, strings,
backtracking, dynamic programming, greedy methods, heaps, stacks, disjoint
sets, binary search trees and graph algorithms."""

__version__ = "0.1.0"