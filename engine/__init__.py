"""
Tangle Engine

Builds tangle-like DAGs from text edge lists and computes their statistics.
"""
