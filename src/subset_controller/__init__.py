"""
Subset Controller - Topology subset reconciliation core

Keeps the subsets (per-node-selector workload groups) of a topology
deployment converged to the declared topology: creating missing subsets
with slow-start ramp-up, deleting stale ones, and cleaning up subsets of
foreign workload types.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
