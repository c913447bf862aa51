"""Policies that can take a seat in a match."""

from .policy import HeuristicPolicy, Policy, RandomPolicy, select_action

__all__ = ["HeuristicPolicy", "Policy", "RandomPolicy", "select_action"]
