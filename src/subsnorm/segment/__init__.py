"""Line segmentation helpers."""

from .balancer import Accumulator, BalancerState, LineBalancer, Phase, accept_word, merge_into, rebalance, split_to_limit
from .screens import ScreenBuilder, pair_sub_lines

__all__ = [
    "Accumulator",
    "BalancerState",
    "LineBalancer",
    "Phase",
    "accept_word",
    "merge_into",
    "rebalance",
    "split_to_limit",
    "ScreenBuilder",
    "pair_sub_lines",
]
