"""One-sided t-test of the sampled separation against the small-world threshold."""

from __future__ import annotations

import math
from dataclasses import dataclass

from scipy import stats

from small_world.config import SMALL_WORLD_THRESHOLD

ALPHA = 0.05


@dataclass(frozen=True)
class SignificanceResult:
    t_statistic: float
    p_value: float
    alpha: float = ALPHA

    @property
    def significant(self) -> bool:
        return self.p_value < self.alpha


def small_world_ttest(
    lengths: list[int] | tuple[int, ...],
    threshold: float = SMALL_WORLD_THRESHOLD,
    alpha: float = ALPHA,
) -> SignificanceResult | None:
    """
    Test whether the mean shortest-path length is significantly below threshold.

    Uses scipy.stats.ttest_1samp with alternative='less' on the sampled
    lengths. A significant result means the sample supports an average
    separation under the threshold beyond sampling noise.

    Args:
        lengths: Sampled shortest-path lengths.
        threshold: Hypothesised upper bound on the average separation.
        alpha: Significance level.

    Returns:
        SignificanceResult, or None when the sample can't be tested (fewer
        than two lengths, or no variance at all).
    """
    if len(lengths) < 2 or len(set(lengths)) < 2:
        return None

    t_stat, p_value = stats.ttest_1samp(list(lengths), threshold, alternative='less')
    if math.isnan(p_value):
        return None
    return SignificanceResult(t_statistic=float(t_stat), p_value=float(p_value), alpha=alpha)
