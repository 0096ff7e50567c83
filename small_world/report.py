"""Textual report of an AnalysisResult."""

from __future__ import annotations

from small_world.sampler import AnalysisResult
from small_world.significance import SignificanceResult

SUPPORTS_MESSAGE = "The average degree of separation supports the 'small world hypothesis'."
REJECTS_MESSAGE = "The average degree of separation does not support the 'small world hypothesis'."


def format_report(result: AnalysisResult) -> list[str]:
    """
    Render the six report lines, in order:

    average path length, median, standard deviation, small-world verdict,
    reachability percentage, average clustering coefficient.
    """
    stats = result.path_stats
    verdict = SUPPORTS_MESSAGE if result.supports_small_world else REJECTS_MESSAGE
    return [
        f"Average shortest path length: {stats.mean}",
        f"Median of shortest path lengths: {stats.median}",
        f"Standard deviation of shortest path lengths: {stats.std_dev:.2f}",
        verdict,
        f"Average percentage of network reachable within {result.max_depth} steps: "
        f"{result.reach_percentage:.2f}%",
        f"Average clustering coefficient: {result.average_clustering:.4f}",
    ]


def format_significance(significance: SignificanceResult | None, threshold: float) -> list[str]:
    if significance is None:
        return ["Small-world significance test: not enough variation in the sample to test."]

    lines = [
        f"t-statistic: {significance.t_statistic:.4f}",
        f"p-value (one-tailed): {significance.p_value:.4f}",
    ]
    if significance.significant:
        lines.append(f"Result: average separation is significantly below {threshold} "
                     f"(p={significance.p_value:.4f} < {significance.alpha}).")
    else:
        lines.append(f"Result: average separation is not significantly below {threshold} "
                     f"(p={significance.p_value:.4f} >= {significance.alpha}).")
    return lines
