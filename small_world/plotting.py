"""Histograms of the sampled path lengths and reachability."""

from __future__ import annotations

from collections import Counter

import matplotlib.pyplot as plt

from small_world.sampler import AnalysisResult


def plot_distributions(result: AnalysisResult) -> None:
    """
    Show the sampled shortest-path length distribution next to the
    distribution of per-root reachability (as % of the network).

    Args:
        result: Output of analyze().

    Returns:
        None (displays plot to screen).
    """
    fig, (path_ax, reach_ax) = plt.subplots(1, 2, figsize=(14, 6))
    fig.suptitle(f"Small-World Sampling\n{result.node_count} nodes, "
                 f"{len(result.path_lengths)} connected pairs",
                 fontsize=14, fontweight='bold', y=0.98)

    # one bar per hop count
    counts = Counter(result.path_lengths)
    hops = sorted(counts)
    path_ax.bar(hops, [counts[h] for h in hops], color="skyblue", edgecolor="gray")
    path_ax.axvline(result.path_stats.mean, color="orange", linestyle="--",
                    label=f"mean = {result.path_stats.mean:.2f}")
    path_ax.axvline(result.small_world_threshold, color="red", linestyle=":",
                    label=f"threshold = {result.small_world_threshold}")
    path_ax.set_xlabel("Shortest path length (hops)")
    path_ax.set_ylabel("Sampled pairs")
    path_ax.set_title("Shortest path lengths", fontsize=12, fontweight='bold')
    path_ax.legend()

    reach = [100 * count / result.node_count for count in result.reach_counts]
    reach_ax.hist(reach, bins=20, color="lightgreen", edgecolor="gray")
    reach_ax.axvline(result.reach_percentage, color="orange", linestyle="--",
                     label=f"average = {result.reach_percentage:.2f}%")
    reach_ax.set_xlabel(f"% of network within {result.max_depth} steps")
    reach_ax.set_ylabel("Sampled roots")
    reach_ax.set_title("Reachability", fontsize=12, fontweight='bold')
    reach_ax.legend()

    plt.tight_layout(rect=[0, 0, 1, 0.94])
    plt.show()
