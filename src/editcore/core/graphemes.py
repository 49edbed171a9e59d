"""
Grapheme cluster helpers.

Every editing position in the core counts user-perceived characters, so all
conversions between clusters and code points go through this module.
"""

from typing import List

import grapheme


def split_graphemes(text: str) -> List[str]:
    """Split text into its grapheme clusters."""

    return list(grapheme.graphemes(text))


def grapheme_count(text: str) -> int:
    """Count the grapheme clusters in text."""

    return grapheme.length(text)


def codepoint_offsets(clusters: List[str]) -> List[int]:
    """
    Map each cluster index to the code point index where the cluster starts.

    Args:
        clusters: Grapheme clusters of a single string, in order

    Returns:
        A list one longer than ``clusters``; the last entry is the total
        code point length.
    """

    offsets = [0]
    for cluster in clusters:
        offsets.append(offsets[-1] + len(cluster))

    return offsets
