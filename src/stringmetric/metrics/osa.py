from __future__ import annotations

"""Optimal string alignment distance, the restricted Damerau-Levenshtein metric.

Each transposed pair must be adjacent and is never edited again, so results
can exceed :func:`~stringmetric.metrics.damerau.dl_distance`: ``"CA"`` to
``"ABC"`` costs 3 here against 2 for the unrestricted metric.
"""

from .damerau import init_dl_matrix


def osa_distance(a: str, b: str) -> int:
    """Return the optimal string alignment distance between *a* and *b*.

    Uses the same bordered matrix as ``dl_distance``: cell ``[i][j]`` covers
    the prefixes of length ``i-1`` and ``j-1``.
    """

    if a == b:
        return 0

    alen = len(a)
    blen = len(b)
    maxdist = alen + blen

    if alen == 0 or blen == 0:
        return maxdist

    nrows = alen + 2
    ncols = blen + 2
    dist = init_dl_matrix(nrows, ncols, maxdist)

    for i in range(2, nrows):
        char_a = a[i - 2]
        row = dist[i]
        prev_row = dist[i - 1]

        for j in range(2, ncols):
            char_b = b[j - 2]
            scost = 0 if char_a == char_b else 1
            best = min(
                prev_row[j - 1] + scost,  # substitution
                row[j - 1] + 1,  # insertion
                prev_row[j] + 1,  # deletion
            )
            if i > 2 and j > 2 and char_a == b[j - 3] and a[i - 3] == char_b:
                best = min(best, dist[i - 2][j - 2] + 1)  # adjacent swap
            row[j] = best

    return dist[nrows - 1][ncols - 1]


__all__ = ["osa_distance"]
