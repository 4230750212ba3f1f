from __future__ import annotations

"""True Damerau-Levenshtein edit distance.

Unlike the optimal string alignment variant, transposed characters may be
separated by further insertions or deletions: ``"CA" -> "ABC"`` costs 2
(transpose, then insert) rather than 3.

Ref.: https://en.wikipedia.org/wiki/Damerau%E2%80%93Levenshtein_distance
"""

from typing import Dict, List


def dl_distance(a: str, b: str) -> int:
    """Return the Damerau-Levenshtein distance between *a* and *b*.

    The distance is the minimum number of insertions, deletions,
    substitutions and transpositions needed to turn *a* into *b*. Strings
    are compared codepoint by codepoint; callers wanting normalization
    invariance must normalize before calling.
    """

    if a == b:
        return 0

    alen = len(a)
    blen = len(b)
    maxdist = alen + blen

    if alen == 0 or blen == 0:
        return maxdist

    da = init_dl_alphabet(a, b)

    nrows = alen + 2
    ncols = blen + 2
    dist = init_dl_matrix(nrows, ncols, maxdist)

    for i in range(2, nrows):
        db = 0
        char_a = a[i - 2]
        row = dist[i]
        prev_row = dist[i - 1]

        for j in range(2, ncols):
            char_b = b[j - 2]
            k = da[char_b]
            last_col = db
            tcost = i - k + j - last_col - 2  # (i-k-1) + (j-last_col-1)
            scost = 1

            if char_a == char_b:
                scost = 0
                db = j

            row[j] = min(
                prev_row[j - 1] + scost,  # substitution
                row[j - 1] + 1,  # insertion
                prev_row[j] + 1,  # deletion
                dist[k][last_col] + tcost,  # transposition
            )

        da[char_a] = i

    # "a cat" -> "a act" (transposition) -> "a abct" (insertion)
    #
    #                a  n     a  c  t
    #          0  1  2  3  4  5  6  7
    #       +-------------------------+
    #     0 | 11 11 11 11 11 11 11 11 |
    #     1 | 11  0  1  2  3  4  5  6 |
    #  a  2 | 11  1  0  1  2  3  4  5 |
    #     3 | 11  2  1  0  1  2  3  4 |
    #  c  4 | 11  3  2  1  1  2  2  3 |
    #  a  5 | 11  4  3  2  1  2  2  3 |
    #  t  6 | 11  5  4  3  2  2  3  2 |
    #       +-------------------------+
    return dist[nrows - 1][ncols - 1]


def init_dl_alphabet(a: str, b: str) -> Dict[str, int]:
    """Map every character of *a* and *b* to row ``0`` (never matched)."""

    return {char: 0 for char in a + b}


def init_dl_matrix(nrows: int, ncols: int, maxdist: int) -> List[List[int]]:
    """Allocate the distance matrix and fill its two-row, two-column border.

    Column 0 and row 0 hold *maxdist*; column 1 and row 1 hold the prefix
    lengths offset by one. Interior cells start at zero.

    ::

                     a  n     a  c  t
               0  1  2  3  4  5  6  7
            +-------------------------+
          0 | 11 11 11 11 11 11 11 11 |
          1 | 11  0  1  2  3  4  5  6 |
       a  2 | 11  1  0  0  0  0  0  0 |
          3 | 11  2  0  0  0  0  0  0 |
       c  4 | 11  3  0  0  0  0  0  0 |
       a  5 | 11  4  0  0  0  0  0  0 |
       t  6 | 11  5  0  0  0  0  0  0 |
            +-------------------------+
    """

    dist = [[0] * ncols for _ in range(nrows)]

    for i in range(nrows):
        dist[i][0] = maxdist
        dist[i][1] = i - 1

    dist[0][1] = maxdist

    for j in range(2, ncols):
        dist[0][j] = maxdist
        dist[1][j] = j - 1

    return dist


__all__ = ["dl_distance", "init_dl_alphabet", "init_dl_matrix"]
