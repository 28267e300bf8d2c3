from typing import Iterator, List, Optional, Sequence


def kmp_build_lps(p: Optional[Sequence]) -> List[int]:
    """lps[i] = length of the longest proper prefix of p[:i+1] that is also its suffix."""
    if p is None:
        return []
    m = len(p)
    lps = [0] * m
    length, i = 0, 1
    while i < m:
        if p[i] == p[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            # fall back, i stays put
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_iter_matches(t: Optional[Sequence], p: Optional[Sequence],
                     lps: Optional[List[int]] = None) -> Iterator[int]:
    """Yield every start offset of p in t, left to right, overlaps included.

    None for either argument yields nothing. An empty pattern matches at
    every gap of t, including the one after the last element.
    """
    if t is None or p is None:
        return
    n, m = len(t), len(p)
    if m == 0:
        yield from range(n + 1)
        return
    if lps is None:
        lps = kmp_build_lps(p)
    elif len(lps) != m:
        raise ValueError(f"lps has length {len(lps)}, pattern has length {m}")

    i = j = 0
    while i < n:
        if t[i] == p[j]:
            i += 1
            j += 1
            if j == m:
                yield i - j
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1


def kmp_find_all(t: Optional[Sequence], p: Optional[Sequence],
                 lps: Optional[List[int]] = None) -> List[int]:
    return list(kmp_iter_matches(t, p, lps))
