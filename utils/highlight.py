import html
from typing import List, Tuple


def merge_spans(spans: List[Tuple[int, int]], size: int) -> List[Tuple[int, int]]:
    """Clip (start, len) spans to [0, size) and merge overlapping ones into (start, end) ranges."""
    ranges = sorted(
        (s, min(s + l, size)) for s, l in spans if 0 <= s < size and l > 0
    )
    merged: List[Tuple[int, int]] = []
    for s, e in ranges:
        if merged and s <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], e))
        else:
            merged.append((s, e))
    return merged


def highlight_matches_html(text: str, spans: List[Tuple[int, int]]) -> str:
    if not text:
        return "<em>No text</em>"
    out, last = [], 0
    for s, e in merge_spans(spans, len(text)):
        out.append(html.escape(text[last:s]))
        out.append("<mark>" + html.escape(text[s:e]) + "</mark>")
        last = e
    out.append(html.escape(text[last:]))
    return "<div style='white-space:pre-wrap;font-family:monospace'>" + "".join(out) + "</div>"
