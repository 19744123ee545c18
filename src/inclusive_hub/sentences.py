from __future__ import annotations

import re
from typing import List

SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")


def split_into_sentences(text: str) -> List[str]:
    """Split text into trimmed sentences at whitespace following ., ! or ?.

    Terminal punctuation stays attached to its sentence. Runs such as ``...``
    or ``?!`` only produce a boundary after the last mark, since the split
    happens on the whitespace that follows them.
    """
    if not text:
        return []
    sentences: List[str] = []
    for segment in SENTENCE_BOUNDARY_RE.split(text):
        segment = segment.strip()
        if segment:
            sentences.append(segment)
    return sentences
