from __future__ import annotations

import os

from textpos import CompositePosition, TextRange
from textpos.testing import generate_document, generate_texts, measure


def test_generated_texts_are_deterministic() -> None:
    assert generate_texts(seed=1, count=50) == generate_texts(seed=1, count=50)
    assert generate_texts(seed=1, count=50) != generate_texts(seed=2, count=50)


def test_corpus_concatenation_agrees_with_add() -> None:
    seed = int(os.environ.get("TEXTPOS_CORPUS_SEED", "1"))
    count = int(os.environ.get("TEXTPOS_CORPUS_CASES", "500"))

    texts = generate_texts(seed=seed, count=count)
    total = CompositePosition.ZERO
    for i, text in enumerate(texts):
        pos = measure(text, checked=True)
        assert pos.add(CompositePosition.ZERO) == pos
        if i:
            prev = texts[i - 1]
            assert measure(prev).add(pos) == measure(prev + text), f"case {i}: {prev!r} + {text!r}"
        total = total.add(pos)
    assert total == measure("".join(texts))


def test_document_lines_as_ranges() -> None:
    doc = generate_document(seed=3, lines=40)
    assert doc.count("\n") == 40

    offset = 0
    previous = TextRange.zero(CompositePosition)
    lines = [line + "\n" for line in doc.split("\n")[:-1]]
    for line in lines:
        start = measure(doc[:offset], checked=True)
        end = measure(doc[: offset + len(line)], checked=True)
        rng = TextRange(start, end)

        assert rng.len() == measure(line)
        assert rng.start == previous.end
        assert not rng.overlaps(previous)
        assert rng.start.row + 1 == rng.end.row
        assert rng.end.column8 == 0

        previous = rng
        offset += len(line)
