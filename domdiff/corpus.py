"""Seeded synthetic HTML documents for building comparison corpora.

``generate_document(seed, version)`` is a pure function: the base document
is drawn from the seed alone, and version *v* applies mutations 1..v on
top of it, each drawn from its own ``random.Random`` seeded with
``(seed, i)``. Version *v* therefore always extends version *v - 1*.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

_WORDS = (
    "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel",
    "india", "juliet", "kilo", "lima", "mike", "november", "oscar", "papa",
    "quebec", "romeo", "sierra", "tango", "uniform", "victor", "whiskey",
    "xray", "yankee", "zulu",
)

_BLOCK_TAGS = ("p", "li", "blockquote", "pre")


@dataclass
class _Section:
    heading: str
    css_class: str
    blocks: list[tuple[str, str]] = field(default_factory=list)


def _sentence(rng: random.Random, low: int = 3, high: int = 9) -> str:
    words = [rng.choice(_WORDS) for _ in range(rng.randint(low, high))]
    return " ".join(words).capitalize() + "."


def _block(rng: random.Random) -> tuple[str, str]:
    return rng.choice(_BLOCK_TAGS), _sentence(rng)


def _base_sections(seed: int, sections: int) -> list[_Section]:
    rng = random.Random(f"domdiff-base-{seed}")
    return [
        _Section(
            heading=_sentence(rng, 2, 4).rstrip("."),
            css_class=f"section-{i} {rng.choice(_WORDS)}",
            blocks=[_block(rng) for _ in range(rng.randint(2, 5))],
        )
        for i in range(sections)
    ]


def _edit_text(rng: random.Random, doc: list[_Section]) -> None:
    section = rng.choice(doc)
    if not section.blocks:
        section.blocks.append(_block(rng))
        return
    idx = rng.randrange(len(section.blocks))
    tag, _ = section.blocks[idx]
    section.blocks[idx] = (tag, _sentence(rng))


def _insert_block(rng: random.Random, doc: list[_Section]) -> None:
    section = rng.choice(doc)
    section.blocks.insert(rng.randint(0, len(section.blocks)), _block(rng))


def _delete_block(rng: random.Random, doc: list[_Section]) -> None:
    candidates = [s for s in doc if len(s.blocks) > 1]
    if not candidates:
        _insert_block(rng, doc)
        return
    section = rng.choice(candidates)
    del section.blocks[rng.randrange(len(section.blocks))]


def _retag_block(rng: random.Random, doc: list[_Section]) -> None:
    section = rng.choice(doc)
    if not section.blocks:
        section.blocks.append(_block(rng))
        return
    idx = rng.randrange(len(section.blocks))
    tag, text = section.blocks[idx]
    section.blocks[idx] = (rng.choice([t for t in _BLOCK_TAGS if t != tag]), text)


def _add_section(rng: random.Random, doc: list[_Section]) -> None:
    doc.insert(
        rng.randint(0, len(doc)),
        _Section(
            heading=_sentence(rng, 2, 4).rstrip("."),
            css_class=f"section-new {rng.choice(_WORDS)}",
            blocks=[_block(rng) for _ in range(rng.randint(1, 3))],
        ),
    )


_MUTATIONS = (_edit_text, _insert_block, _delete_block, _retag_block, _add_section)


def _render(doc: list[_Section], seed: int, version: int) -> str:
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        f"  <title>Corpus document {seed}</title>",
        "</head>",
        "<body>",
    ]
    for section in doc:
        lines.append(f'  <section class="{section.css_class}">')
        lines.append(f"    <h2>{section.heading}</h2>")
        for tag, text in section.blocks:
            lines.append(f"    <{tag}>{text}</{tag}>")
        lines.append("  </section>")
    lines.append(f"  <footer>Revision {version}</footer>")
    lines.extend(["</body>", "</html>", ""])
    return "\n".join(lines)


def generate_document(seed: int, version: int = 0, sections: int = 4) -> str:
    """Return version *version* of the synthetic document for *seed*."""
    if version < 0:
        raise ValueError(f"version must be >= 0, got {version}")
    if sections < 1:
        raise ValueError(f"sections must be >= 1, got {sections}")

    doc = _base_sections(seed, sections)
    for i in range(1, version + 1):
        rng = random.Random(f"domdiff-mutation-{seed}-{i}")
        rng.choice(_MUTATIONS)(rng, doc)
    return _render(doc, seed, version)


def generate_corpus(seed: int, versions: int, sections: int = 4) -> list[str]:
    """Versions ``0 .. versions - 1`` of the document for *seed*."""
    return [generate_document(seed, v, sections) for v in range(versions)]
