"""Sequential identifiers scoped to a single document run."""

from __future__ import annotations


class RunCounters:
    """Page, paragraph, sentence and table counters for one run.

    Each counter starts at zero and hands out 1, 2, 3, ... A new instance is
    created per run so that two runs in the same process never share ids.
    """

    def __init__(self) -> None:
        self.page = 0
        self.paragraph = 0
        self.sentence = 0
        self.table = 0

    def next_page(self) -> int:
        self.page += 1
        return self.page

    def next_paragraph(self) -> int:
        self.paragraph += 1
        return self.paragraph

    def next_sentence(self) -> int:
        self.sentence += 1
        return self.sentence

    def next_table(self) -> int:
        self.table += 1
        return self.table

    def reset_tables(self) -> None:
        self.table = 0

    def __repr__(self) -> str:
        return (
            f"RunCounters(page={self.page}, paragraph={self.paragraph}, "
            f"sentence={self.sentence}, table={self.table})"
        )
