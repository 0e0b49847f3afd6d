"""
FAQ corpus loading.

Text format: repeated blocks of

    Q: <question>
    A: <answer, possibly spanning several lines>

A block ends at the next "Q:" line or at end of input. Blocks whose question
is not directly followed by an "A:" line are skipped. CSV files are read with
pandas; the last column named like "question" (or "answer") wins, so
an id column such as Question_ID is passed over for Questions.
"""

import functools
import logging
import os
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from faq_matcher import FAQMatcherError, FaqEntry

logger = logging.getLogger(__name__)

QUESTION_MARKER = "Q:"
ANSWER_MARKER = "A:"


class CorpusLoadError(FAQMatcherError):
    """Raised when the FAQ source cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Could not load FAQ corpus from {source}: {reason}")
        self.source = source
        self.reason = reason


# --------------------------- Text Format -----------------------------

def iter_faq_blocks(lines: Iterable[str]) -> Iterator[FaqEntry]:
    """Pull Q:/A: blocks off a line iterator, one FaqEntry at a time."""
    question: Optional[str] = None
    answer_lines: Optional[List[str]] = None

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        marker = line.lstrip()

        if marker.startswith(QUESTION_MARKER):
            entry = _finish_block(question, answer_lines)
            if entry is not None:
                yield entry
            question = marker[len(QUESTION_MARKER):].strip()
            answer_lines = None
            continue

        if question is None:
            continue

        if answer_lines is None:
            if marker.startswith(ANSWER_MARKER):
                answer_lines = [marker[len(ANSWER_MARKER):]]
            else:
                logger.debug("Skipping FAQ block without an answer: %r", question)
                question = None
            continue

        answer_lines.append(line)

    entry = _finish_block(question, answer_lines)
    if entry is not None:
        yield entry


def _finish_block(question: Optional[str], answer_lines: Optional[List[str]]) -> Optional[FaqEntry]:
    if not question or answer_lines is None:
        return None
    answer = "\n".join(answer_lines).strip()
    if not answer:
        return None
    return FaqEntry(question=question, answer=answer)


def parse_faq_text(text: str) -> List[FaqEntry]:
    return list(iter_faq_blocks(text.splitlines()))


# --------------------------- CSV Format ------------------------------

def _find_qa_columns(columns: Iterable[str]) -> Tuple[Optional[str], Optional[str]]:
    q_col = None
    a_col = None
    for col in columns:
        col_lower = str(col).strip().lower()
        if "question" in col_lower:
            q_col = col
        if "answer" in col_lower:
            a_col = col
    return q_col, a_col


def load_faq_csv(csv_path: str) -> List[FaqEntry]:
    """Load FAQ data from CSV."""
    try:
        df = pd.read_csv(csv_path)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise CorpusLoadError(csv_path, str(exc)) from exc

    q_col, a_col = _find_qa_columns(df.columns)
    if q_col is None or a_col is None:
        raise CorpusLoadError(
            csv_path, f"could not find Question/Answer columns, found {list(df.columns)}"
        )

    questions = df[q_col].fillna("").astype(str).str.strip().tolist()
    answers = df[a_col].fillna("").astype(str).str.strip().tolist()
    return [FaqEntry(question=q, answer=a) for q, a in zip(questions, answers) if q and a]


# --------------------------- Loading ---------------------------------

def load_faq_file(path: str) -> List[FaqEntry]:
    """Load a corpus file; .csv goes through pandas, anything else is Q:/A: text."""
    path = os.fspath(path)
    if not os.path.exists(path):
        raise CorpusLoadError(path, "file not found")

    if path.lower().endswith(".csv"):
        entries = load_faq_csv(path)
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                entries = list(iter_faq_blocks(f))
        except (OSError, UnicodeDecodeError) as exc:
            raise CorpusLoadError(path, str(exc)) from exc

    logger.debug("Parsed %d FAQ entries from %s", len(entries), path)
    return entries


def file_loader(path: str) -> Callable[[], List[FaqEntry]]:
    """Zero-argument loader re-reading `path` on every call (used by reload)."""
    return functools.partial(load_faq_file, path)


__all__ = [
    "CorpusLoadError",
    "file_loader",
    "iter_faq_blocks",
    "load_faq_csv",
    "load_faq_file",
    "parse_faq_text",
]
