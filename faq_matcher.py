"""
FAQ Matcher - question answering over a fixed Q/A corpus
File: faq_matcher.py

Matching pipeline:
1. Text Normalization (NFC, case folding, script-aware cleanup, stopwords, Porter stemming)
2. Relevance Index (TF-IDF + Cosine Similarity)
3. Query Expansion (WordNet synonyms, bounded concurrent lookups)
4. Fuzzy Fallback (RapidFuzz WRatio over raw questions)
5. Decision Engine (confidence thresholds, tie-breaks, escalation after repeated failures)

Usage:
    matcher = FAQMatcher.from_file("faq.txt")
    result = asyncio.run(matcher.ask("how do I reset my password?"))
"""

import asyncio
import enum
import logging
import os
import re
import threading
import unicodedata
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from nltk.stem import PorterStemmer
from rapidfuzz import fuzz, process, utils
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS, TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

logger = logging.getLogger(__name__)

# --------------------------- Config ---------------------------------
DEFAULT_STRONG_THRESHOLD = 0.3
DEFAULT_WEAK_THRESHOLD = 0.2
DEFAULT_SCORE_GAP = 0.08
DEFAULT_FUZZY_ACCEPT = 0.3
DEFAULT_FUZZY_MAX_DISTANCE = 0.45
DEFAULT_FUZZY_MIN_TOKEN_LENGTH = 2
DEFAULT_AMBIGUITY_EPSILON = 0.05
DEFAULT_FAIL_LIMIT = 3
DEFAULT_TOP_K = 3
DEFAULT_SYNONYM_TIMEOUT = 2.0
DEFAULT_SYNONYM_CONCURRENCY = 8
DEFAULT_EXTRA_SCRIPTS = "\u0980-\u09FF"  # Bengali block
DEFAULT_ESCALATION_MESSAGE = (
    "Sorry, I wasn't able to answer your question after multiple tries. "
    "Call 16221 (toll free) to reach our support team for further detailed help."
)

NLTK_RESOURCES = {
    "wordnet": "corpora/wordnet",
    "omw-1.4": "corpora/omw-1.4",
}


@dataclass(frozen=True)
class MatcherConfig:
    """Tunable thresholds and limits for the matching pipeline."""

    strong_threshold: float = DEFAULT_STRONG_THRESHOLD
    weak_threshold: float = DEFAULT_WEAK_THRESHOLD
    score_gap: float = DEFAULT_SCORE_GAP
    fuzzy_accept: float = DEFAULT_FUZZY_ACCEPT
    fuzzy_max_distance: float = DEFAULT_FUZZY_MAX_DISTANCE
    fuzzy_min_token_length: int = DEFAULT_FUZZY_MIN_TOKEN_LENGTH
    ambiguity_epsilon: float = DEFAULT_AMBIGUITY_EPSILON
    fail_limit: int = DEFAULT_FAIL_LIMIT
    top_k: int = DEFAULT_TOP_K
    synonym_timeout: float = DEFAULT_SYNONYM_TIMEOUT
    synonym_concurrency: int = DEFAULT_SYNONYM_CONCURRENCY
    extra_scripts: str = DEFAULT_EXTRA_SCRIPTS
    escalation_message: str = DEFAULT_ESCALATION_MESSAGE

    @classmethod
    def from_env(cls) -> "MatcherConfig":
        """Build a config from FAQ_* environment variables, ignoring invalid values."""
        escalation = (os.getenv("FAQ_ESCALATION_MESSAGE") or "").strip()
        extra_scripts = os.getenv("FAQ_EXTRA_SCRIPTS")
        return cls(
            strong_threshold=_coerce_float(os.getenv("FAQ_STRONG_THRESHOLD"), DEFAULT_STRONG_THRESHOLD),
            weak_threshold=_coerce_float(os.getenv("FAQ_WEAK_THRESHOLD"), DEFAULT_WEAK_THRESHOLD),
            score_gap=_coerce_float(os.getenv("FAQ_SCORE_GAP"), DEFAULT_SCORE_GAP),
            fuzzy_accept=_coerce_float(os.getenv("FAQ_FUZZY_ACCEPT"), DEFAULT_FUZZY_ACCEPT),
            fuzzy_max_distance=_coerce_float(
                os.getenv("FAQ_FUZZY_MAX_DISTANCE"), DEFAULT_FUZZY_MAX_DISTANCE
            ),
            fuzzy_min_token_length=_coerce_positive_int(
                os.getenv("FAQ_FUZZY_MIN_TOKEN_LENGTH"), DEFAULT_FUZZY_MIN_TOKEN_LENGTH
            ),
            ambiguity_epsilon=_coerce_float(
                os.getenv("FAQ_AMBIGUITY_EPSILON"), DEFAULT_AMBIGUITY_EPSILON
            ),
            fail_limit=_coerce_positive_int(os.getenv("FAQ_FAIL_LIMIT"), DEFAULT_FAIL_LIMIT),
            top_k=_coerce_positive_int(os.getenv("FAQ_TOP_K"), DEFAULT_TOP_K),
            synonym_timeout=_coerce_float(os.getenv("FAQ_SYNONYM_TIMEOUT"), DEFAULT_SYNONYM_TIMEOUT),
            synonym_concurrency=_coerce_positive_int(
                os.getenv("FAQ_SYNONYM_CONCURRENCY"), DEFAULT_SYNONYM_CONCURRENCY
            ),
            extra_scripts=DEFAULT_EXTRA_SCRIPTS if extra_scripts is None else extra_scripts,
            escalation_message=escalation or DEFAULT_ESCALATION_MESSAGE,
        )


def _coerce_float(value: Optional[str], default: float) -> float:
    if value is None:
        return default
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return default
    if parsed != parsed or parsed < 0:  # NaN or negative
        return default
    return parsed


def _coerce_positive_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


# --------------------------- Errors ----------------------------------

class FAQMatcherError(RuntimeError):
    """Base exception for FAQ matcher operations."""


# --------------------------- Data Model ------------------------------

@dataclass(frozen=True)
class FaqEntry:
    """One question/answer pair; identified by its position in the corpus."""

    question: str
    answer: str


class Outcome(enum.Enum):
    CONFIDENT = "confident_answer"
    WEAK = "weak_answer"
    FUZZY = "fuzzy_answer"
    NO_ANSWER = "no_answer"

    @property
    def answered(self) -> bool:
        return self is not Outcome.NO_ANSWER


@dataclass(frozen=True)
class MatchTrace:
    """What the pipeline saw for a single query (for display and debugging)."""

    normalized_query: str = ""
    expanded_query: str = ""
    scoring_query: str = ""
    relevance: Tuple[Tuple[int, float], ...] = ()
    fuzzy: Tuple[Tuple[int, float], ...] = ()
    # the corpus the indices above refer to, even after a reload
    snapshot: Optional["IndexSnapshot"] = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class QueryResult:
    answer: Optional[str]
    suggestions: List[str] = field(default_factory=list)
    outcome: Outcome = Outcome.NO_ANSWER
    escalated: bool = False
    trace: Optional[MatchTrace] = None

    def to_dict(self) -> Dict:
        """Two-key response shape: answer and suggestions."""
        return {"answer": self.answer, "suggestions": list(self.suggestions)}


# --------------------------- Utilities -------------------------------

def ensure_nltk_resources(resources: Iterable[str] = tuple(NLTK_RESOURCES)):
    """Download the NLTK corpora used for synonym lookups when missing."""
    import nltk

    for res in resources:
        try:
            nltk.data.find(NLTK_RESOURCES.get(res, res))
        except LookupError:
            try:
                nltk.download(res, quiet=True)
            except Exception as exc:
                logger.warning("Could not download NLTK resource %r: %s", res, exc)


def _dedupe(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


# --------------------------- Preprocessing ---------------------------

class TextNormalizer:
    """
    Text preprocessing pipeline
    Steps: Unicode NFC -> lowercase -> script-aware cleanup -> stopword removal -> Porter stemming

    Stems are stemmed again until stable and dropped when they are themselves
    stopwords (gets -> get), so normalizing normalized text changes nothing.

    Only tokens containing an ASCII letter are stemmed or filtered; tokens from other
    scripts (e.g. Bengali) pass through unchanged.
    """

    _ASCII_LETTER = re.compile(r"[a-z]")

    def __init__(self, extra_scripts: str = DEFAULT_EXTRA_SCRIPTS,
                 stopwords: Optional[Iterable[str]] = None):
        self.disallowed = re.compile(f"[^a-z0-9\\s{extra_scripts}]")
        self.stopwords = frozenset(ENGLISH_STOP_WORDS if stopwords is None else stopwords)
        self.stemmer = PorterStemmer()

    def tokenize(self, text: Optional[str]) -> List[str]:
        if not text or not text.strip():
            return []

        text = unicodedata.normalize("NFC", text).lower()
        text = self.disallowed.sub(" ", text)

        tokens = []
        for tok in text.split():
            if self._ASCII_LETTER.search(tok):
                if tok in self.stopwords:
                    continue
                tok = self._stem(tok)
                if tok in self.stopwords:
                    continue
            tokens.append(tok)
        return tokens

    def _stem(self, tok: str) -> str:
        # Porter is not idempotent on its own output (agreed -> agre -> agr)
        stemmed = self.stemmer.stem(tok)
        while stemmed != tok:
            tok, stemmed = stemmed, self.stemmer.stem(stemmed)
        return tok

    def normalize(self, text: Optional[str]) -> str:
        """Canonical space-joined token sequence; blank input gives ''."""
        return " ".join(self.tokenize(text))


# --------------------------- Relevance Index -------------------------

class RelevanceIndex:
    """
    Vector Space Model over the normalized FAQ questions (TF-IDF + Cosine Similarity).

    Built once per corpus load and never mutated. Position i in the index is
    corpus entry i.
    """

    def __init__(self, documents: Sequence[str]):
        self.documents = list(documents)
        self.vectorizer = None
        self.tfidf_matrix = None

        if not self.documents:
            return

        vectorizer = TfidfVectorizer(analyzer=str.split)
        try:
            self.tfidf_matrix = vectorizer.fit_transform(self.documents)
        except ValueError:
            # every question normalized to nothing
            logger.warning("Relevance index has an empty vocabulary (%d documents)", len(self.documents))
            return
        self.vectorizer = vectorizer

    def __len__(self) -> int:
        return len(self.documents)

    def score(self, query: str) -> List[Tuple[int, float]]:
        """Score a normalized query against every indexed question."""
        if not self.documents:
            return []
        if self.vectorizer is None or not query or not query.strip():
            return [(i, 0.0) for i in range(len(self.documents))]

        query_vec = self.vectorizer.transform([query])
        scores = cosine_similarity(query_vec, self.tfidf_matrix).flatten()
        return [(i, float(s)) for i, s in enumerate(scores)]

    def explain(self, query: str, doc_idx: int, top_k_terms: int = 5) -> List[Tuple[str, float]]:
        """Per-term TF-IDF overlap between the query and one document."""
        if self.vectorizer is None or not query or not query.strip():
            return []
        query_vec = self.vectorizer.transform([query]).toarray().flatten()
        norm = np.linalg.norm(query_vec)
        if norm == 0:
            return []
        doc_vec = self.tfidf_matrix[doc_idx].toarray().flatten()
        overlap = (query_vec / norm) * doc_vec
        feature_names = np.array(self.vectorizer.get_feature_names_out())
        top_indices = np.argsort(overlap, kind="stable")[::-1][:top_k_terms]
        return [(str(feature_names[i]), float(overlap[i])) for i in top_indices if overlap[i] > 0]

    def stats(self) -> Dict:
        lengths = [len(doc.split()) for doc in self.documents]
        vocabulary = self.vectorizer.vocabulary_ if self.vectorizer is not None else {}
        return {
            "vocabulary_size": len(vocabulary),
            "num_documents": len(self.documents),
            "avg_doc_length": float(np.mean(lengths)) if lengths else 0.0,
            "total_postings": int(self.tfidf_matrix.nnz) if self.tfidf_matrix is not None else 0,
        }


# --------------------------- Query Expansion -------------------------

class WordNetLexicon:
    """Synonym source backed by the NLTK WordNet thesaurus (English only)."""

    def __init__(self, download: bool = True):
        from nltk.corpus import wordnet

        if download:
            ensure_nltk_resources()
        self.wordnet = wordnet
        # load the lazy corpus reader here; it is not safe to first-load from several threads
        try:
            self.wordnet.synsets("help")
        except LookupError as exc:
            logger.warning("WordNet unavailable, queries will not be expanded: %s", exc)

    def synonyms(self, word: str) -> List[str]:
        names = []
        for synset in self.wordnet.synsets(word):
            for lemma in synset.lemmas():
                names.append(lemma.name().replace("_", " ").lower())
        return names


class SynonymExpander:
    """
    Query expansion with a thesaurus for better recall.

    Each distinct ASCII word is looked up on its own worker thread with a
    per-word timeout; a failed or slow lookup just contributes no synonyms.
    Results are merged in original word order.
    """

    _NON_ASCII_LETTER = re.compile(r"[^a-z\s]")

    def __init__(self, lexicon, timeout: float = DEFAULT_SYNONYM_TIMEOUT,
                 max_concurrency: int = DEFAULT_SYNONYM_CONCURRENCY):
        self.lexicon = lexicon
        self.timeout = timeout
        self.max_concurrency = max(1, max_concurrency)
        # not the loop default executor: asyncio.run() joins that one on exit
        self.executor = ThreadPoolExecutor(max_workers=self.max_concurrency,
                                           thread_name_prefix="synonyms")

    def extract_words(self, raw_query: Optional[str]) -> List[str]:
        if not raw_query:
            return []
        text = unicodedata.normalize("NFC", raw_query).lower()
        return _dedupe(self._NON_ASCII_LETTER.sub(" ", text).split())

    async def expand(self, raw_query: Optional[str]) -> str:
        """Original words followed by their single-word synonyms, space-joined."""
        words = self.extract_words(raw_query)
        if not words:
            return ""

        semaphore = asyncio.Semaphore(self.max_concurrency)
        groups = await asyncio.gather(*(self._lookup(word, semaphore) for word in words))

        expanded = dict.fromkeys(words)
        for synonyms in groups:
            for synonym in synonyms:
                synonym = synonym.strip().lower()
                if not synonym or " " in synonym or "_" in synonym:
                    continue
                expanded.setdefault(synonym)
        return " ".join(expanded)

    async def _lookup(self, word: str, semaphore: asyncio.Semaphore) -> List[str]:
        async with semaphore:
            try:
                loop = asyncio.get_running_loop()
                return await asyncio.wait_for(
                    loop.run_in_executor(self.executor, self._collect, word), timeout=self.timeout
                )
            except asyncio.TimeoutError:
                logger.debug("Synonym lookup for %r timed out after %.2fs", word, self.timeout)
            except Exception as exc:
                logger.debug("Synonym lookup for %r failed: %s", word, exc)
        return []

    def _collect(self, word: str) -> List[str]:
        return list(self.lexicon.synonyms(word) or ())


# --------------------------- Fuzzy Index -----------------------------

class FuzzyIndex:
    """
    Approximate string search over the raw FAQ questions.

    Distances run from 0 (identical) to 1; candidates farther than
    max_distance are never returned.
    """

    def __init__(self, entries: Sequence[FaqEntry],
                 max_distance: float = DEFAULT_FUZZY_MAX_DISTANCE,
                 min_token_length: int = DEFAULT_FUZZY_MIN_TOKEN_LENGTH):
        self.entries = list(entries)
        self.max_distance = max_distance
        self.min_token_length = min_token_length
        self.choices = [utils.default_process(entry.question) for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def prepare_query(self, raw_query: Optional[str]) -> str:
        """Processed query, or '' when no token reaches the minimum length."""
        query = utils.default_process(raw_query or "")
        if not any(len(tok) >= self.min_token_length for tok in query.split()):
            return ""
        return query

    def search(self, raw_query: Optional[str], limit: int) -> List[Tuple[FaqEntry, float]]:
        """Best candidates, ascending by distance, at most `limit` of them."""
        return [(self.entries[idx], distance) for idx, distance in self.search_indexed(raw_query, limit)]

    def search_indexed(self, raw_query: Optional[str], limit: int) -> List[Tuple[int, float]]:
        """Like search() but returns corpus positions instead of entries."""
        query = self.prepare_query(raw_query)
        if not query or not self.entries or limit <= 0:
            return []

        matches = process.extract(
            query,
            self.choices,
            scorer=fuzz.WRatio,
            limit=limit,
            score_cutoff=(1.0 - self.max_distance) * 100.0,
        )
        return sorted(((idx, 1.0 - score / 100.0) for _choice, score, idx in matches),
                      key=lambda item: item[1])


# --------------------------- Failure Tracking ------------------------

class FailureTracker:
    """Consecutive no-answer counter, shared by all queries of one matcher."""

    def __init__(self, limit: int = DEFAULT_FAIL_LIMIT):
        self.limit = limit
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def record_success(self):
        with self._lock:
            self._count = 0

    def record_failure(self) -> bool:
        """Count a failure; True (and a reset to 0) when the limit is reached."""
        with self._lock:
            self._count += 1
            if self._count >= self.limit:
                self._count = 0
                return True
            return False


# --------------------------- Snapshot --------------------------------

@dataclass(frozen=True)
class IndexSnapshot:
    """Corpus plus both derived indexes, always built and swapped together."""

    entries: Tuple[FaqEntry, ...]
    relevance: RelevanceIndex
    fuzzy: FuzzyIndex

    @classmethod
    def build(cls, entries: Iterable[FaqEntry], normalizer: TextNormalizer,
              config: MatcherConfig) -> "IndexSnapshot":
        entries = tuple(entries)
        relevance = RelevanceIndex([normalizer.normalize(entry.question) for entry in entries])
        fuzzy = FuzzyIndex(
            entries,
            max_distance=config.fuzzy_max_distance,
            min_token_length=config.fuzzy_min_token_length,
        )
        return cls(entries=entries, relevance=relevance, fuzzy=fuzzy)

    @classmethod
    def empty(cls, normalizer: TextNormalizer, config: MatcherConfig) -> "IndexSnapshot":
        return cls.build((), normalizer, config)

    def __len__(self) -> int:
        return len(self.entries)


# --------------------------- Decision Engine -------------------------

class FAQMatcher:
    """
    Answers questions from the loaded FAQ corpus.

    ask() runs: normalize -> expand -> TF-IDF scoring -> confidence decision
    -> fuzzy fallback, then updates the consecutive-failure counter.
    reload() rebuilds both indexes from the corpus source and swaps them in
    as one snapshot; a failed reload leaves the previous snapshot active.
    """

    def __init__(self, loader: Callable[[], Sequence[FaqEntry]],
                 config: Optional[MatcherConfig] = None, lexicon=None,
                 normalizer: Optional[TextNormalizer] = None):
        self.config = config or MatcherConfig()
        self.loader = loader
        self.normalizer = normalizer or TextNormalizer(self.config.extra_scripts)
        self.expander = SynonymExpander(
            lexicon if lexicon is not None else WordNetLexicon(),
            timeout=self.config.synonym_timeout,
            max_concurrency=self.config.synonym_concurrency,
        )
        self.failures = FailureTracker(self.config.fail_limit)
        self._reload_lock = threading.Lock()
        self._snapshot = IndexSnapshot.empty(self.normalizer, self.config)

    @classmethod
    def from_file(cls, path: str, config: Optional[MatcherConfig] = None,
                  lexicon=None) -> "FAQMatcher":
        """Matcher over a Q:/A: text (or CSV) file, loaded immediately."""
        from faq_corpus import file_loader

        matcher = cls(file_loader(path), config=config, lexicon=lexicon)
        matcher.reload()
        return matcher

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    @property
    def failure_count(self) -> int:
        return self.failures.count

    def reload(self) -> int:
        """Rebuild both indexes from the corpus source; returns the entry count."""
        with self._reload_lock:
            entries = self.loader()
            snapshot = IndexSnapshot.build(entries, self.normalizer, self.config)
            self._snapshot = snapshot
        logger.info("Loaded %d FAQs (TF-IDF + fuzzy index rebuilt)", len(snapshot))
        return len(snapshot)

    async def ask(self, question: Optional[str]) -> QueryResult:
        """Answer one question; anything that is not a non-blank string is a miss."""
        if not isinstance(question, str) or not question.strip():
            result = QueryResult(answer=None, suggestions=[], outcome=Outcome.NO_ANSWER)
        else:
            result = await self._find_answer(question, self._snapshot)
        return self._track(result)

    async def _find_answer(self, question: str, snapshot: IndexSnapshot) -> QueryResult:
        cfg = self.config
        k = cfg.top_k

        processed = self.normalizer.normalize(question)
        expansion = self.normalizer.normalize(await self.expander.expand(question))
        scoring_query = f"{processed} {expansion}".strip()

        scores = sorted(snapshot.relevance.score(scoring_query), key=lambda item: item[1], reverse=True)
        best = scores[:k]
        trace = MatchTrace(
            normalized_query=processed,
            expanded_query=expansion,
            scoring_query=scoring_query,
            relevance=tuple(best),
            snapshot=snapshot,
        )

        if best:
            top_idx, top = best[0]
            second = best[1][1] if len(best) > 1 else 0.0

            if top >= cfg.strong_threshold and (top - second) >= cfg.score_gap:
                logger.debug("Confident answer %d (score=%.3f, gap=%.3f)", top_idx, top, top - second)
                return QueryResult(
                    answer=snapshot.entries[top_idx].answer,
                    suggestions=[],
                    outcome=Outcome.CONFIDENT,
                    trace=trace,
                )

            if top >= cfg.weak_threshold:
                logger.debug("Weak answer %d (score=%.3f)", top_idx, top)
                return QueryResult(
                    answer=snapshot.entries[top_idx].answer,
                    suggestions=_dedupe(snapshot.entries[i].question for i, _ in best),
                    outcome=Outcome.WEAK,
                    trace=trace,
                )

        return self._fuzzy_fallback(question, snapshot, trace)

    def _fuzzy_fallback(self, question: str, snapshot: IndexSnapshot,
                        trace: MatchTrace) -> QueryResult:
        cfg = self.config
        candidates = snapshot.fuzzy.search_indexed(question, limit=cfg.top_k)
        trace = replace(trace, fuzzy=tuple(candidates))
        suggestions = _dedupe(snapshot.entries[i].question for i, _ in candidates)

        if candidates and candidates[0][1] <= cfg.fuzzy_accept:
            best_idx, best_distance = candidates[0]
            if len(candidates) > 1 and abs(best_distance - candidates[1][1]) < cfg.ambiguity_epsilon:
                logger.debug("Ambiguous fuzzy match (%.3f vs %.3f)", best_distance, candidates[1][1])
                return QueryResult(answer=None, suggestions=suggestions,
                                   outcome=Outcome.NO_ANSWER, trace=trace)
            logger.debug("Fuzzy answer %d (distance=%.3f)", best_idx, best_distance)
            return QueryResult(
                answer=snapshot.entries[best_idx].answer,
                suggestions=suggestions,
                outcome=Outcome.FUZZY,
                trace=trace,
            )

        if not suggestions:
            suggestions = _dedupe(entry.question for entry in snapshot.entries[:cfg.top_k])
        return QueryResult(answer=None, suggestions=suggestions,
                           outcome=Outcome.NO_ANSWER, trace=trace)

    def _track(self, result: QueryResult) -> QueryResult:
        if result.outcome.answered:
            self.failures.record_success()
            return result

        if self.failures.record_failure():
            logger.info("Escalating after %d consecutive unanswered questions", self.config.fail_limit)
            return replace(result, answer=self.config.escalation_message,
                           suggestions=[], escalated=True)
        return result


__all__ = [
    "DEFAULT_ESCALATION_MESSAGE",
    "FAQMatcher",
    "FAQMatcherError",
    "FailureTracker",
    "FaqEntry",
    "FuzzyIndex",
    "IndexSnapshot",
    "MatchTrace",
    "MatcherConfig",
    "Outcome",
    "QueryResult",
    "RelevanceIndex",
    "SynonymExpander",
    "TextNormalizer",
    "WordNetLexicon",
    "ensure_nltk_resources",
]
