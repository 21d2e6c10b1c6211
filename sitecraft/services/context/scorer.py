"""
Signal Scorer

Ranks candidate file paths for a user query without calling a model.
Each candidate collects an additive score from independent signals:

1. **Core bundle** (+10): path matches a core pattern (pages, layout, styles, data)
2. **Recently edited** (+8): file was edited earlier in this chat session
3. **Keyword match** (+5 per keyword): a query keyword maps to a pattern in the path
4. **Chat mention** (+3): the file's basename appears in earlier user messages

Files are sorted by score (descending, ties in input order) and capped
at max_files. Files where no signal fired are dropped.
"""

import time
from typing import Any, Dict, List, Optional, Sequence, Union

from sitecraft.core.logger import get_logger
from sitecraft.models.context import (
    DEFAULT_BOOST_WEIGHTS,
    SIGNAL_CHAT_MENTION,
    SIGNAL_CORE,
    SIGNAL_RECENTLY_EDITED,
    BoostWeights,
    ContextOptions,
    ScoredFile,
    keyword_signal,
)
from sitecraft.services.context.paths import basename, normalize, same_file
from sitecraft.services.context.patterns import DEFAULT_CATALOG, PatternCatalog

logger = get_logger("context.scorer")

# Basenames this short ("A", "ui") match too much chat text to be a signal
MIN_MENTION_LENGTH = 3

OptionsLike = Union[ContextOptions, Dict[str, Any], None]


def as_options(options: OptionsLike) -> ContextOptions:
    """Accept ContextOptions, a plain dict (snake or camel case), or None."""
    if options is None:
        return ContextOptions()
    if isinstance(options, ContextOptions):
        return options
    return ContextOptions.model_validate(options)


class SignalScorer:
    """
    Deterministic file ranker.

    The pattern catalog and weights are fixed at construction; a scorer
    holds no per-call state and can be shared freely.
    """

    def __init__(
        self,
        catalog: PatternCatalog = DEFAULT_CATALOG,
        weights: BoostWeights = DEFAULT_BOOST_WEIGHTS,
        project_root: Optional[str] = None,
    ):
        self.catalog = catalog
        self.weights = weights
        self.project_root = project_root

    def rank(self, query: str, file_paths: Sequence[str], options: OptionsLike = None) -> List[ScoredFile]:
        """
        Score every candidate and return all files with a positive score,
        best first. Not truncated; see score() for the capped list.
        """
        opts = as_options(options)
        candidates = self._dedupe(file_paths)
        if not candidates:
            return []

        keywords = self.catalog.keywords_in(query or "")
        chat_text = " ".join(opts.chat_history).lower()

        scored: List[ScoredFile] = []
        for path in candidates:
            entry = ScoredFile(path=path)
            relative = normalize(path, self.project_root)

            if self.catalog.is_core(relative):
                entry.add(self.weights.core, SIGNAL_CORE)

            for keyword in keywords:
                if self.catalog.matches_keyword(keyword, relative):
                    entry.add(self.weights.keyword_match, keyword_signal(keyword))

            if any(same_file(path, edited, self.project_root) for edited in opts.recently_edited):
                entry.add(self.weights.recently_edited, SIGNAL_RECENTLY_EDITED)

            if chat_text and self._mentioned(relative, chat_text):
                entry.add(self.weights.chat_mention, SIGNAL_CHAT_MENTION)

            if entry.score > 0:
                scored.append(entry)

        # sort() is stable, so equal scores keep input order
        scored.sort(key=lambda f: f.score, reverse=True)
        return scored

    def score(self, query: str, file_paths: Sequence[str], options: OptionsLike = None) -> List[ScoredFile]:
        """Rank candidates and keep the top max_files."""
        start = time.perf_counter()
        opts = as_options(options)
        ranked = self.rank(query, file_paths, opts)
        selected = ranked[:opts.max_files]

        duration = (time.perf_counter() - start) * 1000
        top_files = [
            {"path": f.path.rsplit("/", 1)[-1], "score": f.score, "signals": list(f.signals)}
            for f in selected[:3]
        ]
        logger.debug(
            f"[CONTEXT] Scoring completed: {len(selected)}/{len(file_paths)} files "
            f"in {duration:.2f}ms, top={top_files}"
        )
        return selected

    def _dedupe(self, file_paths: Sequence[str]) -> List[str]:
        seen = set()
        unique: List[str] = []
        for path in file_paths:
            if not path:
                continue
            key = normalize(path, self.project_root)
            if key in seen:
                continue
            seen.add(key)
            unique.append(path)
        return unique

    @staticmethod
    def _mentioned(relative_path: str, chat_text: str) -> bool:
        name = basename(relative_path).lower()
        return len(name) >= MIN_MENTION_LENGTH and name in chat_text


_default_scorer = SignalScorer()


def get_context_files(user_message: str, all_files: Sequence[str], options: OptionsLike = None) -> List[str]:
    """
    Select relevant file paths for a query.

    Example:
        get_context_files(
            "change the header color",
            ["/home/project/src/Hero.tsx", "/home/project/src/index.css"],
            {"recently_edited": ["/home/project/src/Hero.tsx"]},
        )
        # -> ["/home/project/src/Hero.tsx", "/home/project/src/index.css"]
    """
    return [f.path for f in _default_scorer.score(user_message, all_files, options)]


def get_context_files_with_scores(
    user_message: str,
    all_files: Sequence[str],
    options: OptionsLike = None,
) -> List[ScoredFile]:
    """Same selection as get_context_files(), with scores and signals for debugging."""
    return _default_scorer.score(user_message, all_files, options)
