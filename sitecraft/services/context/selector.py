"""
Context Selector

Picks the project files to inject into an edit prompt. Replaces asking a
model to choose files: the selection is local, deterministic and takes
a few milliseconds.

Flow:
1. Build the scoring universe from the FileMap (minus ignored paths)
2. Take the latest user message as the query, earlier ones as chat history
3. Rank candidates with the SignalScorer
4. Grep every file in the FileMap for literals quoted in the query
5. Merge (scored files first, then grep-only hits) into a filtered FileMap
"""

import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from sitecraft.core.config import MAX_MAX_FILES, get_settings
from sitecraft.core.logger import dev_log, get_logger, truncate_for_log
from sitecraft.models.context import (
    SIGNAL_GREP_MATCH,
    ContextOptions,
    ScoredFile,
    SelectionReport,
)
from sitecraft.models.files import FileEntry, FileMap
from sitecraft.models.messages import Message, extract_text
from sitecraft.services.context.errors import NoFilesSelectedError, NoUserMessageError
from sitecraft.services.context.grep import grep_for_specific_text
from sitecraft.services.context.ignore import default_spec, is_ignored
from sitecraft.services.context.paths import normalize, qualify
from sitecraft.services.context.scorer import SignalScorer

logger = get_logger("context")

OnFinish = Callable[[SelectionReport], None]


def get_file_paths(files: FileMap, root: Optional[str] = None) -> List[str]:
    """
    List the FileMap's file paths that are not on the ignore list.

    Folder entries are left out. Paths keep the form used as FileMap keys.
    """
    spec = default_spec()
    return [
        path for path, entry in files.items()
        if isinstance(entry, FileEntry) and not is_ignored(normalize(path, root), spec)
    ]


def split_messages(messages: Sequence[Message]) -> Tuple[str, List[str]]:
    """
    Return (query, chat_history) from a conversation.

    The query is the text of the latest user message; chat history is the
    text of every user message before it, oldest first.

    Raises:
        NoUserMessageError: no message has the user role
    """
    user_texts = [extract_text(m) for m in messages if m.role == "user"]
    if not user_texts:
        raise NoUserMessageError()
    return user_texts[-1], user_texts[:-1]


class ContextSelector:
    """
    Orchestrates scoring and grep over a project's FileMap.

    Stateless between calls; one instance can serve concurrent requests.
    """

    def __init__(self, scorer: Optional[SignalScorer] = None, project_root: Optional[str] = None):
        self.project_root = project_root
        self.scorer = scorer or SignalScorer(project_root=project_root)

    def select(
        self,
        messages: Sequence[Message],
        files: FileMap,
        recently_edited: Optional[List[str]] = None,
        max_files: Optional[int] = None,
        on_finish: Optional[OnFinish] = None,
    ) -> FileMap:
        """
        Select relevant files and return them as a FileMap keyed by
        root-relative path.

        Raises:
            NoUserMessageError: no user message to use as the query
            NoFilesSelectedError: nothing in the project was selected
        """
        start = time.perf_counter()
        query, options, universe = self._prepare(messages, files, recently_edited, max_files)

        scored = [f.path for f in self.scorer.score(query, universe, options)]
        grep_matches = grep_for_specific_text(query, files or {})
        selected = self._merge(scored, grep_matches)

        filtered: FileMap = {}
        for path in selected:
            relative, entry = self._resolve(path, files)
            if entry is not None:
                filtered[relative] = entry

        duration = (time.perf_counter() - start) * 1000
        total_files = len(filtered)

        if on_finish:
            on_finish(SelectionReport(
                text=(
                    f"Selected {len(selected)} files using local context selection "
                    f"({len(scored)} keyword, {len(grep_matches)} grep)"
                ),
                keyword_count=len(scored),
                grep_count=len(grep_matches),
                total_selected=total_files,
                duration_ms=round(duration, 2),
            ))

        logger.info(f"[CONTEXT] Context selection completed: {total_files} files in {duration:.2f}ms")

        if total_files == 0:
            raise NoFilesSelectedError()

        return filtered

    def select_with_scores(
        self,
        messages: Sequence[Message],
        files: FileMap,
        recently_edited: Optional[List[str]] = None,
        max_files: Optional[int] = None,
    ) -> List[ScoredFile]:
        """
        Debug variant of select(): the ranking with grep hits folded in as a
        grepMatch signal, before FileMap filtering. Untruncated unless
        `max_files` is given.
        """
        query, options, universe = self._prepare(messages, files, recently_edited, None)

        ranked = self.scorer.rank(query, universe, options)
        by_path: Dict[str, ScoredFile] = {normalize(f.path, self.project_root): f for f in ranked}

        for path in grep_for_specific_text(query, files or {}):
            key = normalize(path, self.project_root)
            entry = by_path.get(key)
            if entry is None:
                entry = ScoredFile(path=path)
                by_path[key] = entry
                ranked.append(entry)
            entry.add(self.scorer.weights.grep_match, SIGNAL_GREP_MATCH)

        ranked.sort(key=lambda f: f.score, reverse=True)
        if max_files is not None:
            ranked = ranked[:max_files]
        return ranked

    def _prepare(
        self,
        messages: Sequence[Message],
        files: FileMap,
        recently_edited: Optional[List[str]],
        max_files: Optional[int],
    ) -> Tuple[str, ContextOptions, List[str]]:
        query, chat_history = split_messages(messages)
        dev_log(logger, "[CONTEXT] Query: %s", truncate_for_log(query))

        options = ContextOptions(
            recently_edited=list(recently_edited or []),
            chat_history=chat_history,
            max_files=max_files if max_files is not None else get_settings().max_context_files,
        )
        return query, options, get_file_paths(files or {}, self.project_root)

    def _merge(self, scored: List[str], grep_matches: List[str]) -> List[str]:
        """Scored paths first, then grep-only hits, de-duplicated and capped."""
        merged: List[str] = []
        seen = set()
        for path in scored + grep_matches:
            key = normalize(path, self.project_root)
            if key in seen:
                continue
            seen.add(key)
            merged.append(path)
        return merged[:MAX_MAX_FILES]

    def _resolve(self, path: str, files: FileMap) -> Tuple[str, Optional[FileEntry]]:
        """
        Find the FileMap entry for a selected path, trying the root-qualified
        form first and the path as given second. Unresolvable or non-file
        entries come back as None and are skipped.
        """
        relative = normalize(path, self.project_root)
        for key in (qualify(path, self.project_root), path):
            entry = files.get(key)
            if isinstance(entry, FileEntry):
                return relative, entry
        return relative, None


_default_selector: Optional[ContextSelector] = None


def _selector() -> ContextSelector:
    global _default_selector
    if _default_selector is None:
        _default_selector = ContextSelector()
    return _default_selector


def select_context(
    messages: Sequence[Message],
    files: FileMap,
    recently_edited: Optional[List[str]] = None,
    summary: Optional[str] = None,
    on_finish: Optional[OnFinish] = None,
) -> FileMap:
    """
    Select the files relevant to the latest user message.

    `summary` (the chat summary) is accepted for call-site compatibility
    and not used by local selection.
    """
    return _selector().select(messages, files, recently_edited=recently_edited, on_finish=on_finish)


def select_context_with_scores(
    messages: Sequence[Message],
    files: FileMap,
    recently_edited: Optional[List[str]] = None,
    max_files: Optional[int] = None,
) -> List[ScoredFile]:
    """Scored ranking behind select_context(), for diagnostics and tests."""
    return _selector().select_with_scores(
        messages, files, recently_edited=recently_edited, max_files=max_files
    )
