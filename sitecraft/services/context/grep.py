"""
Grep Fallback

Content search for literal text the user quoted in their request.
Keyword scoring only looks at paths; when someone asks to change
"$14.99" or #21C6FF, the file that holds that exact text is the one to
edit, whatever it is called.

Extracted literals:
- Quoted strings (single or double quotes): "Open 9am-10pm" -> Open 9am-10pm
- Hex colors (3-6 digits): #fff, #21C6FF
- Prices with optional cents: $14, $14.99
"""

import re
from typing import List

from sitecraft.core.logger import get_logger, log_timing
from sitecraft.models.files import FileMap, is_text_file

logger = get_logger("context.grep")

PATTERN_REGEX = re.compile(r"""["']([^"']+)["']|#[0-9A-Fa-f]{3,6}|\$\d+(?:\.\d{2})?""")


def extract_patterns(user_message: str) -> List[str]:
    """
    Extract searchable literals from a user message.

    Returns unique literals in the order they first appear.

    Examples:
        extract_patterns('change "$14" to "$16"')        # ['$14', '$16']
        extract_patterns('update the color to #21C6FF')  # ['#21C6FF']
        extract_patterns('change the header color')      # []
    """
    patterns: List[str] = []
    for match in PATTERN_REGEX.finditer(user_message or ""):
        # group(1) is the inside of a quoted string
        literal = match.group(1) if match.group(1) is not None else match.group(0)
        if literal not in patterns:
            patterns.append(literal)
    return patterns


@log_timing(logger)
def grep_for_specific_text(user_message: str, files: FileMap) -> List[str]:
    """
    Find files whose content contains any literal from the user message.

    Matching is exact and case-sensitive. Folder entries, missing entries
    and binary files are skipped without reading their content. Paths are
    returned in FileMap order.

    Example:
        files = {"/home/project/src/data/menu.json": FileEntry(content='{"price": "$14.99"}')}
        grep_for_specific_text('change "$14.99" to "$16.99"', files)
        # -> ["/home/project/src/data/menu.json"]
    """
    patterns = extract_patterns(user_message)
    if not patterns:
        return []

    matching_paths: List[str] = []
    for path, entry in files.items():
        if not is_text_file(entry):
            continue

        if any(pattern in entry.content for pattern in patterns):
            matching_paths.append(path)

    logger.debug(f"[GREP] {len(matching_paths)} files contain {patterns}")
    return matching_paths
