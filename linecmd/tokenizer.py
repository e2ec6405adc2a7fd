from __future__ import annotations
from typing import List, Optional, Tuple


def tokenize(line: str) -> Tuple[Optional[str], List[str]]:
    """
    Split one input line into (command, args).

    Any run of whitespace (including the trailing newline) is a single
    delimiter, so no token is ever empty. A blank line gives (None, []).
    There is no quoting: 'touch "a b"' yields ['"a', 'b"'] as args.
    """
    tokens = line.split()
    if not tokens:
        return None, []
    return tokens[0], tokens[1:]
