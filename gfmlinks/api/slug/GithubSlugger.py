"""Stateful GFM slugger (UNO: single class)."""

from .slugify import slugify


class GithubSlugger:
    """Generates unique heading slugs for one document pass.

    Repeated base slugs get ``-1``, ``-2``, ... appended in first-seen order.
    Call reset() (or use a new instance) before slugging another document.
    """

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def reset(self) -> None:
        self._occurrences = {}

    def slug(self, text: str) -> str:
        base = slugify(text)
        result = base
        if base in self._occurrences:
            count = self._occurrences[base]
            # Skip suffixes already taken by a literal heading such as "Notes 1"
            while True:
                count += 1
                result = f"{base}-{count}"
                if result not in self._occurrences:
                    break
            self._occurrences[base] = count
        self._occurrences[result] = 0
        return result
