"""
Console output helpers.

This module renders query results, suggestions and index statistics.
"""

from typing import Any, Dict, List, Tuple

from .query import Found, QueryResult


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def _display(self, text: str) -> str:
        # Filenames that were not valid UTF-8 carry lone surrogates
        return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")

    def _bullets(self, items: List[str]) -> List[str]:
        return [f"{self.config.RESULT_BULLET}{self._display(item)}" for item in items]

    def format_result(self, result: QueryResult) -> List[str]:
        """
        Render a lookup result as console lines.

        Args:
            result: Found or NotFound from the query engine.

        Returns:
            Lines to print, without trailing newlines.
        """
        if isinstance(result, Found):
            return [f"Found '{self._display(result.term)}' in:"] + self._bullets(result.documents)

        lines = [f"No results for '{self._display(result.term)}'"]
        if result.suggestions:
            lines.append("Did you mean:")
            lines.extend(self._bullets(result.suggestions))
        return lines

    def format_similar(self, similar: List[Tuple[str, int]]) -> List[str]:
        """Render edit-distance close matches as console lines."""
        if not similar:
            return []
        return ["Close matches:"] + self._bullets(
            [f"{word} (distance {dist})" for word, dist in similar]
        )

    def print_result(self, result: QueryResult, similar: List[Tuple[str, int]] = None) -> None:
        """Print a lookup result, followed by close matches if given."""
        for line in self.format_result(result):
            print(line)
        for line in self.format_similar(similar or []):
            print(line)

    def print_stats(self, stats: Dict[str, Any]) -> None:
        """Print index statistics as aligned key/value lines."""
        print("\n=== Index Statistics ===")
        if not stats:
            return
        width = max(len(key) for key in stats)
        for key, value in stats.items():
            print(f"{key.ljust(width)} : {value}")
