"""Fixed settings for talking to LanguageTool and laying out the report.

None of these values are configurable at runtime.
"""

from __future__ import annotations

LANGUAGETOOL_URL: str = "https://api.languagetool.org/v2/check"
"""Public LanguageTool check endpoint."""

LANGUAGE: str = "es"
"""Language code sent with every request."""

ENABLED_ONLY: str = "false"
"""Form value asking the service to apply every rule category."""

USER_AGENT: str = "spanish-checker/0.1"

MAX_SUGGESTIONS: int = 3
"""Maximum number of replacement suggestions shown per issue."""

RULE_WIDTH: int = 60
"""Width of the dashed separator lines in the report."""
