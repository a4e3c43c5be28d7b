"""spanish-checker — Spanish grammar and spelling review for text files.

Sends a file to the LanguageTool service and prints the issues it finds.
"""

from spanish_checker.version import __version__

__all__: list[str] = ["__version__"]
