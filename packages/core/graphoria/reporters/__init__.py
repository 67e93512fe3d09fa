"""Output reporters"""

from graphoria.reporters.text_reporter import TextReporter

__all__ = ["TextReporter"]
