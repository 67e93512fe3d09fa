"""Shared test fixtures."""

import pytest
from click.testing import CliRunner
from rich.console import Console

from graphoria.models.graph import Commit


SAMPLE_DIFF = """diff --git a/app.py b/app.py
index 1111111..2222222 100644
--- a/app.py
+++ b/app.py
@@ -1,2 +1,2 @@
-import os
+import sys
@@ -10,2 +10,2 @@ def main():
-    run()
+    start()
@@ -20 +20 @@
-    return 0
+    return 1
"""

SAMPLE_PREAMBLE = """diff --git a/app.py b/app.py
index 1111111..2222222 100644
--- a/app.py
+++ b/app.py
"""


@pytest.fixture
def sample_diff():
    """Three-hunk diff of a single file"""
    return SAMPLE_DIFF


@pytest.fixture
def sample_preamble():
    return SAMPLE_PREAMBLE


@pytest.fixture
def branch_commits():
    """A -> B -> C with a side branch D -> C, listed A, D, B, C"""
    return [
        Commit.of("A", ["B"]),
        Commit.of("D", ["C"]),
        Commit.of("B", ["C"]),
        Commit.of("C"),
    ]


@pytest.fixture
def merge_commits():
    """M merges F into A; F branches from A"""
    return [
        Commit.of("M", ["A", "F"]),
        Commit.of("F", ["A"]),
        Commit.of("A"),
    ]


@pytest.fixture
def runner(monkeypatch):
    """CLI test runner with a colourless, wide console"""
    monkeypatch.setattr(
        "graphoria.cli.main.console", Console(color_system=None, width=200)
    )
    return CliRunner()
