"""Pytest configuration and shared fixtures for the org2html test suite."""

import os

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_org() -> str:
    """Small Org document exercising tags, lists, tables and blocks."""
    return """#+TITLE: Weekly notes

Intro text.

* Work :work:
** TODO Report :urgent:
- [X] draft
- [ ] review
** Meeting
| who | when |
|-----+------|
| Ann | <2024-03-01 Fri> |
* Home :home:
#+BEGIN_SRC python
print("hi")
#+END_SRC
* Private :noexport:
Secret.
"""
