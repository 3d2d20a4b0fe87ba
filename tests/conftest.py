"""Shared fixtures for the report generator tests."""
import pytest

from spark_report.parser import convert_markdown


SPARK_DOCUMENT = """\
# Spark Report: Onboarding Ideas

> **Personas**: Ava, Kai | **Rounds**: 2 | **Focus**: onboarding | **Date**: 2024-03-01

---

## Seed: Ava

### Guided Tour
A short *guided* tour.

### Checklist
- Step one
- Step two

## Cross-Pollination Round 1: Kai

### Remix
Builds on `Guided Tour`.

## Session Record

| Round | Persona |
|---|---|
| 1 | Ava |

## Synthesis

Combine the tour and checklist.

---

### Next Steps
1. Prototype
2. Test
"""


@pytest.fixture
def spark_markdown():
    """A complete report as the ideation tool writes it."""
    return SPARK_DOCUMENT


@pytest.fixture
def spark_report(spark_markdown):
    """The parsed form of ``spark_markdown``."""
    return convert_markdown(spark_markdown)
