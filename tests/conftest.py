"""Shared fixtures for BabyMind tests."""

from __future__ import annotations

import pytest
from helpers import make_baby

from babymind.models import Baby
from babymind.rules import RuleEngine
from babymind.tracking import CompletionLedger


@pytest.fixture
def rule_engine() -> RuleEngine:
    """Engine over the bundled rule tables."""
    return RuleEngine()


@pytest.fixture
def baby() -> Baby:
    """Six month old (200 days) baby."""
    return make_baby()


@pytest.fixture
def ledger() -> CompletionLedger:
    return CompletionLedger()
