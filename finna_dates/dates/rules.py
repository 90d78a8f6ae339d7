"""
Ordered rule tables for free-text date recognition.

A rule table is a list of DateRule entries tried in order; the first
pattern that matches wins. Patterns overlap, so the order of a table is
part of its meaning.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from finna_dates.dates.context import ParseContext


@dataclass(frozen=True)
class YearSpan:
    """Raw year tokens, still subject to two-digit and padding rules."""
    start: str
    end: str


@dataclass(frozen=True)
class InstantSpan:
    """Fully built start and end instants."""
    start: str
    end: str


RuleResult = Union[YearSpan, InstantSpan]

# Signature: (match, ctx) -> RuleResult, or None after reporting a warning
RuleBuilder = Callable[[re.Match, ParseContext], Optional[RuleResult]]


@dataclass(frozen=True)
class DateRule:
    """
    One entry of a rule table.

    Attributes:
        name: stable rule name, used in logs and tests
        pattern: compiled regex, searched anywhere in the input
        build: turns the match into a RuleResult
    """
    name: str
    pattern: re.Pattern
    build: RuleBuilder


@dataclass(frozen=True)
class RuleMatch:
    rule: DateRule
    match: re.Match

    @property
    def name(self) -> str:
        return self.rule.name

    def build(self, ctx: ParseContext) -> Optional[RuleResult]:
        return self.rule.build(self.match, ctx)


def match_rule(rules: Iterable[DateRule], text: str) -> Optional[RuleMatch]:
    """Return the first rule whose pattern occurs in text, or None."""
    for rule in rules:
        match = rule.pattern.search(text)
        if match:
            return RuleMatch(rule, match)
    return None


def rule_names(rules: Iterable[DateRule]) -> List[str]:
    return [rule.name for rule in rules]
