"""Guard chains — ordered ``(predicate, context)`` pairs with a terminal default.

The synthesizer never branches with nested if/else. Each context string is
picked by walking a chain of guards and returning the context of the first
predicate that holds for the profile.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from app.prompt_generator.types import Domain, Intent, Profile, Specificity

Predicate = Callable[[Profile], bool]


@dataclass(frozen=True)
class Guard:
    when: Predicate
    context: str


def first_match(profile: Profile, guards: Sequence[Guard], default: str) -> str:
    """Return the context of the first guard whose predicate holds, else ``default``."""
    for guard in guards:
        if guard.when(profile):
            return guard.context
    return default


def first_keyword(profile: Profile, vocabulary: Iterable[str]) -> str | None:
    """Return the first profile keyword (in input order) found in ``vocabulary``."""
    vocab = frozenset(vocabulary)
    return next((k for k in profile.keywords if k in vocab), None)


# ---------------------------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------------------------


def any_keyword(*words: str) -> Predicate:
    """Predicate: at least one profile keyword is in ``words``."""
    vocab = frozenset(words)
    return lambda profile: any(k in vocab for k in profile.keywords)


def intent_is(intent: Intent) -> Predicate:
    return lambda profile: profile.intent is intent


def domain_is(domain: Domain) -> Predicate:
    return lambda profile: profile.domain is domain


def specificity_is(specificity: Specificity) -> Predicate:
    return lambda profile: profile.specificity is specificity


def all_of(*predicates: Predicate) -> Predicate:
    return lambda profile: all(p(profile) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda profile: any(p(profile) for p in predicates)
