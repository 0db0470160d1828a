"""The 21-question self-assessment — configuration only.

Order matters: it is the questionnaire order and breaks ties when the
weakest domains are ranked.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Domain:
    key: str
    label: str
    part: str  # "physical" | "mental" | "relationship" | "holistic"


DOMAINS: dict[str, Domain] = {
    d.key: d
    for d in (
        # Part 1: physical foundation
        Domain("sleep", "Sleep Quality (Walker, Breus)", "physical"),
        Domain("nutrition", "Nutrition (Hyman, Jenkins, Top 20)", "physical"),
        Domain("hydration", "Hydration (Hydration Research)", "physical"),
        Domain("bodyRel", "Physical Self-Relationship (Male/Female Body, Itsines, Johnson)", "physical"),
        # Part 2: mental & emotional state
        Domain("breath", "Stress Management (Wim Hof, SEALs, Breathing)", "mental"),
        Domain("chatter", '"Chatter" Control (Kross)', "mental"),
        Domain("compassion", "Self-Compassion (Turow)", "mental"),
        Domain("resilience", "Emotional Resilience (Davidson, Moffitt)", "mental"),
        Domain("focus", "Mental Focus (Nideffer, Joyner)", "mental"),
        Domain("grit", "Resilience Building (Wim Hof, Cavaliere)", "mental"),
        Domain("rhythm", "Internal Rhythm (Clancy, Breus)", "mental"),
        Domain("spiritual", "Spiritual Connection (Knechtle, Giovannetti, NKJV)", "mental"),
        # Part 3: relationship health
        Domain("turnToward", '"Turning Toward" (Gottman)', "relationship"),
        Domain("conflict", "Conflict Management (Gottman)", "relationship"),
        Domain("trust", "Trust & Loyalty (Waldinger, Gottman)", "relationship"),
        Domain("overthink", "Overthinking (Kross, Perel)", "relationship"),
        Domain("intimacy", "Intimacy & Desire (Perel)", "relationship"),
        Domain("selfExpand", "Self-Expansion (Lewandowski)", "relationship"),
        Domain("connection", "Connection Quality (Waldinger)", "relationship"),
        # Part 4: holistic summary
        Domain("internalHealth", "Internal Health (Braunwald, Morris, Jenkins)", "holistic"),
        Domain("allIn", "The All-In Check (All Topics)", "holistic"),
    )
}

DOMAIN_KEYS: tuple[str, ...] = tuple(DOMAINS)

MIN_SCORE = 1
MAX_SCORE = 5
DEFAULT_SCORE = 3


def get_domain(key: str) -> Domain | None:
    return DOMAINS.get(key)


def list_domains() -> list[Domain]:
    return list(DOMAINS.values())
