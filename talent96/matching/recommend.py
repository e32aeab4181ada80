# talent96/matching/recommend.py
"""
Recall-oriented job recommendation.

A job matches a seeker when ANY of designation / location / skills hits.
Matches are returned in scan order, capped; with no input or no match the
seeker gets the fresher-track jobs instead. There is no scoring.
"""
from dataclasses import dataclass
from typing import Any, Iterable

from talent96.core.config import settings
from talent96.matching.normalizer import normalize, normalize_skills
from talent96.matching.predicates import (
    JobView, any_of, is_fresher_job, location_contains, shares_skill, title_contains,
)


@dataclass(frozen=True)
class SeekerCriteria:
    designation: str = ""
    location: str = ""
    skills: tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, designation: Any = None, location: Any = None, skills: Iterable[Any] | None = None):
        return cls(
            designation=normalize(designation),
            location=normalize(location),
            skills=tuple(normalize_skills(skills)),
        )

    @property
    def has_input(self) -> bool:
        return bool(self.designation or self.location or self.skills)


def recommend(
    jobs: Iterable[JobView],
    criteria: SeekerCriteria,
    limit: int | None = None,
) -> list[JobView]:
    limit = settings.RECOMMENDATION_LIMIT if limit is None else limit
    is_match = any_of(
        title_contains(criteria.designation),
        location_contains(criteria.location),
        shares_skill(list(criteria.skills)),
    )

    matched: list[JobView] = []
    freshers: list[JobView] = []
    for job in jobs:
        if is_match(job):
            matched.append(job)
        if is_fresher_job(job):
            freshers.append(job)

    if criteria.has_input and matched:
        return matched[:limit]
    return freshers[:limit]
