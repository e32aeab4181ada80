# talent96/matching/search.py
"""Precision-oriented job search: explicit filters AND-ed together, no cap."""
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable

from talent96.matching.normalizer import split_terms
from talent96.matching.predicates import (
    JobView,
    all_of,
    field_equals,
    in_category,
    never,
    regex_in_location,
    regex_in_title_skills_or_description,
    text_in_title_or_company,
)


@dataclass(frozen=True)
class SearchCriteria:
    search: str | None = None
    location: str | None = None
    experience: str | None = None
    job_type: str | None = None
    salary: str | None = None
    company: str | None = None


# criteria field -> JobView attribute compared by exact equality
EXACT_FILTERS = {
    "location": "location",
    "experience": "experience",
    "job_type": "job_type",
    "salary": "salary",
    "company": "company_name",
}


def search_jobs(jobs: Iterable[JobView], criteria: SearchCriteria) -> list[JobView]:
    predicates = []
    if criteria.search:
        predicates.append(text_in_title_or_company(criteria.search))
    for name, attr in EXACT_FILTERS.items():
        value = getattr(criteria, name)
        if value:
            predicates.append(field_equals(attr, value))
    matches = all_of(*predicates)
    return [job for job in jobs if matches(job)]


def _newest_first(job: JobView) -> datetime:
    return job.posted_at or datetime.min


def search_by_designation(
    jobs: Iterable[JobView],
    designation: Any = None,
    location: str | None = None,
    category: str | None = None,
) -> list[JobView]:
    """
    Every designation term must hit title, a skill or the description.
    Terms are case-insensitive regular expressions; ``re.error`` propagates
    for a malformed one. No terms means no results.
    """
    terms = split_terms(designation)
    term_predicates = [regex_in_title_skills_or_description(re.compile(t, re.IGNORECASE)) for t in terms]
    designation_match = all_of(*term_predicates) if term_predicates else never

    predicates = [designation_match, in_category(category or "")]
    location = (location or "").strip()
    if location:
        predicates.append(regex_in_location(re.compile(location, re.IGNORECASE)))

    matches = all_of(*predicates)
    found = [job for job in jobs if matches(job)]
    found.sort(key=_newest_first, reverse=True)
    return found
