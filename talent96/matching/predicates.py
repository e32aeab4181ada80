# talent96/matching/predicates.py
"""
Job predicates and the two combinators the matchers are built from.

A predicate takes a ``JobView`` and answers True/False. ``any_of`` drives the
recall-oriented recommender, ``all_of`` the precision-oriented searches.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from talent96.matching.normalizer import normalize, normalize_skills


@dataclass(frozen=True)
class JobView:
    """The fields of a job post the matchers look at."""
    id: int
    title: str = ""
    company_name: str = ""
    location: str = ""
    experience: str = ""
    job_type: str = ""
    salary: str = ""
    description: str = ""
    skills: tuple[str, ...] = ()
    posted_at: datetime | None = None
    source: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_post(cls, post, company_name: str | None = None) -> "JobView":
        return cls(
            id=post.id,
            title=post.title or "",
            company_name=company_name if company_name is not None else (post.company_name or ""),
            location=post.location or "",
            experience=post.experience or "",
            job_type=post.job_type or "",
            salary=post.salary or "",
            description=post.description or "",
            skills=tuple(post.skills or ()),
            posted_at=post.posted_at,
            source=post,
        )


Predicate = Callable[[JobView], bool]


def any_of(*predicates: Predicate) -> Predicate:
    def _any(job: JobView) -> bool:
        return any(p(job) for p in predicates)
    return _any


def all_of(*predicates: Predicate) -> Predicate:
    """Conjunction; with no predicates every job passes."""
    def _all(job: JobView) -> bool:
        return all(p(job) for p in predicates)
    return _all


def never(job: JobView) -> bool:
    return False


# ---------- recommendation predicates (inputs already normalized) ----------
def title_contains(term: str) -> Predicate:
    if not term:
        return never
    return lambda job: term in normalize(job.title)


def location_contains(term: str) -> Predicate:
    if not term:
        return never
    return lambda job: term in normalize(job.location)


def shares_skill(skills: list[str]) -> Predicate:
    wanted = set(skills)
    if not wanted:
        return never
    return lambda job: bool(wanted.intersection(normalize_skills(job.skills)))


def is_fresher_job(job: JobView) -> bool:
    return normalize(job.experience) == "fresher" or "fresher" in normalize(job.title)


# ---------- search predicates ----------
def text_in_title_or_company(text: str) -> Predicate:
    needle = text.lower()
    return lambda job: needle in job.title.lower() or needle in job.company_name.lower()


def field_equals(attr: str, value: str) -> Predicate:
    return lambda job: getattr(job, attr) == value


def regex_in_title_skills_or_description(pattern: re.Pattern) -> Predicate:
    def _match(job: JobView) -> bool:
        if pattern.search(normalize(job.title)):
            return True
        if any(pattern.search(s) for s in normalize_skills(job.skills)):
            return True
        return bool(pattern.search(normalize(job.description)))
    return _match


def regex_in_location(pattern: re.Pattern) -> Predicate:
    return lambda job: bool(pattern.search(normalize(job.location)))


JOB_CATEGORIES = {
    "job": {"full-time", "part-time", "contract"},
    "internship": {"internship"},
}


def in_category(category: str) -> Predicate:
    """'job' / 'internship' restrict jobType; any other value passes everything."""
    allowed = JOB_CATEGORIES.get(normalize(category))
    if allowed is None:
        return all_of()
    return lambda job: normalize(job.job_type) in allowed
