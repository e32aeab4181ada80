# talent96/matching/normalizer.py
from typing import Any, Iterable


def normalize(value: Any) -> str:
    """Trim + lowercase strings; anything else becomes ''."""
    return value.strip().lower() if isinstance(value, str) else ""


def skill_name(skill: Any) -> Any:
    """Skills arrive either as plain strings or as {"name": ...} objects."""
    if isinstance(skill, dict):
        return skill.get("name")
    return skill


def normalize_skills(raw: Iterable[Any] | None) -> list[str]:
    """Normalize a skill list; empty entries are dropped."""
    out = []
    for s in raw or []:
        n = normalize(skill_name(s))
        if n:
            out.append(n)
    return out


def split_terms(raw: Any) -> list[str]:
    """Accept a list or a comma-separated string of search terms."""
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    return [t.strip() for t in raw if isinstance(t, str) and t.strip()]
