"""Static word tables that drive introduction validation."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path


class TaxonomyLoadError(RuntimeError):
    """Raised when a taxonomy override file cannot be used."""


@dataclass(frozen=True, slots=True)
class Taxonomy:
    """Read-only classification tables shared by every validator instance."""

    lowercase_words: frozenset[str]
    uppercase_abbreviations: frozenset[str]
    valid_hobbies: tuple[str, ...]
    forbidden_hobbies: frozenset[str]
    forbidden_keywords: tuple[str, ...]
    careerable_categories: tuple[str, ...]
    group_activities: tuple[str, ...]
    multiple_hobby_indicators: tuple[str, ...]
    suggested_hobbies: tuple[str, ...]
    major_cities: frozenset[str]
    town_keywords: tuple[str, ...]
    district_keywords: tuple[str, ...]


DEFAULT_TAXONOMY = Taxonomy(
    # articles, prepositions, conjunctions
    lowercase_words=frozenset(
        {
            "a", "an", "and", "as", "at", "but", "by", "for", "if", "in",
            "nor", "of", "on", "or", "so", "the", "to", "up", "yet",
        }
    ),
    uppercase_abbreviations=frozenset(
        {"IT", "CS", "ECE", "EEE", "ME", "CE", "AI", "ML", "IOT", "VR", "AR"}
    ),
    valid_hobbies=(
        # creative arts
        "painting", "drawing", "sketching", "photography", "writing", "poetry",
        "calligraphy", "sculpture", "pottery", "origami", "knitting", "embroidery",
        "jewelry making", "woodworking", "carving", "digital art", "animation",
        # solo music
        "singing", "guitar playing", "piano playing", "violin playing", "flute playing",
        "keyboard playing", "harmonica playing", "music composition", "music production",
        # literary and intellectual
        "reading", "blogging", "storytelling", "journaling", "research",
        "philosophy", "astronomy", "archaeology", "history research",
        # crafts
        "gardening", "cooking", "baking", "candle making", "soap making",
        "leather working", "metalworking", "glass blowing", "weaving",
        # solo performance
        "dancing", "acting", "stand-up comedy", "magic tricks", "ventriloquism",
        # digital, non-coding
        "graphic design", "video editing", "sound engineering", "3d modeling",
        "web design", "ui/ux design",
        "meditation", "yoga", "collecting", "bird watching", "nature photography",
        "herbalism", "perfume making", "fashion designing",
    ),
    forbidden_hobbies=frozenset(
        {
            # coding
            "coding", "programming", "software development", "web development",
            "app development", "game development", "hacking", "debugging",
            # sports
            "cricket", "football", "basketball", "volleyball", "tennis", "badminton",
            "swimming", "running", "cycling", "gym", "fitness", "bodybuilding",
            "wrestling", "boxing", "martial arts", "hockey", "golf",
            # college and engineering activities
            "robotics", "electronics projects", "circuit design", "lab experiments",
            "technical projects", "engineering design", "cad design",
            # group activities
            "debating", "group discussions", "team building", "organizing events",
            "leadership activities", "student council", "club activities",
            # vague
            "studying", "learning", "exploring", "thinking", "socializing",
            "hanging out", "chatting", "browsing internet", "social media",
        }
    ),
    forbidden_keywords=(
        "code", "program", "software", "app", "game dev", "hack",
        "sport", "team", "group", "club", "competition", "tournament",
        "engineering", "technical", "project", "lab", "experiment",
        "study", "learn", "explore", "social", "internet", "online",
    ),
    careerable_categories=(
        "art", "music", "writing", "design", "craft", "cook", "bak",
        "photograph", "paint", "draw", "sing", "danc", "act", "garden",
    ),
    group_activities=(
        "team", "group", "club", "band", "orchestra", "choir",
        "debate", "discussion", "meeting", "party", "event",
    ),
    multiple_hobby_indicators=(" and ", " & ", ",", " or ", " plus "),
    suggested_hobbies=(
        "painting", "reading", "writing", "photography", "singing",
        "guitar playing", "cooking", "gardening", "drawing", "poetry",
    ),
    major_cities=frozenset(
        {
            "mumbai", "delhi", "bangalore", "hyderabad", "ahmedabad", "chennai",
            "kolkata", "pune", "jaipur", "surat", "lucknow", "kanpur", "nagpur",
            "indore", "thane", "bhopal", "visakhapatnam", "pimpri", "patna",
            "vadodara", "ghaziabad", "ludhiana", "agra", "nashik", "faridabad",
            "meerut", "rajkot", "kalyan", "vasai", "varanasi", "srinagar",
            "aurangabad", "dhanbad", "amritsar", "navi mumbai", "allahabad",
            "ranchi", "howrah", "coimbatore", "jabalpur", "gwalior", "vijayawada",
            "jodhpur", "madurai", "raipur", "kota", "guwahati", "chandigarh",
        }
    ),
    town_keywords=("town", "village", "tehsil", "taluka"),
    district_keywords=("district", "dist", "near"),
)

_SET_FIELDS = {"lowercase_words", "forbidden_hobbies", "major_cities"}


def load_taxonomy(path: str | Path, *, base: Taxonomy = DEFAULT_TAXONOMY) -> Taxonomy:
    """Load a JSON override file on top of ``base``.

    The file is a JSON object keyed by table name; each value is a list of
    strings. Tables not present in the file keep their ``base`` contents.
    """

    source = Path(path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise TaxonomyLoadError(f"Failed to read taxonomy file: {source}") from exc
    except json.JSONDecodeError as exc:
        raise TaxonomyLoadError(f"Taxonomy file is not valid JSON: {source}") from exc
    if not isinstance(raw, dict):
        raise TaxonomyLoadError(f"Taxonomy file must contain a JSON object: {source}")

    known = {f.name for f in fields(Taxonomy)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise TaxonomyLoadError(f"Unknown taxonomy tables: {', '.join(unknown)}")

    overrides: dict[str, object] = {}
    for name, values in raw.items():
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise TaxonomyLoadError(f"Taxonomy table {name!r} must be a list of strings")
        overrides[name] = _normalize_table(name, values)
    return replace(base, **overrides)


def _normalize_table(name: str, values: list[str]) -> frozenset[str] | tuple[str, ...]:
    if name == "uppercase_abbreviations":
        return frozenset(value.strip().upper() for value in values if value.strip())
    if name == "multiple_hobby_indicators":
        # indicators are whitespace-sensitive (" and ")
        return tuple(value.lower() for value in values if value)
    cleaned = [value.strip().lower() for value in values if value.strip()]
    if name in _SET_FIELDS:
        return frozenset(cleaned)
    return tuple(cleaned)
