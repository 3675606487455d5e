"""Word pools and name tables used by the seeded catalog generators."""

from __future__ import annotations

import random
from typing import Sequence


LIVE_CATEGORY_NAMES: tuple[str, ...] = (
    "News", "Sports", "Movies", "Entertainment", "Kids",
    "Documentary", "Music", "Comedy", "Drama", "Reality TV",
    "Lifestyle", "Travel", "Food", "Tech", "Science",
    "History", "Nature", "Animation", "Gaming", "Shopping",
)

VOD_CATEGORY_NAMES: tuple[str, ...] = (
    "Action", "Comedy", "Drama", "Horror", "Thriller",
    "Romance", "Sci-Fi", "Fantasy", "Animation", "Documentary",
    "Biography", "Crime", "Mystery", "Adventure", "Family",
    "War", "Western", "Musical", "Sport", "History",
)

SERIES_CATEGORY_NAMES: tuple[str, ...] = (
    "Drama Series", "Comedy Series", "Crime Series", "Sci-Fi Series",
    "Reality Shows", "Anime", "Soap Opera", "Mini Series",
    "Documentary Series", "Kids Shows", "Action Series", "Fantasy Series",
    "Medical", "Legal", "Political", "Romance Series", "Historical",
    "Thriller Series", "Horror Series", "Western Series",
)

EPG_PROGRAM_TYPES: tuple[str, ...] = (
    "News", "Movie", "Documentary", "Entertainment", "Sports", "Kids", "Series",
)

LAST_NAMES: tuple[str, ...] = (
    "Anderson", "Baker", "Carter", "Dalton", "Ellison", "Fischer", "Garcia",
    "Hansen", "Ibrahim", "Jensen", "Keller", "Larsen", "Moreno", "Novak",
    "Okafor", "Petrov", "Quinn", "Romero", "Schmidt", "Tanaka", "Umar",
    "Vargas", "Walsh", "Xu", "Young", "Zimmerman", "Brooks", "Castillo",
    "Duarte", "Hughes", "Kowalski", "Lindqvist", "Murphy", "Nakamura",
)

FIRST_NAMES: tuple[str, ...] = (
    "Ada", "Bruno", "Chloe", "Diego", "Elena", "Felix", "Greta", "Hugo",
    "Ines", "Jonas", "Kira", "Leo", "Maya", "Nils", "Olga", "Pablo",
    "Rosa", "Sami", "Tess", "Uma", "Viktor", "Wanda", "Yusuf", "Zoe",
    "Amir", "Bea", "Cyril", "Dora", "Emil", "Farah", "Ivo", "Lena",
)

COMPANY_SUFFIXES: tuple[str, ...] = (
    "Group", "Media", "Networks", "Studios", "Broadcasting", "and Sons",
    "Holdings", "Partners", "Collective", "Channel",
)

PHRASE_ADJECTIVES: tuple[str, ...] = (
    "Adaptive", "Balanced", "Centralized", "Distributed", "Enhanced",
    "Focused", "Grounded", "Horizontal", "Integrated", "Managed",
    "Networked", "Optimized", "Persistent", "Quality-focused", "Reactive",
    "Streamlined", "Synchronized", "Universal", "Virtual", "Vertical",
)

PHRASE_DESCRIPTORS: tuple[str, ...] = (
    "24 hour", "asymmetric", "bottom-line", "clear-thinking", "dynamic",
    "empowering", "full-range", "global", "heuristic", "interactive",
    "local", "mission-critical", "next generation", "real-time",
    "secondary", "tangible", "transitional", "value-added",
)

PHRASE_NOUNS: tuple[str, ...] = (
    "alliance", "archive", "benchmark", "capability", "database", "encoding",
    "framework", "hierarchy", "initiative", "journey", "knowledge base",
    "matrix", "moratorium", "paradigm", "portal", "protocol", "strategy",
    "synergy", "throughput", "workforce",
)

SONG_WORDS: tuple[str, ...] = (
    "Midnight", "River", "Golden", "Echoes", "Summer", "Paper", "Neon",
    "Heart", "Silver", "Thunder", "Blue", "Highway", "Wild", "Moon",
    "Velvet", "Fire", "Winter", "Shadow", "Ocean", "Crystal", "Electric",
    "Dream", "Stone", "Glass", "Falling", "Northern", "Desert", "Rain",
)

LOREM_WORDS: tuple[str, ...] = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing",
    "elit", "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore",
    "et", "dolore", "magna", "aliqua", "enim", "ad", "minim", "veniam",
    "quis", "nostrud", "exercitation", "ullamco", "laboris", "nisi",
    "aliquip", "ex", "ea", "commodo", "consequat", "duis", "aute", "irure",
    "in", "reprehenderit", "voluptate", "velit", "esse", "cillum", "fugiat",
)

MUSIC_GENRES: tuple[str, ...] = (
    "Blues", "Classical", "Country", "Electronic", "Folk", "Funk", "Hip Hop",
    "Jazz", "Latin", "Metal", "Pop", "Reggae", "Rock", "Soul", "Stage And Screen",
    "World",
)

COUNTRIES: tuple[str, ...] = (
    "Argentina", "Australia", "Brazil", "Canada", "Denmark", "Egypt",
    "France", "Germany", "India", "Italy", "Japan", "Kenya", "Mexico",
    "Netherlands", "Norway", "Poland", "Portugal", "South Korea", "Spain",
    "Sweden", "Turkey", "United Kingdom", "United States",
)


def category_names(kind: str) -> Sequence[str]:
    """Return the category title table for a content kind."""

    if kind in {"itv", "live"}:
        return LIVE_CATEGORY_NAMES
    if kind == "vod":
        return VOD_CATEGORY_NAMES
    return SERIES_CATEGORY_NAMES


def full_name(rng: random.Random) -> str:
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"


def full_names(rng: random.Random, count: int) -> str:
    return ", ".join(full_name(rng) for _ in range(count))


def company_name(rng: random.Random) -> str:
    return f"{rng.choice(LAST_NAMES)} {rng.choice(COMPANY_SUFFIXES)}"


def catch_phrase(rng: random.Random) -> str:
    return " ".join(
        (
            rng.choice(PHRASE_ADJECTIVES),
            rng.choice(PHRASE_DESCRIPTORS),
            rng.choice(PHRASE_NOUNS),
        )
    )


def song_name(rng: random.Random) -> str:
    return " ".join(rng.sample(SONG_WORDS, rng.randint(1, 3)))


def words(rng: random.Random, count: int) -> str:
    return " ".join(rng.choice(LOREM_WORDS) for _ in range(count))


def sentence(rng: random.Random) -> str:
    text = words(rng, rng.randint(5, 10))
    return text[:1].upper() + text[1:] + "."


def paragraph(rng: random.Random) -> str:
    return " ".join(sentence(rng) for _ in range(rng.randint(3, 5)))


def genres(rng: random.Random, count: int = 2) -> str:
    return ", ".join(rng.choice(MUSIC_GENRES) for _ in range(count))


def rating(rng: random.Random, low: float = 5.0, spread: float = 4.0) -> float:
    return round(rng.random() * spread + low, 1)
