# trivia/categories.py - Open Trivia DB category catalogue

from dataclasses import dataclass
from typing import Dict, List, Optional, Union


@dataclass
class Category:
    """A provider category as sent in the `category` query parameter"""
    category_id: int
    name: str  # Display name as returned in question records
    short_name: str  # Friendlier name accepted on the command line


OPENTDB_CATEGORIES: Dict[int, Category] = {
    9: Category(9, "General Knowledge", "General Knowledge"),
    10: Category(10, "Entertainment: Books", "Books"),
    11: Category(11, "Entertainment: Film", "Film"),
    12: Category(12, "Entertainment: Music", "Music"),
    13: Category(13, "Entertainment: Musicals & Theatres", "Musicals"),
    14: Category(14, "Entertainment: Television", "Television"),
    15: Category(15, "Entertainment: Video Games", "Video Games"),
    16: Category(16, "Entertainment: Board Games", "Board Games"),
    17: Category(17, "Science & Nature", "Science"),
    18: Category(18, "Science: Computers", "Computers"),
    19: Category(19, "Science: Mathematics", "Math"),
    20: Category(20, "Mythology", "Mythology"),
    21: Category(21, "Sports", "Sports"),
    22: Category(22, "Geography", "Geography"),
    23: Category(23, "History", "History"),
    24: Category(24, "Politics", "Politics"),
    25: Category(25, "Art", "Art"),
    26: Category(26, "Celebrities", "Celebrities"),
    27: Category(27, "Animals", "Animals"),
    28: Category(28, "Vehicles", "Vehicles"),
    29: Category(29, "Entertainment: Comics", "Comics"),
    30: Category(30, "Science: Gadgets", "Gadgets"),
    31: Category(31, "Entertainment: Japanese Anime & Manga", "Anime & Manga"),
    32: Category(32, "Entertainment: Cartoon & Animations", "Cartoons"),
}


def list_categories() -> List[Category]:
    """All categories ordered by id"""
    return [OPENTDB_CATEGORIES[key] for key in sorted(OPENTDB_CATEGORIES)]


def get_category_name(category_id: int) -> Optional[str]:
    category = OPENTDB_CATEGORIES.get(category_id)
    return category.name if category else None


def find_category_id(value: Union[str, int]) -> Optional[int]:
    """
    Resolve a category given as an id, a numeric string, a full provider name
    or a short name. Matching on names is case-insensitive.
    """
    if isinstance(value, int):
        return value if value in OPENTDB_CATEGORIES else None

    text = value.strip()
    if text.isdigit():
        return find_category_id(int(text))

    lowered = text.lower()
    for category in OPENTDB_CATEGORIES.values():
        if lowered in (category.name.lower(), category.short_name.lower()):
            return category.category_id
    return None
