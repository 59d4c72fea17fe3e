"""Sink and category enums plus the category filter.

The wildcard ``Category.ALL`` never lives inside the filter's set; it is
folded into an explicit ``match_all`` flag so that "everything enabled via
wildcard" and "all four categories listed" stay distinguishable.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Union


class Sink(Enum):
    NONE = "none"
    CONSOLE = "console"
    FILE = "file"

    @classmethod
    def parse(cls, value: Union["Sink", str]) -> "Sink":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown sink: {value!r}") from None


class Category(Enum):
    INFO = "info"
    DEBUG = "debug"
    SUCCESS = "success"
    ERROR = "error"
    ALL = "all"

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown category: {value!r}") from None


CategoryLike = Union[Category, str]


@dataclass(frozen=True)
class CategoryFilter:
    categories: FrozenSet[Category] = frozenset()
    match_all: bool = False

    @classmethod
    def everything(cls) -> "CategoryFilter":
        return cls(match_all=True)

    @classmethod
    def from_categories(cls, categories: Iterable[CategoryLike]) -> "CategoryFilter":
        parsed = {Category.parse(c) for c in categories}
        match_all = Category.ALL in parsed
        parsed.discard(Category.ALL)
        return cls(categories=frozenset(parsed), match_all=match_all)

    def allows(self, category: Category) -> bool:
        return self.match_all or category in self.categories

    def is_empty(self) -> bool:
        return not self.match_all and not self.categories


__all__ = ["Sink", "Category", "CategoryFilter", "CategoryLike"]
