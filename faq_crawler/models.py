"""
Data Model
==========
Heading records extracted from article pages and the fixed-schema rows
they are flattened into for the spreadsheet.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List, Tuple

# Column order is significant: columns are assigned A..L in this order.
OUTPUT_COLUMNS: Tuple[str, ...] = (
    "question",
    "question_type",
    "language",
    "answer_url",
    "answer_type",
    "answer_content",
    "product",
    "platform",
    "is_public",
    "error_code",
    "_ignore",
    "question_index",
)

# Width hints (characters) per column, same order as OUTPUT_COLUMNS.
COLUMN_WIDTHS: Tuple[int, ...] = (60, 15, 10, 120, 15, 15, 15, 15, 15, 15, 15, 15)

ANSWER_TYPE = "文档链接"   # "document link"
ANSWER_CONTENT = "/"


@dataclass(frozen=True)
class HeadingRecord:
    """
    One H2/H3 heading from one article page.

    ``title`` carries the article title, the enclosing H2 id (for H3s),
    the heading id and the product name so that it stays unique once
    every article is flattened into a single table.
    """
    title: str
    href: str
    language: str
    product: str
    platform: str

    def to_dict(self) -> dict:
        return asdict(self)

    def to_row(self) -> "Row":
        return Row(
            question=self.title,
            language=self.language,
            answer_url=f'<a href="{self.href}">{self.title}</a>',
            answer_type=ANSWER_TYPE,
            answer_content=ANSWER_CONTENT,
            product=self.product,
            platform=self.platform,
        )


@dataclass(frozen=True)
class Row:
    """Spreadsheet projection of a HeadingRecord.

    Unpopulated fields are left empty for manual annotation downstream.
    """
    question: str = ""
    question_type: str = ""
    language: str = ""
    answer_url: str = ""
    answer_type: str = ""
    answer_content: str = ""
    product: str = ""
    platform: str = ""
    is_public: str = ""
    error_code: str = ""
    _ignore: str = ""
    question_index: str = ""

    def values(self) -> List[str]:
        return [getattr(self, name) for name in OUTPUT_COLUMNS]

    def to_dict(self) -> Dict[str, str]:
        return dict(zip(OUTPUT_COLUMNS, self.values()))
