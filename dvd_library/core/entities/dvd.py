"""
DVD catalog entity.

A DVD entry is six free-form text fields. The title identifies the entry
in the library; no field is validated or truncated.
"""

from dataclasses import astuple, dataclass

from dvd_library.utils.constants import COLUMN_SEPARATOR
from dvd_library.utils.helpers import format_columns

# Minimum column widths for display, in field order (last column unconstrained)
TITLE_WIDTH = 25
RELEASE_DATE_WIDTH = 14
MPAA_RATING_WIDTH = 14
DIRECTOR_WIDTH = 20
STUDIO_WIDTH = 15

COLUMN_WIDTHS: tuple[int, ...] = (
    TITLE_WIDTH,
    RELEASE_DATE_WIDTH,
    MPAA_RATING_WIDTH,
    DIRECTOR_WIDTH,
    STUDIO_WIDTH,
)

DVD_HEADERS: tuple[str, ...] = (
    "Title",
    "Release Date",
    "MPAA Rating",
    "Director",
    "Studio",
    "User Rating/Note",
)


@dataclass
class Dvd:
    """
    One DVD entry of the library.

    Attributes:
        title: Title of the DVD, unique key in the library
        release_date: Release date, free text
        mpaa_rating: MPAA rating (e.g. "PG-13")
        director_name: Name of the director
        studio: Name of the studio
        user_rating_and_note: Rating and/or note given by the user
    """

    title: str = ""
    release_date: str = ""
    mpaa_rating: str = ""
    director_name: str = ""
    studio: str = ""
    user_rating_and_note: str = ""

    def fields(self) -> tuple[str, ...]:
        """Returns the six fields in their fixed order."""
        return astuple(self)

    @staticmethod
    def format_row(values: tuple[str, ...]) -> str:
        """
        Formats six values using the DVD column layout.

        TITLE | RELEASE_DATE | MPAA_RATING | DIRECTOR_NAME | STUDIO_NAME | USER_RATING
        """
        return format_columns(values, COLUMN_WIDTHS, COLUMN_SEPARATOR)

    @classmethod
    def header_row(cls) -> str:
        """Returns the header line aligned with format_row()."""
        return cls.format_row(DVD_HEADERS)

    @staticmethod
    def formatted_length() -> int:
        """Minimum length of a formatted row, header label of the last column included."""
        return (
            sum(COLUMN_WIDTHS)
            + len(COLUMN_SEPARATOR) * len(COLUMN_WIDTHS)
            + len(DVD_HEADERS[-1])
        )

    def __str__(self) -> str:
        return self.format_row(self.fields())
