"""Line format for the movie catalogue: ``movieId|title|genre|isAvailable``."""

from recordbook.application.interfaces import RecordCodec
from recordbook.domain.entities import Movie

from .fields import format_bool, parse_bool


class MovieCodec(RecordCodec[Movie]):
    field_count = 4

    def encode(self, record: Movie) -> list[str]:
        return [
            str(record.movie_id),
            record.title,
            record.genre,
            format_bool(record.is_available),
        ]

    def decode(self, fields: list[str]) -> Movie:
        movie_id, title, genre, available = fields
        return Movie(
            movie_id=int(movie_id),
            title=title,
            genre=genre,
            is_available=parse_bool(available),
        )
