from .movie_codec import MovieCodec
from .recipe_codec import RecipeCodec
from .room_codec import RoomCodec
from .transaction_codec import TransactionCodec

__all__ = [
    "MovieCodec",
    "RecipeCodec",
    "RoomCodec",
    "TransactionCodec",
]
