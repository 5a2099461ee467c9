from .favourites_repository import FavouritesRepository

__all__ = ["FavouritesRepository"]
