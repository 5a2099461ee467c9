from .favourites_store import FavouritesStore

__all__ = ["FavouritesStore"]
