from .favourite import KEY_SEPARATOR, favourite_key

__all__ = ["KEY_SEPARATOR", "favourite_key"]
