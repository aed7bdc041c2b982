class MealFinderError(Exception):
    pass


class LookupFailed(MealFinderError):
    """The meal lookup api could not be reached or sent something unreadable."""


class MealDBError(MealFinderError):
    """TheMealDB request or response failed."""
