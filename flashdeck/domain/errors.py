"""
Custom application-specific exceptions.
"""

class BaseAppException(Exception):
    """Base exception for the application."""
    pass

class CollectionNotFoundError(BaseAppException):
    """Raised when a flashcard collection is not found in the database."""
    pass

class InvalidCollectionError(BaseAppException):
    """Raised when a collection would be saved without a name or without valid cards."""
    pass

class ParsingError(BaseAppException):
    """Raised when pasted text cannot be split into flashcards."""
    pass
