from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .media_provider import MediaProvider
from .auth_provider import AuthProvider
from .profile_provider import ProfileProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "MediaProvider",
    "AuthProvider",
    "ProfileProvider",
]
