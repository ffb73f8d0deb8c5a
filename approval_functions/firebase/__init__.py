from .firebase import FirebaseApp, FirebasePlatform, get_platform

__all__ = ["FirebaseApp", "FirebasePlatform", "get_platform"]
