from .profile_view import ProfileView

__all__ = ["ProfileView"]
