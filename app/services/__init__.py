from app.services.auth import AuthContext, AuthResolver, AuthService
from app.services.blog import BlogService
from app.services.user import UserService

__all__ = ["AuthContext", "AuthResolver", "AuthService", "BlogService", "UserService"]
