from .user import User
from .profile import Profile, Experience, Education, Social, SOCIAL_NETWORKS

__all__ = [
    "User",
    "Profile",
    "Experience",
    "Education",
    "Social",
    "SOCIAL_NETWORKS",
]
