from dataclasses import dataclass
from typing import Optional
from .models import User


@dataclass
class UserDTO:
    id: int
    name: str
    email: str
    role: str
    profile_pic: str
    date_joined: Optional[str]


def user_to_dto(u: User) -> UserDTO:
    joined = getattr(u, "date_joined", None)
    if joined is not None:
        try:
            joined = joined.isoformat()
        except AttributeError:
            joined = str(joined)
    return UserDTO(
        id=u.id,
        name=u.name,
        email=u.email,
        role=u.role,
        profile_pic=u.profile_pic or "",
        date_joined=joined,
    )
