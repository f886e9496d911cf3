from typing import Iterable, List, Optional, Protocol, Tuple

from signup.state import User


class UserDirectory(Protocol):
    """Read-only view of existing users, as seen by the signup core."""

    def resolve(self, username: str) -> Optional[int]: ...

    def __len__(self) -> int: ...


class InMemoryDirectory:
    def __init__(self, users: Iterable[User] = (), case_sensitive: bool = True):
        self._users: List[User] = list(users)
        self.case_sensitive = case_sensitive

    @property
    def users(self) -> Tuple[User, ...]:
        return tuple(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def _key(self, username: str) -> str:
        return username if self.case_sensitive else username.casefold()

    def resolve(self, username: str) -> Optional[int]:
        """Id of the first user whose username matches, else None."""
        wanted = self._key(username)
        for user in self._users:
            if self._key(user.username) == wanted:
                return user.id
        return None

    def append(self, user: User) -> None:
        # Only for the collaborator persisting a new user once submit returned.
        self._users.append(user)
