"""Account entity and the result values returned by credential flows."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Account:
    """A registered account as handed to (and returned by) the user store.

    The core only ever holds an `Account` for the duration of a single
    register or login call. It carries the password hash computed by the
    external hasher, never the plaintext password.

    Attributes:
        username: Unique login name.
        email: Unique contact address.
        password_hash: Opaque hash produced by the password hasher.
    """

    username: str
    email: str
    password_hash: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class AuthResult:
    """Outcome of a successful register or login."""

    token: str = field(repr=False)
    username: str
    message: str


@dataclass(frozen=True, slots=True)
class LogoutResult:
    """Outcome of a logout; purely advisory."""

    message: str
