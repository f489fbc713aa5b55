"""AuthResult — read-only view of a verification outcome.

Either a success carrying the decoded claims, or a failure carrying the
error that rejected the token. Lookups behave the same on both variants,
so callers that only need "is this valid" can check ``ok`` instead of
catching exceptions.
"""

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from hush_jwt.errors import JWTError


class _Absent(enum.Enum):
    """Marker returned for claims that are not present."""

    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent.ABSENT


@dataclass(frozen=True, slots=True)
class AuthResult:
    """Verification outcome with uniform claim access."""

    claims: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    error: JWTError | None = None

    @classmethod
    def success(cls, claims: Mapping[str, Any]) -> "AuthResult":
        return cls(claims=MappingProxyType(dict(claims)))

    @classmethod
    def failure(cls, error: JWTError) -> "AuthResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error is not None else None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None

    def get(self, key: str, default: Any = ABSENT) -> Any:
        """Return the claim value, or ``default`` (``ABSENT``) when missing."""
        return self.claims.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.claims.get(key, ABSENT)

    def __contains__(self, key: object) -> bool:
        return key in self.claims

    def __iter__(self) -> Iterator[str]:
        return iter(self.claims)

    def __len__(self) -> int:
        return len(self.claims)

    def __bool__(self) -> bool:
        return self.ok

    def as_dict(self) -> dict[str, Any]:
        """A mutable copy of the claims (empty on failure)."""
        return dict(self.claims)
