"""Cart owner identity: a visitor session or an authenticated member, never both."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class VisitorIdentity:
    visitor_id: str

    def column_filter(self) -> Tuple[str, Optional[str]]:
        return "visitor_id", self.visitor_id


@dataclass(frozen=True)
class MemberIdentity:
    member_id: int

    def __post_init__(self) -> None:
        if not self.member_id:
            raise ValueError("member_id must be non-zero for a member identity")

    def column_filter(self) -> Tuple[str, int]:
        return "member_id", self.member_id


Identity = Union[VisitorIdentity, MemberIdentity]


def resolve_identity(visitor_id: Optional[str], member_id: Union[int, str, None]) -> Identity:
    """Map a (visitor_id, member_id) pair to an identity.

    A member id of 0 or None means the caller is anonymous, so the visitor id
    scopes the query and the member id is ignored; any other member id wins and
    the visitor id is ignored.
    """
    member_id = int(member_id or 0)
    if member_id:
        return MemberIdentity(member_id)
    return VisitorIdentity(visitor_id)
