"""Capability interfaces for administrative collaborators.

Administrative operations compose these small pieces instead of
inheriting them:

- Authorizer: answers "does this account hold this role?"
- PauseGate: answers "is this component paused?"
- Version: the semantic version of a deployed component

RoleRegistry and Pausable are in-memory implementations. The calendar
conversion functions depend on none of this.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from typing_extensions import override

from tscal.errors import GateNotPaused, GatePaused, Unauthorized

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_ROLE = "DEFAULT_ADMIN_ROLE"
OWNER_ROLE = "OWNER_ROLE"
PAUSER_ROLE = "PAUSER_ROLE"


class Authorizer(ABC):

    @abstractmethod
    def is_authorized(self, role: str, caller: str) -> bool:
        """Return True if `caller` holds `role`."""
        pass

    def require(self, role: str, caller: str) -> None:
        if not self.is_authorized(role, caller):
            raise Unauthorized(caller, role)


class RoleRegistry(Authorizer):
    """In-memory role membership with an admin-role hierarchy.

    The owner passed at construction receives OWNER_ROLE. OWNER_ROLE is
    administered by DEFAULT_ADMIN_ROLE; every other role is administered
    by OWNER_ROLE until set_role_admin() says otherwise. Granting or
    revoking a role requires holding its admin role.
    """

    def __init__(self, owner: str) -> None:
        self._members: dict[str, set[str]] = {}
        self._admins: dict[str, str] = {OWNER_ROLE: DEFAULT_ADMIN_ROLE}
        self._grant(OWNER_ROLE, owner, owner)

    def role_admin(self, role: str) -> str:
        return self._admins.get(role, OWNER_ROLE)

    def has_role(self, role: str, account: str) -> bool:
        return account in self._members.get(role, ())

    @override
    def is_authorized(self, role: str, caller: str) -> bool:
        return self.has_role(role, caller)

    def set_role_admin(self, role: str, admin_role: str, *, caller: str) -> None:
        self.require(self.role_admin(role), caller)
        logger.info("Admin of %s changed to %s by %s", role, admin_role, caller)
        self._admins[role] = admin_role

    def grant_role(self, role: str, account: str, *, caller: str) -> bool:
        """Grant `role` to `account`.

        Returns:
            True if the account did not already hold the role

        Raises:
            Unauthorized: If `caller` lacks the role's admin role
        """
        self.require(self.role_admin(role), caller)
        return self._grant(role, account, caller)

    def revoke_role(self, role: str, account: str, *, caller: str) -> bool:
        self.require(self.role_admin(role), caller)
        return self._revoke(role, account, caller)

    def grant_role_batch(
        self, role: str, accounts: Iterable[str], *, caller: str
    ) -> list[str]:
        """Grant `role` to each account; return those newly granted.

        Authorization is checked before any account is processed, so an
        unauthorized caller fails even with an empty batch.
        """
        self.require(self.role_admin(role), caller)
        return [a for a in accounts if self._grant(role, a, caller)]

    def revoke_role_batch(
        self, role: str, accounts: Iterable[str], *, caller: str
    ) -> list[str]:
        self.require(self.role_admin(role), caller)
        return [a for a in accounts if self._revoke(role, a, caller)]

    def _grant(self, role: str, account: str, caller: str) -> bool:
        members = self._members.setdefault(role, set())
        if account in members:
            return False
        members.add(account)
        logger.info("Role %s granted to %s by %s", role, account, caller)
        return True

    def _revoke(self, role: str, account: str, caller: str) -> bool:
        members = self._members.get(role)
        if not members or account not in members:
            return False
        members.remove(account)
        logger.info("Role %s revoked from %s by %s", role, account, caller)
        return True


class PauseGate(ABC):

    @abstractmethod
    def is_paused(self) -> bool:
        pass

    def require_not_paused(self) -> None:
        if self.is_paused():
            raise GatePaused()


class Pausable(PauseGate):
    """Pause flag whose toggles require PAUSER_ROLE from an Authorizer."""

    def __init__(self, authorizer: Authorizer, role: str = PAUSER_ROLE) -> None:
        self.authorizer: Authorizer = authorizer
        self.role: str = role
        self._paused: bool = False

    @override
    def is_paused(self) -> bool:
        return self._paused

    def pause(self, caller: str) -> None:
        """Engage the gate; raises GatePaused if it is already engaged."""
        self.authorizer.require(self.role, caller)
        self.require_not_paused()
        self._paused = True
        logger.info("Paused by %s", caller)

    def unpause(self, caller: str) -> None:
        self.authorizer.require(self.role, caller)
        if not self._paused:
            raise GateNotPaused()
        self._paused = False
        logger.info("Unpaused by %s", caller)


@dataclass(frozen=True, order=True)
class Version:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


__all__ = [
    "DEFAULT_ADMIN_ROLE",
    "OWNER_ROLE",
    "PAUSER_ROLE",
    "Authorizer",
    "RoleRegistry",
    "PauseGate",
    "Pausable",
    "Version",
]
