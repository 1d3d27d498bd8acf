"""Decide what a lifecycle state means for a DNS record."""

from dnsupdater.models import STATE_RUNNING, STATE_TERMINATED, Decision, DNSRole


def decide(state: str, role: DNSRole) -> Decision:
    """Map a lifecycle state and DNS role to an action.

    A running instance always gets its records refreshed. Public records go
    away as soon as the instance is anything but running, since a stopped
    instance gives up its public address. Private addresses survive a stop,
    so private records are only removed on termination.

    Unknown states are treated as "not running" and never raise.
    """
    if state == STATE_RUNNING:
        return Decision.UPDATE
    if role is DNSRole.PUBLIC:
        return Decision.DELETE
    if state == STATE_TERMINATED:
        return Decision.DELETE
    return Decision.IGNORE
