"""Build record set change requests."""

from dnsupdater.models import (
    DEFAULT_TTL,
    ChangeAction,
    ChangeRequest,
    Decision,
    RecordType,
)


def build_change_request(
    zone_id: str,
    dns_name: str,
    address: str | None,
    decision: Decision,
) -> ChangeRequest | None:
    """Build the change for one DNS name.

    Returns None when there is no address to publish or match, meaning the
    record is already gone. The TTL is always DEFAULT_TTL so a later delete
    matches what was upserted. Must not be called with ``Decision.IGNORE``.
    """
    if decision is Decision.IGNORE:
        raise ValueError("Ignored tags never produce a change request")
    if not address:
        return None

    action = ChangeAction.DELETE if decision is Decision.DELETE else ChangeAction.UPSERT
    return ChangeRequest(
        zone_id=zone_id,
        name=dns_name,
        type=RecordType.A,
        ttl=DEFAULT_TTL,
        values=[address],
        action=action,
    )
