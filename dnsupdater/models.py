"""Data types passed between the reconciliation steps."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

STATE_RUNNING = "running"
STATE_STOPPING = "stopping"
STATE_TERMINATED = "terminated"

DEFAULT_TTL = 300


class DNSRole(str, Enum):
    """Which instance address a DNS tag publishes."""

    PUBLIC = "public"
    PRIVATE = "private"


class Decision(str, Enum):
    UPDATE = "update"
    DELETE = "delete"
    IGNORE = "ignore"


class ChangeAction(str, Enum):
    UPSERT = "UPSERT"
    DELETE = "DELETE"


class RecordType(str, Enum):
    A = "A"


class EventDetail(BaseModel):
    """The ``detail`` block of an EC2 state-change notification."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    instance_id: str = Field(alias="instance-id", min_length=1)
    state: str = ""

    @field_validator("state", mode="before")
    @classmethod
    def normalize_state(cls, v: Any) -> str:
        return str(v or "").lower()


class LifecycleEvent(BaseModel):
    """EventBridge envelope for an EC2 instance state change.

    Only ``detail`` drives behaviour; the remaining fields are kept for logging.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    version: str | None = None
    id: str | None = None
    detail_type: str | None = Field(default=None, alias="detail-type")
    source: str | None = None
    account: str | None = None
    time: str | None = None
    region: str | None = None
    resources: list[str] = Field(default_factory=list)
    detail: EventDetail

    @property
    def instance_id(self) -> str:
        return self.detail.instance_id

    @property
    def state(self) -> str:
        return self.detail.state


class Tag(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class InstanceSnapshot(BaseModel):
    """Tags and addresses of one instance, as reported by the inventory."""

    model_config = ConfigDict(frozen=True)

    instance_id: str
    tags: list[Tag] = Field(default_factory=list)
    public_address: str | None = None
    private_address: str | None = None

    def address_for(self, role: DNSRole) -> str | None:
        """Return the reported address for a role, or None when empty."""
        address = self.public_address if role is DNSRole.PUBLIC else self.private_address
        return address or None


class HostedZone(BaseModel):
    """A hosted zone as listed by the DNS store (raw, prefixed id)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class RecordSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    values: list[str] = Field(default_factory=list)


class ChangeRequest(BaseModel):
    """A single record set change against one hosted zone.

    Deletes carry the full record set, value and TTL included, because the
    store only removes an exact match.
    """

    model_config = ConfigDict(frozen=True)

    zone_id: str
    name: str
    type: RecordType = RecordType.A
    ttl: int = DEFAULT_TTL
    values: list[str]
    action: ChangeAction

    def to_change_batch(self) -> dict[str, Any]:
        """Render the request in the Route53 ``ChangeBatch`` shape."""
        return {
            "Changes": [
                {
                    "Action": self.action.value,
                    "ResourceRecordSet": {
                        "Name": self.name,
                        "Type": self.type.value,
                        "TTL": self.ttl,
                        "ResourceRecords": [{"Value": value} for value in self.values],
                    },
                }
            ]
        }


class ChangeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    change_id: str | None = None
    status: str
