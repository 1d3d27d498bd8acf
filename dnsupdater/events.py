"""Helpers for reading and writing lifecycle event payloads."""

import json
from pathlib import Path
from typing import Any

import yaml

from dnsupdater.errors import InvalidEventError

DETAIL_TYPE = "EC2 Instance State-change Notification"


def load_event_file(path: Path) -> dict[str, Any]:
    """Load an event from a JSON or YAML file.

    JSON is tried first; YAML rejects tab indentation that JSON allows.
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidEventError(f"Could not read event file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidEventError(f"Could not parse event file {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidEventError(f"Event file {path} does not contain a mapping")
    return data


def sample_event(
    instance_id: str,
    state: str,
    region: str = "us-east-1",
    account: str = "123456789012",
    time: str = "2024-01-01T00:00:00Z",
) -> dict[str, Any]:
    """Build an event shaped like the EventBridge notification."""
    return {
        "version": "0",
        "id": "00000000-0000-0000-0000-000000000000",
        "detail-type": DETAIL_TYPE,
        "source": "aws.ec2",
        "account": account,
        "time": time,
        "region": region,
        "resources": [f"arn:aws:ec2:{region}:{account}:instance/{instance_id}"],
        "detail": {"instance-id": instance_id, "state": state},
    }


def dump_yaml(data: dict[str, Any]) -> str:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
