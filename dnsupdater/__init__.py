"""Keep Route53 records in step with EC2 instance lifecycle events."""

__version__ = "0.1.0"
