"""Front Desk Relay: kiosk visitor announcements forwarded to staff over Slack."""

__version__ = "1.0.0"
