"""homelab — typed Wake-on-LAN host inventory."""

__version__ = "0.1.0"
