"""Car Bath booking API: booking form, slot availability, notification email."""

__version__ = "1.0.0"
