"""Error levels controlling which consistency checks the reader enforces."""

from __future__ import annotations

import enum


class ErrorLevel(enum.IntEnum):
    """Ordered validation policy; higher levels enforce every lower check."""

    #: Decode only what is needed to keep the cursor in the right place.
    PERMISSIVE = 0
    #: Also verify internal consistency: lengths, null records, checksums.
    CHECKED = 1
    #: Also verify the format's external markers: magic, footer, FCHECK.
    STRICT = 2

    @classmethod
    def parse(cls, text: str) -> "ErrorLevel":
        """Return the level named by ``text`` (case-insensitive)."""

        try:
            return cls[text.strip().upper()]
        except KeyError:
            choices = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"Unknown error level '{text}'; expected one of: {choices}") from None
