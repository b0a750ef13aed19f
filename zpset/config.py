"""Global configuration for zpset.

Predefined finite-field moduli and environment-driven defaults.
"""

from __future__ import annotations

import logging
import os
from types import MappingProxyType

# ---------- Finite-field moduli ----------
# Each P_n defines a field Z(P) that includes all n-bit integers.
P_128 = int("01110db297cd308d90e53fb8a1309097e9", 16)

P_160 = int("01fe90e7b41988a641b1a6fec87d89a31e2a6131f5", 16)

P_256 = int(
    "01ddf48ac345191813ab7d922799e89396194308"
    "a4a5090b36c962d5d5d6dd8027",
    16,
)

P_512 = int(
    "01c7197225f4a5d58ac002a4dc8db1d9b0a15b7a"
    "43225d5b51a81c7617442a4a9c62dc9e25d6e312"
    "1aeaefacd9fd8d6cb7266d191553d70db6683b65"
    "4089183ebd",
    16,
)

# Field used by SKS, the Synchronizing Key Server.
P_SKS = int("530512889551602322505127520352579437339")

FIELDS = MappingProxyType(
    {
        "p128": P_128,
        "p160": P_160,
        "p256": P_256,
        "p512": P_512,
        "sks": P_SKS,
    }
)

# ---------- Environment ----------
FIELD_NAME = os.environ.get("ZPSET_FIELD", "sks")
LOG_LEVEL = os.environ.get("ZPSET_LOG_LEVEL", "WARNING")


def modulus(name: str | None = None) -> int:
    """Return the modulus registered under *name* (default: ``ZPSET_FIELD``)."""
    if name is None:
        name = FIELD_NAME
    try:
        return FIELDS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown field {name!r}; expected one of {', '.join(FIELDS)}"
        ) from None


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a stream handler to the ``zpset`` logger.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger("zpset")
    logger.setLevel(LOG_LEVEL if level is None else level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
