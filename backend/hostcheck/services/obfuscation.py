"""
Obfuscation - Hide condition values at rest.

Check files shipped to a host can carry the answers they score against
(expected hashes, file contents, command output). Values are kept obfuscated
in memory and only revealed for the duration of one condition evaluation.
"""
import base64
import binascii
from contextlib import contextmanager
from typing import Iterator, Protocol

from hostcheck.config import settings
from hostcheck.errors import ObfuscationError
from hostcheck.logger import CheckLogger
from hostcheck.schemas.check import PARAMETER_SLOTS, Cond


class Obfuscator(Protocol):
    """In-place, reversible transform over a condition's parameter slots."""

    def obfuscate(self, cond: Cond): ...

    def deobfuscate(self, cond: Cond): ...


class NullObfuscator:
    """Leaves values untouched."""

    def obfuscate(self, cond: Cond):
        pass

    def deobfuscate(self, cond: Cond):
        pass


class XorObfuscator:
    """Reversible XOR + base64 transform over every populated parameter slot.

    Empty slots stay empty so argument validation sees the same shape before
    and after the transform.
    """

    def __init__(self, key: str):
        if not key:
            raise ValueError("obfuscation key must not be empty")
        self.key = key.encode("utf-8")

    def _xor(self, data: bytes) -> bytes:
        return bytes(b ^ self.key[i % len(self.key)] for i, b in enumerate(data))

    def obfuscate(self, cond: Cond):
        for slot in PARAMETER_SLOTS:
            value = getattr(cond, slot)
            if value:
                hidden = self._xor(value.encode("utf-8", errors="surrogateescape"))
                setattr(cond, slot, base64.b64encode(hidden).decode("ascii"))

    def deobfuscate(self, cond: Cond):
        revealed = {}
        for slot in PARAMETER_SLOTS:
            value = getattr(cond, slot)
            if not value:
                continue
            try:
                data = base64.b64decode(value.encode("ascii"), validate=True)
            except (binascii.Error, UnicodeEncodeError) as e:
                raise ObfuscationError(f"cannot reveal '{slot}': {e}") from e
            revealed[slot] = self._xor(data).decode("utf-8", errors="surrogateescape")
        # Only write back once every slot decoded, so a failure leaves the condition hidden
        for slot, value in revealed.items():
            setattr(cond, slot, value)


def get_obfuscator() -> Obfuscator:
    """Obfuscator selected by HOSTCHECK_OBFUSCATION_KEY."""
    if settings.OBFUSCATION_KEY:
        return XorObfuscator(settings.OBFUSCATION_KEY)
    return NullObfuscator()


@contextmanager
def revealed(cond: Cond, obfuscator: Obfuscator, log: CheckLogger) -> Iterator[Cond]:
    """Reveal a condition in place for the body of the with-block.

    The condition is hidden again on every exit path, including the fatal
    ConfigurationError raised by log.fail().
    """
    try:
        obfuscator.deobfuscate(cond)
    except ObfuscationError as e:
        log.fail(str(e))
    try:
        yield cond
    finally:
        obfuscator.obfuscate(cond)
