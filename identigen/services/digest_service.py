"""Хеширование seed-строки в дайджест фиксированной длины.

Принципы:
- SRP: только SHA-256 от UTF-8 байтов строки, без интерпретации результата.
"""
from __future__ import annotations

import hashlib
import logging

logger = logging.getLogger(__name__)

DIGEST_SIZE = hashlib.sha256().digest_size


class DigestService:
    def derive_digest(self, seed: str) -> bytes:
        """Возвращает 32-байтовый SHA-256 дайджест seed.

        Пустая строка допустима: хеш пустого ввода определён.
        """
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        logger.debug("Digest for seed of %d chars: %s", len(seed), digest.hex())
        return digest

    def digest_hex(self, seed: str) -> str:
        return self.derive_digest(seed).hex()
