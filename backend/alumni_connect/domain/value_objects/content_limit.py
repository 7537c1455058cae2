"""
ContentLimit Value Object - Character caps for user-authored text.

Text that is blank after trimming, or longer than the cap, is not sent at all.
Callers treat a rejected text as a no-op rather than an error.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentLimit:
    max_chars: int

    def __post_init__(self):
        if self.max_chars <= 0:
            raise ValueError(f"Invalid content limit: {self.max_chars}")

    def accepts(self, content: str) -> bool:
        if not content or not content.strip():
            return False
        return len(content) <= self.max_chars


MESSAGE_LIMIT = ContentLimit(2000)
POST_LIMIT = ContentLimit(500)
COMMENT_LIMIT = ContentLimit(200)
