from enum import Enum

__all__ = ["MismatchReason"]


class MismatchReason(Enum):
    """The nature of a divergence between the actual and the expected value."""

    ARITY = "arity"
    KIND_MISMATCH = "kind mismatch"
    MISSING_KEY = "missing key"
    VALUE_MISMATCH = "value mismatch"
    COUNT_MISMATCH = "count mismatch"
    WEAK_COLLECTION = "weak collection"
    DEPTH_EXCEEDED = "depth exceeded"
    NODE_LIMIT_EXCEEDED = "node limit exceeded"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}.{self.name}>"
