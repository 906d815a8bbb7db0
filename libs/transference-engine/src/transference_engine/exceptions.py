"""Error hierarchy for transference-engine."""


class TransferenceError(Exception):
    """Base exception for all matching-engine errors."""


class DimensionMismatchError(TransferenceError):
    """Two vectors compared under the strict dimension policy differ in length."""

    def __init__(self, left_dimensions: int, right_dimensions: int) -> None:
        super().__init__(
            f"Cannot compare vectors of {left_dimensions} and {right_dimensions} dimensions"
        )
        self.left_dimensions = left_dimensions
        self.right_dimensions = right_dimensions


class UnorderableScoreError(TransferenceError):
    """A receiver's combined score is NaN and the NaN policy rejects it."""

    def __init__(self, receiver_id: str, score: float) -> None:
        super().__init__(f"Combined score for receiver {receiver_id!r} is not orderable: {score}")
        self.receiver_id = receiver_id
        self.score = score
