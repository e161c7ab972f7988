"""Entity ID value objects"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Subject identifier issued by the external identity provider."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("User ID must be a non-empty string")

    @classmethod
    def from_str(cls, value: str) -> 'UserId':
        return cls(value)


@dataclass(frozen=True)
class PoemId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int):
            raise ValueError("Poem ID must be an integer")


@dataclass(frozen=True)
class SubmissionId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int):
            raise ValueError("Submission ID must be an integer")


@dataclass(frozen=True)
class RecordingId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int):
            raise ValueError("Recording ID must be an integer")
