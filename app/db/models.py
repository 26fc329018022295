from pydantic import BaseModel
from typing import ClassVar

# Stored records. Field names are the JSON keys persisted in the key-value
# store and returned by the API.


class Record(BaseModel):
    key_prefix: ClassVar[str]

    id: str


# Assignment model
class Assignment(Record):
    key_prefix: ClassVar[str] = "assignment"

    title: str
    prompt: str
    gradeBand: str = ""
    classPin: str = ""  # classroom PIN, informational only
    createdAt: str


# Submission model
class Submission(Record):
    key_prefix: ClassVar[str] = "submission"

    assignmentId: str
    studentName: str
    classPin: str = ""
    response: str
    steps: str = ""
    reflection: str = ""
    submittedAt: str
