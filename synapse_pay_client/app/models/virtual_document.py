from typing import Optional, Dict, List, Any

from pydantic import Field

from .document import Document
from .question import Question, questions_from_meta


class VirtualDocument(Document):
    """SSN, TIN and other number-only documents. SSNs may come back with a KBA question set."""
    question_set: List[Question] = Field(default_factory=list)

    @classmethod
    def create_from_response(cls, data: Dict[str, Any]) -> "VirtualDocument":
        doc = super().create_from_response(data)
        doc.question_set = questions_from_meta(data.get("meta"))
        return doc

    def update_from_response(self, data: Optional[Dict[str, Any]]) -> "VirtualDocument":
        super().update_from_response(data)
        if data and data.get("meta"):
            self.question_set = questions_from_meta(data["meta"])
        return self
