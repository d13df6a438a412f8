from typing import Dict, List, Any, Optional

from pydantic import BaseModel, Field


class Question(BaseModel):
    """A knowledge-based authentication question returned for a virtual document."""
    id: int
    question: str
    answers: Dict[int, str] = Field(default_factory=dict) # answer id -> answer text
    choice: Optional[int] = None

    @classmethod
    def create_from_response(cls, data: Dict[str, Any]) -> "Question":
        answers = {answer["id"]: answer["answer"] for answer in data.get("answers", [])}
        return cls(id=data["id"], question=data["question"], answers=answers)

    def to_answer(self) -> Dict[str, int]:
        return {"question_id": self.id, "answer_id": self.choice}


def questions_from_meta(meta: Optional[Dict[str, Any]]) -> List[Question]:
    if not meta:
        return []
    question_set = meta.get("question_set") or {}
    return [Question.create_from_response(q) for q in question_set.get("questions", [])]
