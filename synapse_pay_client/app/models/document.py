from typing import Optional, Dict, Any

from pydantic import BaseModel, Field


class Document(BaseModel):
    """
    Ancestor of the physical, social and virtual documents attached to a BaseDocument.

    `base_document` is a back-reference to the owning BaseDocument; it is
    excluded from dumps and from the repr so the object graph never recurses.
    """

    type: str # document_type in the API, e.g. "GOVT_ID", "FACEBOOK", "SSN"
    value: Optional[str] = None # document_value in the API
    id: Optional[str] = None
    status: Optional[str] = None # e.g. "SUBMITTED|REVIEWING", "SUBMITTED|VALID"
    last_updated: Optional[int] = None # epoch millis from the API
    base_document: Optional[Any] = Field(default=None, exclude=True, repr=False)

    @classmethod
    def create_from_response(cls, data: Dict[str, Any]) -> "Document":
        return cls(
            type=data["document_type"],
            value=data.get("document_value"),
            id=data.get("id"),
            status=data.get("status"),
            last_updated=data.get("last_updated"),
        )

    def to_payload_fragment(self) -> Dict[str, Any]:
        return {
            "document_value": self.value,
            "document_type": self.type,
        }

    def update_from_response(self, data: Optional[Dict[str, Any]]) -> "Document":
        # The reconciler passes None when the response holds no document of this type
        if not data:
            return self
        self.id = data.get("id", self.id)
        self.status = data.get("status", self.status)
        self.last_updated = data.get("last_updated", self.last_updated)
        return self
