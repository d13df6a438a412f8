# Base document (CIP/KYC record) of a SynapsePay user
import logging
from typing import Optional, List, Dict, Any

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from synapse_pay_client.app.observability import tracer
from synapse_pay_client.app.service.exceptions import ValidationError, ArgumentError
from .base_document_fields import BaseDocumentFields
from .document import Document
from .physical_document import PhysicalDocument
from .social_document import SocialDocument
from .virtual_document import VirtualDocument

logger = logging.getLogger(__name__)

# Scalar attribute -> field name used by the API
SCALAR_FIELDS: Dict[str, str] = {
    "email": "email",
    "phone_number": "phone_number",
    "ip": "ip",
    "name": "name",
    "aka": "alias",
    "entity_type": "entity_type",
    "entity_scope": "entity_scope",
    "birth_day": "day",
    "birth_month": "month",
    "birth_year": "year",
    "address_street": "address_street",
    "address_city": "address_city",
    "address_subdivision": "address_subdivision",
    "address_postal_code": "address_postal_code",
    "address_country_code": "address_country_code",
}

# Collection attribute -> (API field name, document class)
DOCUMENT_COLLECTIONS: Dict[str, tuple] = {
    "physical_documents": ("physical_docs", PhysicalDocument),
    "social_documents": ("social_docs", SocialDocument),
    "virtual_documents": ("virtual_docs", VirtualDocument),
}

# Strict validators for scalar changes, same types as create
SCALAR_VALIDATORS: Dict[str, TypeAdapter] = {
    field: TypeAdapter(info.annotation) for field, info in BaseDocumentFields.model_fields.items()
}


class BaseDocument:
    """
    Stores the personal/business info of a user's CIP document and manages its
    physical, social and virtual documents.

    Use BaseDocument.create (or User.create_base_document) to make a new one;
    the constructor alone does not talk to the API.
    """

    def __init__(
        self,
        user: Any,
        id: Optional[str] = None,
        permission_scope: Optional[str] = None,
        physical_documents: Optional[List[PhysicalDocument]] = None,
        social_documents: Optional[List[SocialDocument]] = None,
        virtual_documents: Optional[List[VirtualDocument]] = None,
        **fields: Any,
    ):
        self.user = user
        self.id = id
        self.permission_scope = permission_scope
        for field in SCALAR_FIELDS:
            setattr(self, field, fields.get(field))
        self.physical_documents: List[PhysicalDocument] = list(physical_documents or [])
        self.social_documents: List[SocialDocument] = list(social_documents or [])
        self.virtual_documents: List[VirtualDocument] = list(virtual_documents or [])

        for doc in self.all_documents():
            doc.base_document = self

    def __repr__(self) -> str:
        return (
            f"BaseDocument(id={self.id!r}, name={self.name!r}, "
            f"physical={len(self.physical_documents)}, social={len(self.social_documents)}, "
            f"virtual={len(self.virtual_documents)})"
        )

    ##########################################
    ############### CREATION #################
    ##########################################

    @classmethod
    def create(
        cls,
        user: Any,
        physical_documents: Optional[List[PhysicalDocument]] = None,
        social_documents: Optional[List[SocialDocument]] = None,
        virtual_documents: Optional[List[VirtualDocument]] = None,
        **fields: Any,
    ) -> "BaseDocument":
        """
        Creates a new base document in the API belonging to the provided user and
        returns it, reconciled with the response data.

        Args:
            user: The User the base document belongs to.
            physical_documents / social_documents / virtual_documents: Optional lists of documents.
            **fields: All scalar fields of BaseDocumentFields (email, phone_number, ip, name, aka,
                entity_type, entity_scope, birth_day, birth_month, birth_year, address_*).

        Raises:
            ValidationError: If any argument is missing or of the wrong type. No request is made.
            ApiError: If the API rejects the submission.
        """
        from .user import User # circular: User builds base documents from responses

        if not isinstance(user, User):
            raise ValidationError("user must be a User object")
        try:
            validated = BaseDocumentFields(**fields)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid base document fields: {e}") from e

        collections = {
            "physical_documents": [] if physical_documents is None else physical_documents,
            "social_documents": [] if social_documents is None else social_documents,
            "virtual_documents": [] if virtual_documents is None else virtual_documents,
        }
        for field, docs in collections.items():
            doc_class = DOCUMENT_COLLECTIONS[field][1]
            if not isinstance(docs, list):
                raise ValidationError(f"{field} must be a list")
            if not all(isinstance(doc, doc_class) for doc in docs):
                raise ValidationError(f"{field} must be empty or contain only {doc_class.__name__}(s)")

        base_document = cls(user=user, **collections, **validated.model_dump())
        return base_document.submit()

    @classmethod
    def create_from_response(cls, user: Any, response: Dict[str, Any]) -> List["BaseDocument"]:
        """Parses every base document of a user response. No request is made."""
        base_documents = []
        for data in response.get("documents", []):
            base_documents.append(cls(
                user=user,
                id=data.get("id"),
                name=data.get("name"),
                permission_scope=data.get("permission_scope"),
                physical_documents=[PhysicalDocument.create_from_response(d) for d in data.get("physical_docs", [])],
                social_documents=[SocialDocument.create_from_response(d) for d in data.get("social_docs", [])],
                virtual_documents=[VirtualDocument.create_from_response(d) for d in data.get("virtual_docs", [])],
            ))
        return base_documents

    ##########################################
    ############### REQUESTS #################
    ##########################################

    def submit(self) -> "BaseDocument":
        """
        Submits the base document to the API. Called by create; it should not be
        necessary to call this directly.
        """
        with tracer.start_as_current_span("base_document.submit"):
            self.user.authenticate()
            response = self.user.client.users.update(self._payload_for_submit())
            self._update_values_with_response_data(response)
        logger.info(f"Base document {self.id} submitted for user {getattr(self.user, 'id', None)}")
        return self

    def update(self, **changes: Any) -> "BaseDocument":
        """
        Updates the supplied fields of the base document in the API. Valid keys are
        the scalar fields accepted by create plus the three document collections,
        whose documents are added to (not replacing) the existing ones.

        Raises:
            ArgumentError: If no changes are given, a key is not an updatable field, or a
                value has the wrong type. No request is made.
            ApiError: If the API rejects the update. Local state is left untouched.
        """
        if not changes:
            raise ArgumentError("must provide some key-value pairs to update")
        unknown = [field for field in changes if field not in SCALAR_FIELDS and field not in DOCUMENT_COLLECTIONS]
        if unknown:
            raise ArgumentError(f"cannot update unknown base document field(s): {', '.join(sorted(unknown))}")
        for field, new_value in changes.items():
            if field in DOCUMENT_COLLECTIONS:
                if not isinstance(new_value, list):
                    raise ArgumentError(f"{field} must be a list")
                if not all(isinstance(doc, Document) for doc in new_value):
                    raise ArgumentError(f"{field} must contain only documents")
            else:
                try:
                    SCALAR_VALIDATORS[field].validate_python(new_value, strict=True)
                except PydanticValidationError as e:
                    raise ArgumentError(f"Invalid value for {field}: {e}") from e

        with tracer.start_as_current_span("base_document.update") as span:
            span.set_attribute("base_document.fields", ",".join(sorted(changes)))
            self.user.authenticate()
            payload = self._payload_for_update(changes)
            response = self.user.client.users.update(payload)

            self._update_values_not_verified_in_response(changes)
            self._update_values_with_response_data(response)
        logger.info(f"Base document {self.id} updated: {sorted(changes)}")
        return self

    def add_physical_documents(self, documents: List[PhysicalDocument]) -> "BaseDocument":
        """Adds one or more physical documents and submits them to the API."""
        self._check_documents_arg(documents, PhysicalDocument)
        return self.update(physical_documents=documents)

    def add_social_documents(self, documents: List[SocialDocument]) -> "BaseDocument":
        """Adds one or more social documents and submits them to the API."""
        self._check_documents_arg(documents, SocialDocument)
        return self.update(social_documents=documents)

    def add_virtual_documents(self, documents: List[VirtualDocument]) -> "BaseDocument":
        """Adds one or more virtual documents and submits them to the API."""
        self._check_documents_arg(documents, VirtualDocument)
        return self.update(virtual_documents=documents)

    def all_documents(self) -> List[Document]:
        return [*self.physical_documents, *self.social_documents, *self.virtual_documents]

    ##########################################
    ################ HELPERS #################
    ##########################################

    @staticmethod
    def _check_documents_arg(documents: Any, doc_class: type) -> None:
        if not isinstance(documents, list):
            raise ArgumentError("must be a list")
        # only the first element is checked
        if not documents or not isinstance(documents[0], doc_class):
            raise ArgumentError(f"must contain a {doc_class.__name__}")

    def _payload_for_submit(self) -> Dict[str, Any]:
        fields = {api_name: getattr(self, field) for field, api_name in SCALAR_FIELDS.items()}
        for field, (api_name, _) in DOCUMENT_COLLECTIONS.items():
            docs = getattr(self, field)
            if docs:
                fields[api_name] = [doc.to_payload_fragment() for doc in docs]
        return {"documents": [fields]}

    def _payload_for_update(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        fields: Dict[str, Any] = {"id": self.id}
        for field, new_value in changes.items():
            if field in DOCUMENT_COLLECTIONS:
                api_name = DOCUMENT_COLLECTIONS[field][0]
                fields[api_name] = [doc.to_payload_fragment() for doc in new_value]
            else:
                fields[SCALAR_FIELDS[field]] = new_value
        return {"documents": [fields]}

    def _collection_for(self, doc: Document) -> List[Document]:
        for field, (_, doc_class) in DOCUMENT_COLLECTIONS.items():
            if isinstance(doc, doc_class):
                return getattr(self, field)
        raise ArgumentError(f"{type(doc).__name__} is not a physical, social or virtual document")

    def _update_values_not_verified_in_response(self, changes: Dict[str, Any]) -> None:
        # the response does not identify newly added documents reliably, so they
        # are attached here from the supplied values
        for field, new_value in changes.items():
            if field in DOCUMENT_COLLECTIONS:
                for doc in new_value:
                    doc.id = self.id
                    doc.base_document = self
                    self._collection_for(doc).append(doc)
            else:
                # field was checked against SCALAR_FIELDS in update()
                setattr(self, field, new_value)

    def _base_document_fields_from_response(self, response: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        documents = response.get("documents") or []
        if not documents:
            return None
        if self.id:
            match = next((doc for doc in documents if doc.get("id") == self.id), None)
            if match is not None:
                return match
            # the API sometimes assigns a new id; assume the last one is current
            logger.info(f"Base document {self.id} not found in response, taking id {documents[-1].get('id')}")
        return documents[-1]

    def _update_values_with_response_data(self, response: Dict[str, Any]) -> None:
        fields = self._base_document_fields_from_response(response)
        if fields is None:
            logger.warning(f"Response for base document {self.id} contained no documents")
            return
        self.id = fields.get("id")
        if fields.get("permission_scope") is not None:
            self.permission_scope = fields["permission_scope"]

        for doc in self.all_documents():
            api_name = next(name for name, doc_class in DOCUMENT_COLLECTIONS.values() if isinstance(doc, doc_class))
            same_types = [resp_doc for resp_doc in fields.get(api_name) or [] if resp_doc.get("document_type") == doc.type]
            # most recently updated wins; max keeps the first of equal timestamps
            doc_data = max(same_types, key=lambda d: d.get("last_updated") or 0) if same_types else None
            doc.update_from_response(doc_data)
