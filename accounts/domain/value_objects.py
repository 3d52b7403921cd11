from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class MutationKind(str, Enum):
    CREATED = "CREATED"
    UPDATED = "UPDATED"


class LifecycleEventType(str, Enum):
    USER_CREATED = "USER_CREATED"
    USER_VALIDATED = "USER_VALIDATED"


@dataclass(frozen=True)
class DocumentReference:
    wiki: str
    space: str
    name: str

    @classmethod
    def parse(cls, qualified: str) -> "DocumentReference":
        """Convierte "wiki:Space.Name" en referencia; el nombre puede contener puntos."""
        wiki, sep, local = qualified.partition(":")
        if not sep or "." not in local:
            raise ValueError(f"Referencia de documento inválida: {qualified!r}")
        space, _, name = local.partition(".")
        return cls(wiki=wiki, space=space, name=name)

    @property
    def local(self) -> str:
        # Sin el nombre de la wiki, p.ej. "XWiki.JohnDoe"
        return f"{self.space}.{self.name}"

    @property
    def qualified(self) -> str:
        return f"{self.wiki}:{self.local}"

    def __str__(self):
        return self.qualified


@dataclass(frozen=True)
class Document:
    reference: DocumentReference
    version: str = "1.1"
    previous_version: str | None = None
    # Campos crudos del objeto de usuario (active, first_name, ...). None = no es usuario.
    user_record: Mapping[str, Any] | None = None

    @property
    def document_id(self) -> str:
        return self.reference.local


@dataclass(frozen=True)
class MutationEvent:
    kind: MutationKind
    document: Document
    current_revision_ref: str | None = None
    previous_revision_ref: str | None = None

    @property
    def document_id(self) -> str:
        return self.document.document_id

    @classmethod
    def created(cls, document: Document) -> "MutationEvent":
        return cls(
            kind=MutationKind.CREATED,
            document=document,
            current_revision_ref=document.version,
            previous_revision_ref=document.previous_version,
        )

    @classmethod
    def updated(cls, document: Document) -> "MutationEvent":
        return cls(
            kind=MutationKind.UPDATED,
            document=document,
            current_revision_ref=document.version,
            previous_revision_ref=document.previous_version,
        )


@dataclass(frozen=True)
class UserRecord:
    active: Any
    first_name: str = ""
    last_name: str = ""
    email: str = ""


@dataclass(frozen=True)
class UserData:
    first_name: str = ""
    last_name: str = ""
    email: str = ""

    def as_map(self) -> dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }


@dataclass(frozen=True)
class LifecycleEvent:
    type: LifecycleEventType
    document_id: str
    user_data: UserData = field(default_factory=UserData)
