"""
Decodificação do payload do webhook do GitLab.

O payload chega como um único objeto JSON cujo ``object_kind`` indica qual
variante do evento é relevante. Campos ausentes (ou ``null``) assumem o valor
vazio; tipos errados invalidam o payload inteiro.
"""
from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .constants import TAG_REF_PREFIX


class PayloadError(ValueError):
    """Corpo da requisição não pôde ser decodificado como evento do GitLab."""


class EventKind(str, Enum):
    PUSH = "push"
    TAG_PUSH = "tag_push"
    MERGE_REQUEST = "merge_request"
    REPOSITORY_UPDATE = "repository_update"
    UNKNOWN = "unknown"


# Apenas estes valores de object_kind são reconhecidos; o resto cai em UNKNOWN.
# Push de tag não tem object_kind próprio: é derivado do prefixo do ref.
_KIND_BY_OBJECT_KIND = {
    "push": EventKind.PUSH,
    "merge_request": EventKind.MERGE_REQUEST,
    "repository_update": EventKind.REPOSITORY_UPDATE,
}


def _without_nulls(data: Any) -> Any:
    # null equivale a campo ausente
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        return _without_nulls(data)


class Author(_Payload):
    name: str = ""
    avatar_url: str = ""


class Project(_Payload):
    name: str = ""
    web_url: str = ""


class Repository(_Payload):
    name: str = ""
    url: str = ""


class Commit(_Payload):
    id: str = ""
    message: str = ""
    author: Author = Field(default_factory=Author)
    url: str = ""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # elemento null na lista de commits vira um commit vazio
        if data is None:
            return {}
        return _without_nulls(data)


class MergeRequest(_Payload):
    title: str = ""
    state: str = ""
    author: Author = Field(default_factory=Author)
    url: str = ""


class GitLabEvent(_Payload):
    object_kind: str = ""
    user_name: str = ""
    user_avatar: str = ""
    project: Project = Field(default_factory=Project)
    repository: Repository = Field(default_factory=Repository)
    ref: str = ""
    after: str = ""
    commits: Tuple[Commit, ...] = ()
    merge_request: MergeRequest = Field(default_factory=MergeRequest)

    @property
    def kind(self) -> EventKind:
        kind = _KIND_BY_OBJECT_KIND.get(self.object_kind, EventKind.UNKNOWN)
        if kind is EventKind.PUSH and self.ref.startswith(TAG_REF_PREFIX):
            return EventKind.TAG_PUSH
        return kind

    @property
    def tag_name(self) -> str:
        if self.ref.startswith(TAG_REF_PREFIX):
            return self.ref[len(TAG_REF_PREFIX):]
        return self.ref


def parse_gitlab_event(body) -> GitLabEvent:
    """
    Decodifica o corpo bruto (bytes ou str) da requisição.

    Raises:
        PayloadError: JSON malformado, tipo de topo diferente de objeto ou
            campo com tipo incompatível.
    """
    if isinstance(body, bytes):
        # bytes UTF-8 inválidos viram U+FFFD em vez de invalidar o payload
        body = body.decode("utf-8", "replace")
    try:
        return GitLabEvent.model_validate_json(body)
    except ValidationError as exc:
        raise PayloadError(str(exc)) from exc
