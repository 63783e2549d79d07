import logging
from typing import Annotated, Any, Literal, Union
from pydantic import BaseModel, Field, field_validator


class MiddlewareConfigModel(BaseModel):
    type: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {}


class SimpleMiddlewareModel(MiddlewareConfigModel):
    """Middleware that take no configuration"""
    type: Literal[
            "parse_text",
            "parse_json",
            "request_info",
    ]


class MethodMiddlewareModel(MiddlewareConfigModel):
    type: Literal["method"] = "method"
    verb: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"verb": self.verb}


class HeaderMiddlewareModel(MiddlewareConfigModel):
    type: Literal["header"] = "header"
    name: str
    value: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


class AuthMiddlewareModel(MiddlewareConfigModel):
    type: Literal["auth"] = "auth"
    value: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"value": self.value}


class AcceptMiddlewareModel(MiddlewareConfigModel):
    type: Literal["accept"] = "accept"
    content_type: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"content_type": self.content_type}


class BaseUrlMiddlewareModel(MiddlewareConfigModel):
    type: Literal["base"] = "base"
    base_url: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"base_url": self.base_url}


class QueryMiddlewareModel(MiddlewareConfigModel):
    type: Literal["query"] = "query"
    query: dict[str, Any] | str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"query": self.query}


class BodyMiddlewareModel(MiddlewareConfigModel):
    type: Literal["body"] = "body"
    content: str
    content_type: str = "text/plain"

    def to_runtime_args(self) -> dict[str, Any]:
        return {"content": self.content, "content_type": self.content_type}


class JsonMiddlewareModel(MiddlewareConfigModel):
    type: Literal["json"] = "json"
    value: Any

    def to_runtime_args(self) -> dict[str, Any]:
        return {"value": self.value}


class ParamsMiddlewareModel(MiddlewareConfigModel):
    type: Literal["params"] = "params"
    params: dict[str, Any] | str
    strict: bool = False

    def to_runtime_args(self) -> dict[str, Any]:
        return {"params": self.params, "strict": self.strict}


class LoggingMiddlewareModel(MiddlewareConfigModel):
    type: Literal["logging"] = "logging"
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"{value} is not a recognized logging level")
        return level

    def to_runtime_args(self) -> dict[str, Any]:
        return {"level": logging.getLevelName(self.level)}


MiddlewareConfig = Annotated[
    Union[
        SimpleMiddlewareModel,
        MethodMiddlewareModel,
        HeaderMiddlewareModel,
        AuthMiddlewareModel,
        AcceptMiddlewareModel,
        BaseUrlMiddlewareModel,
        QueryMiddlewareModel,
        BodyMiddlewareModel,
        JsonMiddlewareModel,
        ParamsMiddlewareModel,
        LoggingMiddlewareModel,
    ],
    Field(discriminator="type"),
]
