# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
pydantic-backed JSON codec for resource models.

A model shape is anything pydantic can build a TypeAdapter for: stdlib or
pydantic dataclasses, BaseModels, TypedDicts, dicts. The CodecSettings alias
generator names the properties of stdlib dataclasses; BaseModels keep their own
`model_config`. A field can pin its JSON name with `Field(alias=...)`.

Enum members are written as text chosen by EnumEncoding and read back from
their value, name or camelCase name.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Optional, TypeVar, get_origin

from pydantic import AliasChoices, AliasGenerator, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel, to_pascal, to_snake
from pydantic_core import PydanticSerializationError, SchemaSerializer, SchemaValidator, core_schema

from .errors import CodecError

T = TypeVar("T")


class NamingConvention(str, Enum):
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"
    PRESERVE = "preserve"


class EnumEncoding(str, Enum):
    CAMEL_CASE_STRING = "camel_case_string"
    NAME = "name"
    VALUE = "value"


def _to_kebab(name: str) -> str:
    return to_snake(name).replace("_", "-")


_RENAMERS: dict[NamingConvention, Callable[[str], str]] = {
    NamingConvention.CAMEL: to_camel,
    NamingConvention.PASCAL: to_pascal,
    NamingConvention.SNAKE: to_snake,
    NamingConvention.KEBAB: _to_kebab,
}


@dataclass(frozen=True)
class CodecSettings:
    """Rules for JSON property naming, null omission and enum text."""

    naming: NamingConvention = NamingConvention.CAMEL
    omit_none: bool = True
    enum_encoding: EnumEncoding = EnumEncoding.CAMEL_CASE_STRING

    def pydantic_config(self) -> ConfigDict:
        """ConfigDict applied to shapes that do not carry their own config."""
        rename = _RENAMERS.get(self.naming)
        if rename is None:
            return ConfigDict()
        return ConfigDict(
            alias_generator=AliasGenerator(
                validation_alias=lambda name: AliasChoices(rename(name), name),
                serialization_alias=rename,
            ),
        )


def enum_text(member: Enum, encoding: EnumEncoding) -> Any:
    if encoding is EnumEncoding.VALUE:
        return member.value
    if encoding is EnumEncoding.NAME:
        return member.name
    return to_camel(member.name.lower())


def enum_from_text(enum_cls: type[Enum], value: Any) -> Enum | None:
    """Match a member by name or camelCase name, ignoring case."""
    if not isinstance(value, str):
        return None
    wanted = value.lower()
    for member in enum_cls:
        if wanted in (member.name.lower(), to_camel(member.name.lower()).lower()):
            return member
    return None


def _with_enum_text(node: Any, encoding: EnumEncoding) -> Any:
    """Copy a core schema, hooking enum text into every enum node."""
    if isinstance(node, list):
        return [_with_enum_text(item, encoding) for item in node]
    if not isinstance(node, dict):
        return node
    copied = {key: _with_enum_text(value, encoding) for key, value in node.items()}
    if copied.get("type") == "enum" and isinstance(copied.get("cls"), type):
        if copied.get("missing") is None:
            copied["missing"] = functools.partial(enum_from_text, copied["cls"])
        if encoding is not EnumEncoding.VALUE:
            copied["serialization"] = core_schema.plain_serializer_function_ser_schema(
                functools.partial(enum_text, encoding=encoding),
                info_arg=False,
            )
    return copied


@dataclass(frozen=True)
class _Compiled:
    validator: SchemaValidator
    serializer: SchemaSerializer


class JsonCodec:
    """Encode models to JSON text and decode JSON text into model shapes."""

    def __init__(self, settings: CodecSettings | None = None):
        self.settings = settings or CodecSettings()
        self._config = self.settings.pydantic_config()
        self._compiled: dict[Any, _Compiled] = {}

    def _compile(self, shape: Any) -> _Compiled:
        compiled = self._compiled.get(shape)
        if compiled is None:
            # Wrapping keeps TypeAdapter from refusing config for dataclass shapes.
            adapter = TypeAdapter(shape if _is_wrapped(shape) else Optional[shape], config=self._config)
            schema = _with_enum_text(adapter.core_schema, self.settings.enum_encoding)
            compiled = _Compiled(SchemaValidator(schema), SchemaSerializer(schema))
            self._compiled[shape] = compiled
        return compiled

    def encode(self, obj: Any, shape: Any) -> str:
        try:
            raw = self._compile(shape).serializer.to_json(obj, by_alias=True, exclude_none=self.settings.omit_none)
        except PydanticSerializationError as exc:
            raise CodecError(f"Cannot encode {type(obj).__name__} as JSON: {exc}") from exc
        return raw.decode("utf-8")

    def decode(self, text: str | None, shape: type[T] | Any) -> T | None:
        if not text or not text.strip():
            return self.default(shape)
        return self._validate(text, shape)

    def decode_list(self, text: str | None, shape: type[T] | Any) -> list[T]:
        if not text or not text.strip():
            return []
        return self._validate(text, list[shape])

    def default(self, shape: Any) -> Any:
        """
        Return the "empty" value of a shape, used for empty response bodies.

        Shapes that validate from `{}` (all fields defaulted, dicts) yield that
        value; anything else yields None.
        """
        try:
            return self._compile(shape).validator.validate_python({})
        except ValidationError:
            return None

    def _validate(self, text: str, shape: Any) -> Any:
        try:
            return self._compile(shape).validator.validate_json(text)
        except ValidationError as exc:
            raise CodecError(f"Response body does not match {_shape_name(shape)}: {exc}") from exc


def _is_wrapped(shape: Any) -> bool:
    """True for generic aliases such as list[Item], which accept config as they are."""
    return get_origin(shape) not in (None, Annotated)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or str(shape)


__all__ = [
    "CodecSettings",
    "EnumEncoding",
    "JsonCodec",
    "NamingConvention",
    "enum_from_text",
    "enum_text",
]
