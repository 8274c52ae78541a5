"""Override types for ``/* @use <Type> */`` column annotations.

Installed by ``ddlbind init``. Each type is paired with a pydantic
``TypeAdapter`` so JSON payloads read from the database can be validated
before they are trusted::

    details = identities_adapter.validate_python(row["identities"])

Add project-specific types here; the generated bindings import them by
name from this module.
"""

from enum import StrEnum
from typing import Any, NotRequired, TypedDict

from pydantic import AnyUrl, TypeAdapter, constr

# Commonly used

ArbitraryObject = dict[str, Any]
arbitrary_object_adapter: TypeAdapter[ArbitraryObject] = TypeAdapter(ArbitraryObject)


# OIDC model instances


class OidcModelInstancePayload(TypedDict, total=False):
    userCode: str
    uid: str
    grantId: str


oidc_model_instance_payload_adapter = TypeAdapter(OidcModelInstancePayload)


class OidcClientMetadata(TypedDict):
    redirectUris: list[AnyUrl]
    postLogoutRedirectUris: list[AnyUrl]
    logoUri: NotRequired[str]


oidc_client_metadata_adapter = TypeAdapter(OidcClientMetadata)


class CustomClientMetadataKey(StrEnum):
    CorsAllowedOrigins = "corsAllowedOrigins"
    IdTokenTtl = "idTokenTtl"
    RefreshTokenTtl = "refreshTokenTtl"


class CustomClientMetadata(TypedDict, total=False):
    corsAllowedOrigins: list[AnyUrl]
    idTokenTtl: int
    refreshTokenTtl: int


custom_client_metadata_adapter = TypeAdapter(CustomClientMetadata)


# Users

RoleNames = list[str]
role_names_adapter: TypeAdapter[RoleNames] = TypeAdapter(RoleNames)


class Identity(TypedDict):
    userId: str
    details: NotRequired[dict[str, Any]]  # connector userinfo, schemaless


Identities = dict[str, Identity]
identities_adapter: TypeAdapter[Identities] = TypeAdapter(Identities)


# Sign-in experience

HexColor = constr(pattern=r"^#[0-9A-Fa-f]{6}$")


class Color(TypedDict):
    primaryColor: HexColor  # type: ignore[valid-type]
    isDarkModeEnabled: bool
    darkPrimaryColor: HexColor  # type: ignore[valid-type]


color_adapter = TypeAdapter(Color)


__all__ = [
    "ArbitraryObject",
    "Color",
    "CustomClientMetadata",
    "CustomClientMetadataKey",
    "HexColor",
    "Identities",
    "Identity",
    "OidcClientMetadata",
    "OidcModelInstancePayload",
    "RoleNames",
    "arbitrary_object_adapter",
    "color_adapter",
    "custom_client_metadata_adapter",
    "identities_adapter",
    "oidc_client_metadata_adapter",
    "oidc_model_instance_payload_adapter",
    "role_names_adapter",
]
