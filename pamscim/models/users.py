"""SCIM User resource (core 2.0 plus enterprise, PAM and CyberArk extensions)."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .shared import ListResponse, Reference, ScimModel, ScimResource

USER_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:User"
ENTERPRISE_USER_SCHEMA = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
CYBERARK_USER_SCHEMA = "urn:ietf:params:scim:schemas:cyberark:1.0:User"
LINKED_OBJECT_SCHEMA = "urn:ietf:params:scim:schemas:pam:1.0:LinkedObject"
CUSTOM_EXTENSION_SCHEMA = "urn:scim:schemas:extension:custom:2.0"


class Name(ScimModel):
    formatted: Optional[str] = None
    givenName: Optional[str] = None
    familyName: Optional[str] = None
    middleName: Optional[str] = None
    honorificPrefix: Optional[str] = None
    honorificSuffix: Optional[str] = None


class MultiValuedAttribute(Reference):
    """Shape shared by emails, phone numbers, ims, photos, roles and certificates."""

    type: Optional[str] = None
    primary: Optional[bool] = None


class Address(ScimModel):
    formatted: Optional[str] = None
    streetAddress: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postalCode: Optional[str] = None
    country: Optional[str] = None


class Manager(ScimModel):
    value: Optional[str] = None
    displayName: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")


class EnterpriseUser(ScimModel):
    employeeNumber: Optional[str] = None
    costCenter: Optional[str] = None
    organization: Optional[str] = None
    division: Optional[str] = None
    department: Optional[str] = None
    manager: Optional[List[Manager]] = None


class CyberArkUser(ScimModel):
    authenticationMethod: Optional[List[str]] = None
    expiryDate: Optional[int] = None
    changePassOnNextLogon: Optional[bool] = None
    passwordNeverExpires: Optional[bool] = None
    distinguishedName: Optional[str] = None
    directoryType: Optional[str] = None


class LinkedObject(ScimModel):
    source: Optional[str] = None
    nativeIdentifier: Optional[str] = None


class User(ScimResource):
    userName: Optional[str] = None
    name: Optional[Name] = None
    displayName: Optional[str] = None
    nickName: Optional[str] = None
    profileUrl: Optional[str] = None
    title: Optional[str] = None
    userType: Optional[str] = None
    preferredLanguage: Optional[str] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    active: Optional[bool] = None
    # write-only; the API never returns it
    password: Optional[str] = None
    emails: Optional[List[MultiValuedAttribute]] = None
    phoneNumbers: Optional[List[MultiValuedAttribute]] = None
    ims: Optional[List[MultiValuedAttribute]] = None
    photos: Optional[List[MultiValuedAttribute]] = None
    addresses: Optional[List[Address]] = None
    groups: Optional[List[MultiValuedAttribute]] = None
    entitlements: Optional[List[str]] = None
    roles: Optional[List[MultiValuedAttribute]] = None
    x509Certificates: Optional[List[MultiValuedAttribute]] = None
    linkedObject: Optional[LinkedObject] = Field(None, alias=LINKED_OBJECT_SCHEMA)
    enterpriseUser: Optional[EnterpriseUser] = Field(None, alias=ENTERPRISE_USER_SCHEMA)
    cyberarkUser: Optional[CyberArkUser] = Field(None, alias=CYBERARK_USER_SCHEMA)
    customExtension: Optional[dict] = Field(None, alias=CUSTOM_EXTENSION_SCHEMA)


UserList = ListResponse[User]
