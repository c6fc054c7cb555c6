"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Transmissions endpoint.

Accepts a few payload conveniences on top of the raw API format:

- ``cc`` and ``bcc`` lists, folded into ``recipients`` with ``header_to``
  pointing at the first recipient (and a ``CC`` content header for cc).
- Shorthand addresses such as ``"jane@example.com"`` or
  ``"Jane Doe <jane@example.com>"`` wherever an address object is expected.
"""

from __future__ import annotations

import copy
import re
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

from sparkpost.exceptions import InvalidAddressError
from sparkpost.resources.base import ResourceBase, Result

if TYPE_CHECKING:
    from sparkpost.client import SparkPost

EMAIL_PATTERN = re.compile(r"^[^@\s<>\"]+@[^@\s<>\"]+\.[^@\s<>\"]+$")
NAMED_ADDRESS_PATTERN = re.compile(r'"?(.[^"]*)?"?\s*<(.+)>')

Address = Union[str, Dict[str, Any]]


def is_email(address: str) -> bool:
    return bool(EMAIL_PATTERN.match(address))


def to_address_object(address: Address) -> Dict[str, Any]:
    """Convert a shorthand address string into an address object.

    Address objects are returned as a copy, untouched.

    Raises:
        InvalidAddressError: If the string is neither an email nor ``Name <email>``.
    """
    if not isinstance(address, str):
        return dict(address)

    if is_email(address):
        return {"email": address}

    match = NAMED_ADDRESS_PATTERN.match(address)
    if match is None:
        raise InvalidAddressError(f"Invalid address format: {address}")

    formatted: Dict[str, Any] = {"email": match.group(2).strip()}
    name = (match.group(1) or "").strip()
    if name:
        formatted["name"] = name
    return formatted


def to_address_string(address: Address) -> str:
    """Render an address object as ``"Name" <email>`` or a bare email."""
    if isinstance(address, str):
        return address
    if address.get("name"):
        return f"\"{address['name']}\" <{address['email']}>"
    return address["email"]


class Transmission(ResourceBase):
    """Operations on ``/api/<version>/transmissions``."""

    def __init__(self, sparkpost: SparkPost) -> None:
        super().__init__(sparkpost, "transmissions")

    def post(
        self,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        """Send a transmission, expanding cc/bcc lists and shorthand addresses."""
        return super().post(self.format_payload(payload or {}), headers)

    def format_payload(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``payload`` in the API's native format."""
        formatted = copy.deepcopy(dict(payload))
        formatted = self._format_blind_carbon_copy(formatted)
        formatted = self._format_carbon_copy(formatted)
        formatted = self._format_shorthand_recipients(formatted)
        return formatted

    def _format_blind_carbon_copy(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if payload.get("bcc"):
            payload = self._add_list_to_recipients(payload, "bcc")
        payload.pop("bcc", None)
        return payload

    def _format_carbon_copy(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if payload.get("cc"):
            cc_addresses = [to_address_string(entry["address"]) for entry in payload["cc"]]
            content = payload.setdefault("content", {})
            content.setdefault("headers", {})["CC"] = ",".join(cc_addresses)
            payload = self._add_list_to_recipients(payload, "cc")
        payload.pop("cc", None)
        return payload

    def _format_shorthand_recipients(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        content = payload.get("content")
        if isinstance(content, dict) and "from" in content:
            content["from"] = to_address_object(content["from"])

        recipients = payload.get("recipients")
        # A stored recipient list is referenced as {"list_id": ...}
        if not isinstance(recipients, list):
            return payload

        for recipient in recipients:
            if isinstance(recipient, dict) and "address" in recipient:
                recipient["address"] = to_address_object(recipient["address"])
        return payload

    def _add_list_to_recipients(self, payload: Dict[str, Any], list_name: str) -> Dict[str, Any]:
        recipients = payload.setdefault("recipients", [])
        if not isinstance(recipients, list):
            raise InvalidAddressError(
                f"'{list_name}' requires inline 'recipients', not a stored recipient list"
            )
        if not recipients:
            raise InvalidAddressError(
                f"'{list_name}' requires at least one entry in 'recipients'"
            )
        original_address = to_address_string(recipients[0]["address"])

        for entry in payload[list_name]:
            recipient = dict(entry)
            recipient["address"] = to_address_object(recipient["address"])
            recipient["address"]["header_to"] = original_address
            recipients.append(recipient)
        return payload
