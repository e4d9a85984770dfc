"""Pydantic field types for the address and identity types.

Each type validates from text with the domain parser and serializes back
to its canonical text, so a dumped model validates to an equal model.
"""

from __future__ import annotations

from ipaddress import IPv4Address
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from homelab.domain.hardware_address import HardwareAddress
from homelab.domain.host import Host, coerce_ipv4
from homelab.domain.wol import WolPassword

Ipv4Field = Annotated[
    IPv4Address,
    PlainValidator(coerce_ipv4),
    PlainSerializer(str, return_type=str),
]

MacField = Annotated[
    HardwareAddress,
    PlainValidator(HardwareAddress.coerce),
    PlainSerializer(str, return_type=str),
]

HostField = Annotated[
    Host,
    PlainValidator(Host.coerce),
    PlainSerializer(str, return_type=str),
]

WolPasswordField = Annotated[
    WolPassword,
    PlainValidator(WolPassword.coerce),
    PlainSerializer(str, return_type=str),
]
