"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

XS = 'xmlns:xs="http://www.w3.org/2001/XMLSchema"'

CUSTOMER_V1 = f"""<?xml version="1.0" encoding="UTF-8"?>
<xs:schema {XS}>
  <xs:complexType name="CustomerType">
    <xs:sequence>
      <xs:element name="name" type="xs:string"/>
    </xs:sequence>
  </xs:complexType>
  <xs:complexType name="AddressType">
    <xs:sequence>
      <xs:element name="street" type="xs:string"/>
    </xs:sequence>
    <xs:attribute name="country" type="xs:string" default="USA"/>
  </xs:complexType>
</xs:schema>
"""

CUSTOMER_V2 = f"""<?xml version="1.0" encoding="UTF-8"?>
<xs:schema {XS}>
  <xs:complexType name="CustomerType">
    <xs:sequence>
      <xs:element name="firstName" type="xs:string"/>
      <xs:element name="lastName" type="xs:string"/>
    </xs:sequence>
  </xs:complexType>
  <xs:complexType name="AddressType">
    <xs:sequence>
      <xs:element name="street" type="xs:string"/>
    </xs:sequence>
    <xs:attribute name="country" type="xs:string" default="USA"/>
  </xs:complexType>
  <xs:complexType name="OrderType">
    <xs:sequence>
      <xs:element name="id" type="xs:int"/>
    </xs:sequence>
  </xs:complexType>
</xs:schema>
"""


@pytest.fixture
def write_schema(tmp_path):
    """Return a helper writing schema text to a file under tmp_path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def first_schema(write_schema):
    """First version of the customer schema."""
    return write_schema("first.xsd", CUSTOMER_V1)


@pytest.fixture
def second_schema(write_schema):
    """Second version: CustomerType reshaped, OrderType added."""
    return write_schema("second.xsd", CUSTOMER_V2)


@pytest.fixture
def schema_folders(tmp_path, write_schema):
    """Two schema folders with a two-entry listing file in the second one."""
    old = tmp_path / "old"
    new = tmp_path / "new"
    write_schema("old/customer.xsd", CUSTOMER_V1)
    write_schema("new/customer.xsd", CUSTOMER_V2)
    write_schema("old/address.xsd", CUSTOMER_V1)
    write_schema("new/address.xsd", CUSTOMER_V1)
    (new / "schema.lst").write_text("customer.xsd\naddress.xsd\n")
    return old, new
