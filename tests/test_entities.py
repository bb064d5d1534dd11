"""Tests for the Contact value type."""

import pytest

from seedlist.domain import TRANSPORT_TCP, TRANSPORT_UTP, Contact


def test_equality_is_structural():
    a = Contact(TRANSPORT_TCP, "1.2.3.4", 8080)
    b = Contact(transport="tcp", host="1.2.3.4", port=8080)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Contact(TRANSPORT_UTP, "1.2.3.4", 8080)
    assert a != Contact(TRANSPORT_TCP, "1.2.3.4", 8081)


def test_transport_and_host_normalized():
    c = Contact(transport=" TCP ", host="  10.0.0.1 ", port=1)
    assert c.transport == "tcp"
    assert c.host == "10.0.0.1"
    assert Contact("utp", "[::1]", 5483).host == "::1"


def test_contact_is_immutable():
    c = Contact("tcp", "1.2.3.4", 80)
    with pytest.raises(AttributeError):
        c.port = 81


def test_invalid_values_raise():
    with pytest.raises(ValueError, match="transport"):
        Contact("udp", "1.2.3.4", 80)
    with pytest.raises(ValueError, match="host"):
        Contact("tcp", "   ", 80)
    with pytest.raises(ValueError, match="port"):
        Contact("tcp", "1.2.3.4", 65536)
    with pytest.raises(ValueError, match="port"):
        Contact("tcp", "1.2.3.4", -1)
    with pytest.raises(ValueError, match="port"):
        Contact("tcp", "1.2.3.4", True)


def test_str_and_parse():
    assert str(Contact("tcp", "1.2.3.4", 8080)) == "tcp://1.2.3.4:8080"
    assert str(Contact("utp", "::1", 5483)) == "utp://[::1]:5483"
    assert Contact.parse("utp://[::1]:5483") == Contact("utp", "::1", 5483)
    assert Contact.parse("1.2.3.4:80") == Contact("tcp", "1.2.3.4", 80)
    assert Contact.parse("tcp://peer.example.org:5483").host == "peer.example.org"


def test_parse_rejects_malformed():
    with pytest.raises(ValueError):
        Contact.parse("")
    with pytest.raises(ValueError):
        Contact.parse("tcp://1.2.3.4")
    with pytest.raises(ValueError):
        Contact.parse("tcp://1.2.3.4:http")
    with pytest.raises(ValueError, match="bracketed"):
        Contact.parse("tcp://::1:80")


def test_all_fields_required():
    with pytest.raises(TypeError):
        Contact(host="1.2.3.4", port=80)
    with pytest.raises(TypeError):
        Contact("tcp", "1.2.3.4")
