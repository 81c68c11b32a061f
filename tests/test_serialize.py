# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii

from pyasn1.codec.der import decoder
from pyasn1.error import PyAsn1Error
import pytest

import binxgcd
import binxgcd.serialize as bser

triples = [
    (6, 2, -5),
    (1, -16, 21),
    (0, 0, 1),
    (2**521 - 1, -(2**300) + 7, 3**200),
]


@pytest.mark.parametrize("triple", triples)
def test_der_layout(triple):
    rec, rest = decoder.decode(bser.to_der(triple), asn1Spec=bser.BezoutRecord())
    assert rest == b""
    assert int(rec["gcd"]) == triple[0]
    assert int(rec["x"]) == triple[1]
    assert int(rec["y"]) == triple[2]


def test_known_der_encoding():
    # SEQUENCE { INTEGER 6, INTEGER 2, INTEGER -5 }
    assert bser.to_der((6, 2, -5)) == bytes.fromhex("30090201060201020201fb")


@pytest.mark.parametrize("triple", triples)
def test_encode_decode(triple):
    res = binxgcd.decode_triple(binxgcd.encode_triple(triple))
    assert isinstance(res, binxgcd.BezoutTriple)
    assert res == triple


def test_decode_accepts_str():
    payload = binxgcd.encode_triple(binxgcd.extended_gcd(48, 18)).decode("ascii")
    assert binxgcd.decode_triple(payload) == (6, 2, -5)


@pytest.mark.parametrize("payload", [b"not base64!", b"AgEG", base64.b64encode(b"\x30\x03\x02\x01")])
def test_decode_validates(payload):
    with pytest.raises(ValueError):
        binxgcd.decode_triple(payload)


def test_decode_trailing_data():
    payload = base64.b64encode(bser.to_der((6, 2, -5)) + b"\x00")
    with pytest.raises(ValueError, match="trailing data"):
        binxgcd.decode_triple(payload)


def test_decode_wraps_asn1_errors(mocker):
    mocker.patch("binxgcd.serialize.decoder.decode", side_effect=PyAsn1Error())
    with pytest.raises(ValueError, match="Malformed"):
        bser.from_der(bser.to_der((6, 2, -5)))


def test_decode_warns_negative_gcd():
    with pytest.warns(RuntimeWarning):
        res = bser.from_der(bser.to_der((-6, -2, 5)))
    assert res == (-6, -2, 5)


@pytest.mark.parametrize("triple", triples)
def test_export_import(triple, tmp_path):
    pld = tmp_path / "triple.pem"
    binxgcd.export_triple(pld, triple)
    with open(pld, "r", encoding="ascii") as fi:
        lines = fi.read().splitlines()
    assert lines[0] == bser.PEM_HEADER
    assert lines[-1] == bser.PEM_FOOTER
    assert all(len(line) <= 64 for line in lines[1:-1])
    assert binxgcd.import_triple(pld) == triple


@pytest.mark.parametrize("payload", [b"", b"Quick!", b"A" * 64, b"\x00\xff" * 100])
def test_pem_read_write(payload, tmp_path):
    pld = tmp_path / "testpem.pem"
    bser.write_pem(pld, payload)
    assert bser.read_pem(pld) == payload


def test_pem_read_validates_header(tmp_path):
    pld = tmp_path / "testpem.pem"
    with open(pld, "w", encoding="ascii") as fi:
        fi.write("-----BEGIN RSA PUBLIC KEY-----\n")
        fi.write("MAkCAQYCAQICAfs=\n")
        fi.write(bser.PEM_FOOTER + "\n")
    with pytest.raises(IOError):
        bser.read_pem(pld)


def test_pem_read_validates_end(tmp_path):
    pld = tmp_path / "testpem.pem"
    with open(pld, "w", encoding="ascii") as fi:
        fi.write(bser.PEM_HEADER + "\n")
        fi.write("MAkCAQYCAQICAfs=\n")
        fi.write("\n" * 20)
        fi.write(bser.PEM_FOOTER + "\n")
    with pytest.raises(IOError):
        bser.read_pem(pld)


def test_pem_read_nonbase64(tmp_path):
    pld = tmp_path / "testpem.pem"
    with open(pld, "w", encoding="ascii") as fi:
        fi.write(bser.PEM_HEADER + "\n")
        fi.write("Six, two\n")
        fi.write("and minus five!\n")
        fi.write(bser.PEM_FOOTER + "\n")
    with pytest.raises(binascii.Error):
        bser.read_pem(pld)


@pytest.mark.parametrize("body", ["MAkC*AQYCAQICAfs=", "MAkCAQYC AQICAfs=", "MAkCAQYCAQICAfs=!"])
def test_pem_read_rejects_stray_characters(body, tmp_path):
    pld = tmp_path / "testpem.pem"
    with open(pld, "w", encoding="ascii") as fi:
        fi.write(bser.PEM_HEADER + "\n")
        fi.write(body + "\n")
        fi.write(bser.PEM_FOOTER + "\n")
    with pytest.raises(binascii.Error):
        bser.read_pem(pld)


def test_import_triple_errors(tmp_path):
    pld = tmp_path / "triple.pem"
    with open(pld, "w", encoding="ascii") as fi:
        fi.write(bser.PEM_HEADER + "\n")
        fi.write("MAkCAQYCAQICAfs=\n")
    with pytest.raises(IOError):
        binxgcd.import_triple(pld)
    bser.write_pem(pld, b"\x02\x01\x06")
    with pytest.raises(ValueError):
        binxgcd.import_triple(pld)
