"""Marshalling of Bézout triples to DER, base64 and PEM.

A triple is wrapped in a small ASN.1 SEQUENCE of three INTEGERs so it can be moved around, pasted and verified
later on. DER keeps arbitrarily large (and negative) coefficients intact.

Typical usage example:

    export_triple("result.pem", extended_gcd(48, 18))
    g, x, y = import_triple("result.pem")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii
import pathlib
import warnings

from pyasn1 import error
from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.codec.native import encoder as localize
from pyasn1.type import namedtype
from pyasn1.type import univ

from binxgcd.xgcd import BezoutTriple

PEM_HEADER = "-----BEGIN BEZOUT TRIPLE-----"
PEM_FOOTER = "-----END BEZOUT TRIPLE-----"


class BezoutRecord(univ.Sequence):
    """ASN.1 wrapper for (gcd, x, y)."""
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("gcd", univ.Integer()),
        namedtype.NamedType("x", univ.Integer()),
        namedtype.NamedType("y", univ.Integer()),
    )


def to_der(triple: tuple[int, int, int]) -> bytes:
    """DER-encodes a Bézout triple.

    Args:
        triple: The (gcd, x, y) to encode.

    Returns:
        The DER encoding of the BezoutRecord.
    """
    g, x, y = triple
    rec = BezoutRecord()
    rec["gcd"] = g
    rec["x"] = x
    rec["y"] = y
    return encoder.encode(rec)


def from_der(payload: bytes) -> BezoutTriple:
    """Decodes a DER-encoded Bézout triple.

    Args:
        payload: The DER encoding of a BezoutRecord.

    Returns:
        The decoded BezoutTriple.

    Raises:
        ValueError: If the payload is not a single well-formed BezoutRecord.
    """
    try:
        rec, rest = decoder.decode(payload, asn1Spec=BezoutRecord())
    except error.PyAsn1Error as exc:
        raise ValueError("Malformed Bezout triple.") from exc
    if rest:
        raise ValueError("Unexpected trailing data after Bezout triple.")
    pyrec = localize.encode(rec)
    triple = BezoutTriple(pyrec["gcd"], pyrec["x"], pyrec["y"])
    if triple.gcd < 0:
        warnings.warn("Decoded triple carries a negative GCD, it cannot come from extended_gcd.", RuntimeWarning)
    return triple


def encode_triple(triple: tuple[int, int, int]) -> bytes:
    """Base64 encodes the DER representation of a triple."""
    return base64.b64encode(to_der(triple))


def decode_triple(data: bytes | str) -> BezoutTriple:
    """Decodes a base64 DER payload produced by `encode_triple`.

    Args:
        data: The base64 payload.

    Returns:
        The decoded BezoutTriple.

    Raises:
        ValueError: If the payload is not valid base64 or not a valid BezoutRecord.
    """
    try:
        payload = base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ValueError("Bezout triple payload is not valid base64.") from exc
    return from_der(payload)


def read_pem(file: pathlib.Path) -> bytes:
    """Reads a PEM encoded Bézout triple file.

    Args:
        file: The file to read.

    Returns:
        The decoded PEM body.

    Raises:
        IOError: If the file has invalid PEM framing.
        binascii.Error: If the body holds anything but base64.
    """
    with open(file, "r", encoding="ascii") as f:
        headline = f.readline().strip()
        if headline != PEM_HEADER:
            raise IOError(f"PEM Headline {headline} does not match {PEM_HEADER}")
        parcel = []
        while True:
            line = f.readline().strip()
            if not line:
                raise IOError(f"PEM File does not contain footer: {PEM_FOOTER}")
            if line == PEM_FOOTER:
                break
            parcel.append(line)
    return base64.b64decode("".join(parcel), validate=True)


def write_pem(file: pathlib.Path, data: bytes) -> None:
    """Writes a PEM encoded Bézout triple file.

    Args:
        file: The file to write.
        data: The data to write.
    """
    payload = base64.b64encode(data).decode()
    with open(file, "w", encoding="ascii") as f:
        f.write(PEM_HEADER + "\n")
        res = "\n".join(payload[i:i + 64] for i in range(0, len(payload), 64))
        res += "\n" if res else ""
        f.write(res)
        f.write(PEM_FOOTER + "\n")


def export_triple(file: pathlib.Path, triple: tuple[int, int, int]) -> None:
    write_pem(file, to_der(triple))


def import_triple(file: pathlib.Path) -> BezoutTriple:
    """Imports a triple previously written by `export_triple`.

    Args:
        file: The PEM file to import.

    Returns:
        The imported BezoutTriple.

    Raises:
        IOError: If the file has invalid PEM framing.
        binascii.Error: If the PEM body is not valid base64.
        ValueError: If the body is not a valid BezoutRecord.
    """
    return from_der(read_pem(file))
