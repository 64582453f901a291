"""
Key Field Records

Plain integer views of the key types in a fixed field order. An external
serializer reads these records and hands them back to ``from_fields``,
which rebuilds the key and re-runs every construction-time check.
"""

from pydantic import BaseModel, Field


class PrivateKeyFields(BaseModel):
    """Field values of a private key.

    Field order: composite modulus, composite order, p, q, d,
    square modulus, square order, x.
    """

    model_config = {"frozen": True}

    composite_modulus: int = Field(..., gt=0, description="Modulus n = p * q")
    composite_order: int = Field(..., gt=0, description="Order of the composite group")
    p: int = Field(..., gt=1, description="First prime factor of n")
    q: int = Field(..., gt=1, description="Second prime factor of n")
    d: int = Field(..., description="Decryption exponent")
    square_modulus: int = Field(..., gt=0, description="Modulus of the square group")
    square_order: int = Field(..., gt=0, description="Order of the square group")
    x: int = Field(..., description="Decryption exponent of the square group")


class PublicKeyFields(BaseModel):
    """Field values of a public key.

    Field order: composite modulus, e, ab, au, ai, av, ao, t, su, si, sv,
    so, square modulus, g, y, z_plus_1.
    """

    model_config = {"frozen": True}

    composite_modulus: int = Field(..., gt=0, description="Modulus of the composite group")
    e: int = Field(..., description="Encryption and verification exponent")

    ab: int = Field(..., ge=0, description="Base for blinding")
    au: int = Field(..., ge=0, description="Base of the client's secret")
    ai: int = Field(..., ge=0, description="Base of the serial number")
    av: int = Field(..., ge=0, description="Base of the hashed identifier")
    ao: int = Field(..., ge=0, description="Base of the exposed arguments")

    t: int = Field(..., description="Challenge of the subgroup proof")
    su: int = Field(..., description="Response for au")
    si: int = Field(..., description="Response for ai")
    sv: int = Field(..., description="Response for av")
    so: int = Field(..., description="Response for ao")

    square_modulus: int = Field(..., gt=0, description="Modulus of the square group")
    g: int = Field(..., ge=0, description="Generator of the square group")
    y: int = Field(..., ge=0, description="Encryption element of the square group")
    z_plus_1: int = Field(..., ge=0, description="Encryption base of the square group")
