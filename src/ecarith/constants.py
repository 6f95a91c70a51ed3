"""
Domain parameters of the short Weierstrass curves shipped as presets.

Each curve y^2 = x^3 + a*x + b is defined over a prime field of order P, with
a base point G = (G_x, G_y) of prime order N. Values are taken from SEC 2
(the Koblitz "k1" curves) and FIPS 186 (the NIST P curves).
"""

# secp256k1

SECP256K1_P: int = 2**256 - 2**32 - 977
SECP256K1_A: int = 0
SECP256K1_B: int = 7
SECP256K1_G_x: int = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
SECP256K1_G_y: int = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
SECP256K1_N: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# secp224k1

SECP224K1_P: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFE56D
SECP224K1_A: int = 0
SECP224K1_B: int = 5
SECP224K1_G_x: int = 0xA1455B334DF099DF30FC28A169A467E9E47075A90F7E650EB6B7A45C
SECP224K1_G_y: int = 0x7E089FED7FBA344282CAFBD6F7E319F7C0B0BD59E2CA4BDB556D61A5
SECP224K1_N: int = 0x010000000000000000000000000001DCE8D2EC6184CAF0A971769FB1F7

# secp192k1

SECP192K1_P: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFEE37
SECP192K1_A: int = 0
SECP192K1_B: int = 3
SECP192K1_G_x: int = 0xDB4FF10EC057E9AE26B07D0280B7F4341DA5D1B1EAE06C7D
SECP192K1_G_y: int = 0x9B2F2F6D9C5628A7844163D015BE86344082AA88D95E2F9D
SECP192K1_N: int = 0xFFFFFFFFFFFFFFFFFFFFFFFE26F2FC170F69466A74DEFD8D

# P256 (secp256r1, prime256v1)

P256_P: int = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
P256_A: int = P256_P - 3
P256_B: int = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
P256_G_x: int = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296
P256_G_y: int = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5
P256_N: int = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

# P224 (secp224r1)

P224_P: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF000000000000000000000001
P224_A: int = P224_P - 3
P224_B: int = 0xB4050A850C04B3ABF54132565044B0B7D7BFD8BA270B39432355FFB4
P224_G_x: int = 0xB70E0CBD6BB4BF7F321390B94A03C1D356C21122343280D6115C1D21
P224_G_y: int = 0xBD376388B5F723FB4C22DFE6CD4375A05A07476444D5819985007E34
P224_N: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFF16A2E0B8F03E13DD29455C5C2A3D

# P192 (secp192r1, prime192v1)

P192_P: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFF
P192_A: int = P192_P - 3
P192_B: int = 0x64210519E59C80E70FA7E9AB72243049FEB8DEECC146B9B1
P192_G_x: int = 0x188DA80EB03090F67CBF20EB43A18800F4FF0AFD82FF1012
P192_G_y: int = 0x07192B95FFC8DA78631011ED6B24CDD573F977A11E794811
P192_N: int = 0xFFFFFFFFFFFFFFFFFFFFFFFF99DEF836146BC9B1B4D22831
