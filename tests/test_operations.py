import unittest

from ecarith import (
    CURVES,
    EllipticCurveError,
    InvalidParameterError,
    NoSquareRootError,
    P256,
    SECP256K1,
    derive_y,
    ec_add,
    ec_inv,
    ec_mul,
    ec_sub,
    is_on_curve,
    to_affine,
    to_hex,
)
from ecarith.field import is_quadratic_residue

P = SECP256K1.pp
G = (SECP256K1.gx, SECP256K1.gy)

G2 = (
    0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
    0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
)
G3 = (
    0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
    0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672,
)


class ToAffineTests(unittest.TestCase):
    def test_identity_embedding(self):
        for curve in CURVES.values():
            self.assertEqual(to_affine(curve.gx, curve.gy, 1, curve.pp), (curve.gx, curve.gy))

    def test_scaled_coordinates(self):
        for z in (2, 5, 0xDEADBEEF, P - 1):
            x = (G[0] * z * z) % P
            y = (G[1] * z * z * z) % P
            self.assertEqual(to_affine(x, y, z, P), G)

    def test_infinity(self):
        self.assertEqual(to_affine(1, 1, 0, P), (0, 0))
        self.assertEqual(to_affine(G[0], G[1], P, P), (0, 0))


class IsOnCurveTests(unittest.TestCase):
    def test_generators(self):
        for curve in CURVES.values():
            self.assertTrue(is_on_curve(curve.gx, curve.gy, curve.aa, curve.bb, curve.pp))

    def test_off_curve(self):
        self.assertFalse(is_on_curve(G[0], G[1] + 1, 0, 7, P))
        self.assertFalse(is_on_curve(0, 0, 0, 7, P))
        self.assertFalse(is_on_curve(1, 1, 0, 7, P))

    def test_out_of_range(self):
        self.assertFalse(is_on_curve(G[0] + P, G[1], 0, 7, P))
        self.assertFalse(is_on_curve(G[0], G[1] + P, 0, 7, P))
        self.assertFalse(is_on_curve(-1, G[1], 0, 7, P))

    def test_bad_modulus_is_false(self):
        self.assertFalse(is_on_curve(1, 1, 0, 7, 0))


class DeriveYTests(unittest.TestCase):
    def test_generator(self):
        self.assertEqual(derive_y(0x02, G[0], 0, 7, P), G[1])
        self.assertEqual(derive_y(0x03, G[0], 0, 7, P), P - G[1])
        self.assertEqual(derive_y(0, G[0], 0, 7, P), G[1])
        self.assertEqual(derive_y(1, G[0], 0, 7, P), P - G[1])

    def test_parity_matches_prefix(self):
        for curve in CURVES.values():
            for k in (1, 2, 3, 12345):
                x, y = ec_mul(k, curve.gx, curve.gy, curve.aa, curve.pp)
                self.assertEqual(derive_y(y % 2, x, curve.aa, curve.bb, curve.pp), y)
                self.assertEqual(derive_y(2 + y % 2, x, curve.aa, curve.bb, curve.pp), y)

    def test_non_residue(self):
        x = 1
        while is_quadratic_residue(x ** 3 + 7, P):
            x += 1
        with self.assertRaises(NoSquareRootError):
            derive_y(2, x, 0, 7, P)

    def test_composite_modulus(self):
        # y^2 = x^3 + 1 over Z/65: 27 + 1 = 28 is 3 mod 5, so not a square
        with self.assertRaises(EllipticCurveError):
            derive_y(2, 3, 0, 1, 65)

    def test_x_out_of_range(self):
        with self.assertRaises(InvalidParameterError):
            derive_y(2, P, 0, 7, P)


class EcInvTests(unittest.TestCase):
    def test_negation(self):
        self.assertEqual(ec_inv(G[0], G[1], P), (G[0], P - G[1]))

    def test_involution(self):
        for curve in CURVES.values():
            x, y = ec_inv(curve.gx, curve.gy, curve.pp)
            self.assertEqual(ec_inv(x, y, curve.pp), (curve.gx, curve.gy))

    def test_zero_y_and_infinity(self):
        self.assertEqual(ec_inv(5, 0, P), (5, 0))
        self.assertEqual(ec_inv(0, 0, P), (0, 0))


class EcAddTests(unittest.TestCase):
    def test_doubling(self):
        self.assertEqual(ec_add(*G, *G, 0, P), G2)

    def test_general_addition(self):
        self.assertEqual(ec_add(*G, *G2, 0, P), G3)
        self.assertEqual(ec_add(*G2, *G, 0, P), G3)

    def test_infinity_is_identity(self):
        self.assertEqual(ec_add(*G, 0, 0, 0, P), G)
        self.assertEqual(ec_add(0, 0, *G, 0, P), G)
        self.assertEqual(ec_add(0, 0, 0, 0, 0, P), (0, 0))

    def test_inverse_points(self):
        self.assertEqual(ec_add(*G, G[0], P - G[1], 0, P), (0, 0))

    def test_closure(self):
        for curve in CURVES.values():
            p1 = ec_mul(5, curve.gx, curve.gy, curve.aa, curve.pp)
            p2 = ec_mul(11, curve.gx, curve.gy, curve.aa, curve.pp)
            x, y = ec_add(*p1, *p2, curve.aa, curve.pp)
            self.assertTrue(is_on_curve(x, y, curve.aa, curve.bb, curve.pp))
            self.assertEqual((x, y), ec_mul(16, curve.gx, curve.gy, curve.aa, curve.pp))

    def test_out_of_range_coordinates(self):
        with self.assertRaises(InvalidParameterError):
            ec_add(G[0] + P, G[1], *G, 0, P)

    def test_invalid_modulus(self):
        with self.assertRaises(InvalidParameterError):
            ec_add(*G, *G, 0, 0)
        with self.assertRaises(InvalidParameterError):
            ec_add(1, 1, 1, 1, 0, 16)


class EcSubTests(unittest.TestCase):
    def test_self_subtraction(self):
        for curve in CURVES.values():
            self.assertEqual(
                ec_sub(curve.gx, curve.gy, curve.gx, curve.gy, curve.aa, curve.pp), (0, 0)
            )

    def test_subtraction(self):
        self.assertEqual(ec_sub(*G3, *G, 0, P), G2)
        self.assertEqual(ec_sub(*G3, *G2, 0, P), G)
        self.assertEqual(ec_sub(*G, *G2, 0, P), (G[0], P - G[1]))

    def test_infinity(self):
        self.assertEqual(ec_sub(*G, 0, 0, 0, P), G)
        self.assertEqual(ec_sub(0, 0, *G, 0, P), (G[0], P - G[1]))


class EcMulTests(unittest.TestCase):
    def test_boundaries(self):
        for curve in CURVES.values():
            g = (curve.gx, curve.gy)
            self.assertEqual(ec_mul(0, *g, curve.aa, curve.pp), (0, 0))
            self.assertEqual(ec_mul(1, *g, curve.aa, curve.pp), g)

    def test_known_multiples(self):
        self.assertEqual(ec_mul(2, *G, 0, P), G2)
        self.assertEqual(ec_mul(3, *G, 0, P), G3)

    def test_order(self):
        for curve in CURVES.values():
            g = (curve.gx, curve.gy)
            self.assertEqual(ec_mul(curve.nn, *g, curve.aa, curve.pp), (0, 0))
            self.assertEqual(
                ec_mul(curve.nn - 1, *g, curve.aa, curve.pp), ec_inv(*g, curve.pp)
            )

    def test_scalar_not_reduced(self):
        for curve in (SECP256K1, P256):
            g = (curve.gx, curve.gy)
            self.assertEqual(ec_mul(curve.nn + 2, *g, curve.aa, curve.pp), ec_add(*g, *g, curve.aa, curve.pp))

    def test_zero_identity_sum(self):
        zero = ec_mul(0, *G, 0, P)
        self.assertEqual(ec_add(*G, *zero, 0, P), G)

    def test_infinity_input(self):
        self.assertEqual(ec_mul(7, 0, 0, 0, P), (0, 0))

    def test_negative_scalar(self):
        with self.assertRaises(InvalidParameterError):
            ec_mul(-1, *G, 0, P)

    def test_p256_distributive(self):
        g = (P256.gx, P256.gy)
        a = ec_mul(0x1234, *g, P256.aa, P256.pp)
        b = ec_mul(0x5678, *g, P256.aa, P256.pp)
        self.assertEqual(ec_add(*a, *b, P256.aa, P256.pp), ec_mul(0x1234 + 0x5678, *g, P256.aa, P256.pp))


class ToHexTests(unittest.TestCase):
    def test_minimal_width(self):
        self.assertEqual(to_hex(0), "0")
        self.assertEqual(to_hex(255), "ff")
        self.assertEqual(to_hex(0x0ABC), "abc")
        self.assertEqual(to_hex(G2[1]), "1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a")

    def test_negative(self):
        with self.assertRaises(InvalidParameterError):
            to_hex(-1)


if __name__ == "__main__":
    unittest.main()
