from unittest import TestCase
import unittest

import numpy as np

from src.optarith.domain._errors import ShapeMismatchError
from src.optarith.infrastructure._complex import Complex
from src.optarith.infrastructure.arithmetic import ElementwiseArithmetic


class TestNumpyOperands(TestCase):
    def setUp(self):
        self.arith = ElementwiseArithmetic()

    def test_vector_scalar_array(self):
        res = self.arith.div(np.array([2, 4, 8], dtype=np.int32), np.int32(2))
        self.assertIsInstance(res, np.ndarray)
        self.assertEqual(res.dtype, np.int32)
        np.testing.assert_allclose(res, [1, 2, 4])

    def test_scalar_vector_array(self):
        res = self.arith.div(64.0, np.array([2.0, 4.0, 8.0], dtype=np.float32))
        self.assertIsInstance(res, np.ndarray)
        np.testing.assert_allclose(res, [32, 16, 8])

    def test_vector_vector_mixed_list_and_array(self):
        res = self.arith.div([4.0, 9.0, 8.0], np.array([2.0, 3.0, 4.0]))
        self.assertIsInstance(res, np.ndarray)
        np.testing.assert_allclose(res, [2, 3, 2])

    def test_matrix_matrix_array(self):
        a = np.array([[4, 12, 8], [9, 20, 45]], dtype=np.float64)
        b = np.array([[2, 3, 4], [3, 4, 5]], dtype=np.float64)
        res = self.arith.div(a, b)
        self.assertIsInstance(res, np.ndarray)
        self.assertEqual(res.shape, (2, 3))
        np.testing.assert_allclose(res, [[2, 4, 2], [3, 5, 9]])

    def test_matrix_list_and_array(self):
        res = self.arith.mul([[1, 2], [3, 4]], np.full((2, 2), 2.0))
        self.assertIsInstance(res, np.ndarray)
        np.testing.assert_allclose(res, [[2, 4], [6, 8]])

    def test_complex_arrays(self):
        a = np.array([8 + 7j, 7 + 6j], dtype=np.complex64)
        b = np.array([4 + 2j, 4 + 3j], dtype=np.complex64)
        res = self.arith.div(a, b)
        np.testing.assert_allclose(res, [(8 + 7j) / (4 + 2j), (7 + 6j) / (4 + 3j)], rtol=1e-5)

    def test_integer_array_division_truncates(self):
        res = self.arith.div(np.array([7, -7], dtype=np.int32), np.int32(2))
        self.assertEqual(res.dtype, np.int32)
        np.testing.assert_array_equal(res, [3, -3])
        res = self.arith.div(np.array([[-9, 9]], dtype=np.int8), np.array([[4, -4]], dtype=np.int8))
        self.assertEqual(res.dtype, np.int8)
        np.testing.assert_array_equal(res, [[-2, -2]])

    def test_complex_array_with_complex_scalar(self):
        v = np.array([2 + 4j, 4 + 8j])
        res = self.arith.div(v, Complex(2.0, 4.0))
        self.assertIsInstance(res, np.ndarray)
        self.assertEqual(res.shape, (2,))
        np.testing.assert_allclose([complex(x) for x in res], [1 + 0j, 2 + 0j])

    def test_complex_scalar_with_complex_array(self):
        v = np.array([2 + 1j, 2 + 2j])
        res = self.arith.div(Complex(10.0, 12.0), v)
        self.assertIsInstance(res, np.ndarray)
        np.testing.assert_allclose(
            [complex(x) for x in res], [(10 + 12j) / (2 + 1j), (10 + 12j) / (2 + 2j)]
        )

    def test_real_array_with_complex_scalar(self):
        res = self.arith.mul(np.array([1.0, 2.0]), Complex(0.0, 1.0))
        self.assertEqual([complex(x) for x in res], [1j, 2j])
        self.assertEqual(len(self.arith.add(np.array([]), Complex(1.0, 1.0))), 0)

    def test_array_shape_mismatches(self):
        with self.assertRaises(ShapeMismatchError):
            self.arith.div(np.ones(2), np.ones(3))
        with self.assertRaises(ShapeMismatchError):
            self.arith.div(np.ones(0), np.ones(0))
        with self.assertRaises(ShapeMismatchError):
            self.arith.div(np.ones((2, 3)), np.ones((2, 2)))
        with self.assertRaises(ShapeMismatchError):
            self.arith.div(np.ones((0, 3)), np.ones((1, 3)))
        with self.assertRaises(ShapeMismatchError):
            self.arith.div(np.ones((2, 0)), np.ones((2, 0)))

    def test_numpy_division_by_zero_is_not_intercepted(self):
        with np.errstate(divide="ignore"):
            res = self.arith.div(np.array([1.0, 2.0]), np.array([0.0, 1.0]))
        self.assertTrue(np.isinf(res[0]))
        with np.errstate(divide="raise"):
            with self.assertRaises(FloatingPointError):
                self.arith.div(np.array([1.0, 2.0]), np.array([0.0, 1.0]))

    def test_operands_unchanged(self):
        a = np.array([4.0, 8.0])
        b = np.array([2.0, 2.0])
        res = self.arith.div(a, b)
        self.assertIsNot(res, a)
        np.testing.assert_array_equal(a, [4.0, 8.0])


if __name__ == "__main__":
    unittest.main()
