import unittest
from itertools import product
import numpy as np

from eigembed import EigEmbed, EigenMethod, InvalidArgument
from eigembed.randomizedembedding import gaussian_sketch, gram_schmidt
from utils import backends, sample_symmetric, orthonormality_error

class TestRandomizedEmbedding(unittest.TestCase):

    def setUp(self):
        self.eigembed = [EigEmbed(backend) for backend in backends]
        self.dims = [(1, 0), (2, 1), (3, 2), (5, 0)]

    def test_sketch(self):
        rng = np.random.default_rng(7)
        sketch = gaussian_sketch(rng, 20000, 3)
        self.assertEqual(sketch.shape, (20000, 3))
        self.assertTrue(np.all(np.isfinite(sketch)))
        self.assertTrue(np.all(np.abs(np.mean(sketch, axis=0)) < 0.05))
        self.assertTrue(np.all(np.abs(np.std(sketch, axis=0) - 1.0) < 0.05))

        # paired columns share one draw, the odd column uses the cosine term only
        rng = np.random.default_rng(11)
        lower = np.nextafter(0.0, 1.0)
        v1 = rng.uniform(lower, 1.0, size=(4, 2))
        v2 = rng.uniform(lower, 1.0, size=(4, 2))
        length = np.sqrt(-2.0 * np.log(v1))
        sketch = gaussian_sketch(np.random.default_rng(11), 4, 3)
        self.assertTrue(np.allclose(sketch[:, 0], length[:, 0] * np.cos(2.0 * np.pi * v2[:, 0])))
        self.assertTrue(np.allclose(sketch[:, 1], length[:, 0] * np.sin(2.0 * np.pi * v2[:, 0])))
        self.assertTrue(np.allclose(sketch[:, 2], length[:, 1] * np.cos(2.0 * np.pi * v2[:, 1])))

    def test_gram_schmidt(self):
        for ee in self.eigembed:
            xp = ee.namespace
            basis = xp.asarray(np.random.default_rng(0).standard_normal((30, 6)))
            self.assertEqual(gram_schmidt(basis, 1e-4), 6)
            self.assertLess(orthonormality_error(xp, basis), 1e-10)

            data = np.random.default_rng(1).standard_normal((30, 5))
            data[:, 2] = data[:, 0] - 2.0 * data[:, 1]
            basis = xp.asarray(data)
            self.assertEqual(gram_schmidt(basis, 1e-4), 2)
            self.assertLess(orthonormality_error(xp, basis[:, :2]), 1e-10)
            self.assertTrue(bool(xp.all(basis[:, 2:] == 0.0)))

    def test_low_rank(self):
        # the sketch captures the full range, the result is exact
        for ee, (tdim, skip) in product(self.eigembed, self.dims):
            xp = ee.namespace
            size, nev = 50, tdim + skip
            eigvals = np.zeros(size)
            eigvals[:nev] = np.arange(1, nev+1, dtype=np.float64) + 4.0
            mat = sample_symmetric(xp, size, eigvals, seed=nev)

            res = ee.randomized(seed=5).embed(mat, ee.dense_operation(mat), tdim, skip)
            self.assertEqual(res.method, EigenMethod.RANDOMIZED)
            self.assertEqual(res.embedding.shape, (size, tdim))
            self.assertEqual(res.eigenvalues.shape, (tdim,))
            self.assertEqual(res.rank, nev)
            self.assertFalse(res.degenerate)
            self.assertTrue(np.allclose(res.eigenvalues, eigvals[skip:nev], atol=1e-8))
            self.assertLess(orthonormality_error(xp, res.embedding), 1e-8)
            self.assertTrue(float(xp.max(xp.abs(mat @ res.embedding - res.embedding * res.eigenvalues))) < 1e-8)

    def test_orthonormal(self):
        for ee in self.eigembed:
            xp = ee.namespace
            mat = sample_symmetric(xp, 60, seed=2)
            res = ee.randomized(seed=9).embed(mat, ee.dense_operation(mat), 6, 2)
            self.assertLess(orthonormality_error(xp, res.embedding), 1e-6)
            self.assertTrue(bool(xp.all(res.eigenvalues[1:] >= res.eigenvalues[:-1])))

    def test_deterministic(self):
        for ee in self.eigembed:
            xp = ee.namespace
            mat = sample_symmetric(xp, 40, seed=4)
            op = ee.dense_operation(mat)
            res1 = ee.randomized(seed=123).embed(mat, op, 3, 1)
            res2 = ee.randomized(seed=123).embed(mat, op, 3, 1)
            self.assertTrue(bool(xp.all(res1.embedding == res2.embedding)))
            self.assertTrue(bool(xp.all(res1.eigenvalues == res2.eigenvalues)))

            solver = ee.randomized(seed=123)
            res3 = solver.embed(mat, op, 3, 1)
            self.assertTrue(bool(xp.all(res1.embedding == res3.embedding)))

    def test_generator_stream(self):
        rng = np.random.default_rng(5)
        solver = EigEmbed(np).randomized(seed=rng)
        self.assertIs(solver.generator(), rng)
        first = gaussian_sketch(solver.generator(), 10, 2)
        second = gaussian_sketch(solver.generator(), 10, 2)
        self.assertFalse(np.array_equal(first, second))

    def test_zero_matrix(self):
        for ee in self.eigembed:
            xp = ee.namespace
            mat = xp.zeros((5, 5))
            with self.assertLogs("eigembed.randomizedembedding", level="WARNING"):
                res = ee.randomized(seed=0).embed(mat, ee.dense_operation(mat), 2, 0)
            self.assertEqual(res.rank, 0)
            self.assertTrue(res.degenerate)
            self.assertEqual(res.embedding.shape, (5, 2))
            self.assertTrue(bool(xp.all(res.embedding == 0.0)))
            self.assertTrue(float(xp.max(xp.abs(res.eigenvalues))) < 1e-12)

    def test_identity(self):
        for ee, (tdim, skip) in product(self.eigembed, self.dims + [(8, 2), (10, 0)]):
            xp = ee.namespace
            mat = xp.eye(10)
            res = ee.randomized(seed=tdim).embed(mat, ee.dense_operation(mat), tdim, skip)
            self.assertEqual(res.rank, tdim + skip)
            self.assertTrue(float(xp.max(xp.abs(res.eigenvalues - 1.0))) < 1e-10)
            self.assertLess(orthonormality_error(xp, res.embedding), 1e-10)

    def test_rank_deficient(self):
        for ee in self.eigembed:
            xp = ee.namespace
            eigvals = np.zeros(30)
            eigvals[-3:] = [8.0, 9.0, 10.0]
            mat = sample_symmetric(xp, 30, eigvals, seed=6)
            res = ee.randomized(seed=1).embed(mat, ee.dense_operation(mat), 5, 0)

            self.assertEqual(res.rank, 3)
            self.assertTrue(res.degenerate)
            self.assertTrue(np.allclose(res.eigenvalues, [0.0, 0.0, 8.0, 9.0, 10.0], atol=1e-8))
            norms = xp.linalg.vector_norm(res.embedding, axis=0)
            self.assertTrue(float(xp.max(norms[:2])) < 1e-8)
            self.assertTrue(float(xp.max(xp.abs(norms[2:] - 1.0))) < 1e-8)

    def test_relative_tolerance(self):
        for ee in self.eigembed:
            xp = ee.namespace
            eigvals = np.zeros(20)
            eigvals[-2:] = [1e-7, 2e-7]
            mat = sample_symmetric(xp, 20, eigvals, seed=8)
            op = ee.dense_operation(mat)

            res = ee.randomized(seed=2).embed(mat, op, 2, 0)
            self.assertEqual(res.rank, 0)

            res = ee.randomized(seed=2, relative_tol=True).embed(mat, op, 2, 0)
            self.assertEqual(res.rank, 2)
            self.assertTrue(np.allclose(res.eigenvalues, [1e-7, 2e-7], rtol=1e-6, atol=0.0))

    def test_invalid(self):
        for ee in self.eigembed:
            xp = ee.namespace
            mat = sample_symmetric(xp, 6)
            op = ee.dense_operation(mat)
            solver = ee.randomized(seed=0)
            self.assertRaises(InvalidArgument, solver.embed, mat, op, 6, 1)
            self.assertRaises(InvalidArgument, solver.embed, mat, op, 0, 0)
            self.assertRaises(InvalidArgument, solver.embed, mat, None, 2, 0)
            self.assertRaises(InvalidArgument, ee.randomized, rank_tol=-1.0)
            self.assertRaises(InvalidArgument, ee.randomized, seed="abc")

if __name__ == '__main__':
    unittest.main()
