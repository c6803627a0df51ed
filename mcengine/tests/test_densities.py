import numpy as np
from .. import *

from unittest import TestCase


class DensityTest(object):
    class_to_test = None

    def make(self, ndim):
        return self.class_to_test(ndim, variates=0)

    def test_pdf(self):
        count = 100
        ndim = 3
        density = self.make(ndim)
        xs = Variates(1).rand(count * ndim).reshape(count, ndim)
        prob = density.pdf(xs)
        self.assertEqual(prob.shape, (count,))
        self.assertTrue(np.all(prob == density(*xs.transpose())))

    def test_pdf_1d(self):
        density = self.make(1)
        self.assertEqual(density(0, 1, 2).shape, (3,))
        self.assertEqual(density.pdf(0).shape, (1,))


class DistributionTest(object):
    class_to_test = None

    def test_call(self):
        count = 100
        ndim = 3
        distr = self.make(ndim)
        res = distr.rvs(count)
        self.assertEqual((count, ndim), res.shape)


class GaussTest(TestCase, DistributionTest, DensityTest):
    class_to_test = densities.Gaussian

    def test_call_nd(self):
        count = 100
        ndim = 3
        distr = self.class_to_test(ndim, mu=[1, 10, 0], scale=[1, 1, 1])
        res = distr.rvs(count)
        self.assertEqual(res.shape, (count, ndim))

    def test_value(self):
        distr = self.class_to_test(1, mu=1, scale=2)
        self.assertAlmostEqual(dnorm(0, 1, 2), distr.pdf(0)[0])

    def test_invalid(self):
        with self.assertRaises(ConfigurationError):
            self.class_to_test(1, scale=0)


class UniformTest(TestCase, DistributionTest, DensityTest):
    class_to_test = densities.Uniform

    def test_range(self):
        distr = self.class_to_test(2, sample_range=(-1, 1), variates=2)
        xs = distr.rvs(1000)
        self.assertTrue(np.all((xs >= -1) & (xs <= 1)))
        self.assertEqual(.25, distr.pdf([0, 0])[0])
        self.assertEqual(0, distr.pdf([2, 0])[0])
        self.assertAlmostEqual(np.log(.25), distr.log_pdf([0, 0])[0])
        self.assertEqual(-np.inf, distr.log_pdf([2, 0])[0])

    def test_invalid(self):
        with self.assertRaises(ConfigurationError):
            self.class_to_test(1, sample_range=(1, 1))


class CauchyTest(TestCase):

    def test_pdf(self):
        distr = densities.Cauchy(1, 2, variates=3)
        self.assertAlmostEqual(dcauchy(0, 1, 2), distr.pdf(0)[0])
        self.assertEqual((10, 1), distr.rvs(10).shape)

    def test_median(self):
        xs = densities.Cauchy(1, 2, variates=4).rvs(10000)
        self.assertAlmostEqual(1, np.median(xs), delta=0.1)


class ZeroInflatedPoissonTest(TestCase):

    def test_pmf(self):
        distr = densities.ZeroInflatedPoisson(2, .3)
        ks = np.arange(100)
        self.assertAlmostEqual(1., np.sum(distr.pdf(ks)))
        self.assertAlmostEqual(.7 + .3 * np.exp(-2), distr.pdf(0)[0])
        self.assertAlmostEqual(.3 * dpois(3, 2), distr.pdf(3)[0])

    def test_simulate(self):
        distr = densities.ZeroInflatedPoisson(2, .3, variates=5)
        data = distr.simulate(100000)
        self.assertEqual((100000,), data.shape)
        self.assertTrue(np.all(data >= 0))
        self.assertAlmostEqual(distr.mean, np.mean(data), delta=0.02)
        self.assertAlmostEqual(distr.variance, np.var(data), delta=0.1)
        self.assertEqual((10, 1), distr.rvs(10).shape)

    def test_invalid(self):
        with self.assertRaises(ConfigurationError):
            densities.ZeroInflatedPoisson(0, .3)
        with self.assertRaises(ConfigurationError):
            densities.ZeroInflatedPoisson(1, 1.3)


class PosteriorTest(TestCase):

    def setUp(self):
        self.data = np.array([1, 3, 2])
        self.posterior = densities.Posterior(
            lambda lam: dgamma(lam, 2, 1), lambda x, lam: dpois(x, lam),
            self.data)

    def test_value(self):
        lam = 1.5
        expected = dgamma(lam, 2, 1) * np.prod(dpois(self.data, lam))
        self.assertAlmostEqual(expected, self.posterior.pdf(lam)[0])

    def test_zero_prior(self):
        self.assertEqual(0., self.posterior.pdf(-1.)[0])
        self.assertEqual(0., self.posterior.pdf(0.)[0])

    def test_vector(self):
        self.assertEqual((4,), self.posterior.pdf([.5, 1, 2, 3]).shape)

    def test_log_pdf(self):
        lam = 1.5
        expected = (np.log(dgamma(lam, 2, 1)) +
                    np.sum(np.log(dpois(self.data, lam))))
        self.assertAlmostEqual(expected, self.posterior.log_pdf(lam)[0])
        self.assertEqual(-np.inf, self.posterior.log_pdf(0.)[0])

    def test_negative(self):
        posterior = densities.Posterior(lambda theta: -1.,
                                        lambda x, theta: x, [1.])
        with self.assertRaises(ComputationError):
            posterior.pdf(0.)


class MakeTest(TestCase):

    def test_density(self):
        density = Density.make(pdf_vect=lambda x, y: x * y, ndim=2)
        self.assertEqual(6., density.pdf([2, 3])[0])
        with self.assertRaises(ConfigurationError):
            Density.make(lambda x: x)

    def test_distribution(self):
        var = Variates(6)
        distr = Distribution.make(lambda x: np.ones(len(x)), ndim=1,
                                  rvs=lambda n: var.rand(n))
        self.assertEqual((5, 1), distr.rvs(5).shape)
        with self.assertRaises(ConfigurationError):
            Distribution.make(lambda x: x, ndim=1)
