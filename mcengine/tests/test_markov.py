from itertools import islice

import numpy as np
from .. import *
from ..core.markov.metropolis import MetropolisState

from unittest import TestCase


def gauss_pdf(x):
    return np.exp(-np.sum(x ** 2) / 2)


class AcceptanceTest(TestCase):

    def test_range(self):
        var = Variates(0)
        for state_pdf, candidate_pdf in zip(var.uniform(1000, 1e-3, 10),
                                            var.uniform(1000, 0, 10)):
            alpha = acceptance_probability(state_pdf, candidate_pdf)
            self.assertGreaterEqual(alpha, 0)
            self.assertLessEqual(alpha, 1)
            if candidate_pdf >= state_pdf:
                self.assertEqual(1., alpha)
            else:
                self.assertAlmostEqual(candidate_pdf / state_pdf, alpha)

    def test_zero_candidate(self):
        self.assertEqual(0., acceptance_probability(.5, 0.))

    def test_zero_state(self):
        with self.assertRaises(DomainError):
            acceptance_probability(0., 1.)

    def test_hasting_correction(self):
        self.assertAlmostEqual(.25, acceptance_probability(1., .5, .5))

    def test_log_densities(self):
        # densities far below the smallest float still give a ratio
        self.assertAlmostEqual(np.exp(-1),
                               log_acceptance_probability(-2000., -2001.))
        self.assertEqual(1., log_acceptance_probability(-2001., -2000.))
        self.assertEqual(0., log_acceptance_probability(-2000., -np.inf))
        with self.assertRaises(DomainError):
            log_acceptance_probability(-np.inf, 0.)


class MetropTest(TestCase):

    def test_shape(self):
        met = DefaultMetropolis(1, lambda x: np.sin(10 * x) ** 2 + .1,
                                variates=1)
        sample = met.sample(1000, .1, log_every=0)
        self.assertEqual(sample.data.shape, (1000, 1))
        self.assertTrue(0 < sample.accept_ratio < 1)

    def test_mean(self):
        proposal = proposals.Gaussian(1, .5, variates=2)
        met = DefaultMetropolis(1, lambda x: 1., proposal, bounds=(0, 1),
                                variates=2)
        sample = met.sample(5000, .1, log_every=0)
        self.assertAlmostEqual(0.5, sample.mean[0], 1)
        self.assertTrue(np.all((sample.data >= 0) & (sample.data <= 1)))

    def test_2d(self):
        ndim = 2
        proposal = proposals.Gaussian(ndim, [1., .5], variates=3)
        target = densities.Gaussian(ndim, mu=[1, -1], scale=[1, .5])
        met = DefaultMetropolis(ndim, target, proposal, variates=3)
        sample = met.sample(5000, [1., -1.], log_every=0)
        self.assertEqual(sample.data.shape, (5000, 2))
        self.assertTrue(np.allclose([1, -1], sample.burn(500).mean,
                                    atol=0.2))

    def test_posterior(self):
        # Poisson rate with Gamma(2, 1) prior: posterior Gamma(2 + sum, 1 + n)
        data = Variates(4).poisson(50, 3)
        target = densities.Posterior(lambda lam: dgamma(lam, 2, 1),
                                     lambda x, lam: dpois(x, lam), data)
        proposal = proposals.Gaussian(1, .3, variates=5)
        met = DefaultMetropolis(1, target, proposal, bounds=(0, np.inf),
                                variates=5)
        sample = met.sample(5000, 1., log_every=0).burn(500)
        exact = (2 + np.sum(data)) / (1 + len(data))
        self.assertAlmostEqual(exact, sample.mean[0], delta=0.1)

    def test_posterior_many_observations(self):
        # the joint likelihood of 1000 observations underflows to zero
        data = Variates(4).poisson(1000, 3)
        target = densities.Posterior(lambda lam: dgamma(lam, 2, 1),
                                     lambda x, lam: dpois(x, lam), data)
        self.assertEqual(0., target.pdf(np.mean(data))[0])
        self.assertTrue(np.isfinite(target.log_pdf(np.mean(data))[0]))

        proposal = proposals.Gaussian(1, .1, variates=16)
        met = DefaultMetropolis(1, target, proposal, bounds=(0, np.inf),
                                variates=16)
        sample = met.sample(3000, np.mean(data), log_every=0)
        self.assertTrue(0 < sample.accept_ratio < 1)
        exact = (2 + np.sum(data)) / (1 + len(data))
        self.assertAlmostEqual(exact, sample.burn(500).mean[0], delta=0.05)

    def test_reflection_abstains(self):
        calls = []

        def target(x):
            calls.append(float(x[0]))
            return 1.

        proposal = Proposal.make(lambda state: np.array([2.3]), ndim=1)
        met = DefaultMetropolis(1, target, proposal, bounds=(0, 2), variates=6)
        state = met.init_state(MetropolisState([1.5]))
        self.assertIs(state, met.next_state(state, 1))

        sample = met.sample(10, 1.5, log_every=0)
        # never clamped to the bound, never evaluated out of range
        self.assertTrue(np.all(sample.data == 1.5))
        self.assertEqual(0, sample.accepted)
        self.assertEqual([1.5, 1.5], calls)

    def test_reproducible(self):
        def run(seed):
            met = DefaultMetropolis(1, gauss_pdf, bounds=(-2, 2),
                                    variates=seed)
            return met.sample(500, 0., log_every=0).data

        self.assertTrue(np.array_equal(run(7), run(7)))
        self.assertFalse(np.array_equal(run(7), run(8)))

    def test_iterate(self):
        first = DefaultMetropolis(1, gauss_pdf, variates=9)
        second = DefaultMetropolis(1, gauss_pdf, variates=9)
        states = list(islice(first.iterate(.5), 100))
        sample = second.sample(100, .5, log_every=0)
        self.assertTrue(np.array_equal(np.array(states), sample.data))

    def test_hasting(self):
        # independence sampler with a wider normal proposal
        proposal = densities.Gaussian(1, mu=0, scale=3, variates=10)
        met = DefaultMetropolis(1, lambda x: dnorm(x[0], 1, 1), proposal,
                                variates=10)
        self.assertTrue(met.is_hasting)
        sample = met.sample(5000, 0., log_every=0).burn(100)
        self.assertAlmostEqual(1., sample.mean[0], delta=0.1)
        self.assertAlmostEqual(1., sample.variance[0], delta=0.2)

    def test_zero_initial(self):
        met = DefaultMetropolis(1, lambda x: float(x[0] > 0), variates=11)
        with self.assertRaises(DomainError):
            met.sample(10, -1., log_every=0)

    def test_initial_out_of_bounds(self):
        met = DefaultMetropolis(1, gauss_pdf, bounds=(0, 2), variates=12)
        with self.assertRaises(ConfigurationError):
            met.sample(10, 3., log_every=0)
        with self.assertRaises(ConfigurationError):
            met.sample(10, [1., 1.], log_every=0)

    def test_bad_bounds(self):
        with self.assertRaises(ConfigurationError):
            DefaultMetropolis(1, gauss_pdf, bounds=(2, 0))

    def test_invalid_target(self):
        met = DefaultMetropolis(1, lambda x: -1., variates=13)
        with self.assertRaises(ComputationError):
            met.sample(10, 0., log_every=0)

        def failing(x):
            if x[0] > 0:
                raise ValueError("undefined")
            return 1.

        met = DefaultMetropolis(1, failing, variates=14)
        with self.assertRaises(ComputationError):
            met.sample(1000, -.1, log_every=0)

    def test_burn(self):
        met = DefaultMetropolis(1, gauss_pdf, variates=15)
        sample = met.sample(100, 0., log_every=0)
        burned = sample.burn(20)
        self.assertEqual(80, burned.size)
        self.assertTrue(np.array_equal(sample.data[20:], burned.data))
        self.assertLessEqual(burned.accepted, sample.accepted)
        with self.assertRaises(ConfigurationError):
            sample.burn(100)
