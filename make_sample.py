""" Run integrations and samplers described by a JSON configuration file.

Usage:
    make_sample.py CONFIG [BEGIN [END]]

The file holds a list of configurations, for example

    [{"name": "zip", "method": "gibbs", "size": 2000, "seed": 1,
      "repeats": 4,
      "params": {"lam": 2, "p": 0.3, "observations": 10000,
                 "a": 1, "b": 1, "burn": 200}}]

Methods are "integration", "importance", "metropolis" and "gibbs".
Results are written as JSON into the directory out/ next to the config
file. Repeated runs (and independent configurations) are executed in
parallel, each with its own seed.
"""
import sys
import os
import json
import numpy as np
from multiprocessing import Pool

from mcengine import *


dir_base = None

INTEGRANDS = {
    'square': lambda x: x ** 2,
    'sin': np.sin,
    'gauss': lambda x: np.exp(-x ** 2 / 2),
    'cauchy_tail': lambda x: 1 / (1 + x ** 2),
}


# allow encoding of numpy arrays via tolist
class NumpyEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.generic):
            return obj.item()
        return json.JSONEncoder.default(self, obj)


def join_dir_safe(path, dir_name):
    new_dir = os.path.join(path, dir_name)
    if not os.path.exists(new_dir):
        os.makedirs(new_dir)
    return new_dir


def _integrand(params):
    try:
        return INTEGRANDS[params['integrand']]
    except KeyError:
        raise ConfigurationError("Unknown integrand %r, choose from %s." % (
            params.get('integrand'), sorted(INTEGRANDS)))


def run_integration(config, variates):
    params = config['params']
    mc = PlainMC(1, (params['a'], params['b']), variates)
    return mc(_integrand(params), config['size']).summary()


def run_importance(config, variates):
    params = config['params']
    dist = densities.Cauchy(params.get('location', 0.),
                            params.get('scale', 1.), variates)
    sample = ImportanceMC(dist)(_integrand(params), config['size'])
    info = sample.summary()
    info['max_weight_share'] = sample.max_weight_share
    return info


def run_metropolis(config, variates):
    """ Poisson rate posterior with gamma prior, sampled by Metropolis. """
    params = config['params']
    data = params.get('data')
    if data is None:
        data = variates.poisson(params['observations'], params['lam'])
    a, b = params.get('a', 1.), params.get('b', 1.)
    target = densities.Posterior(lambda lam: dgamma(lam, a, b),
                                 lambda x, lam: dpois(x, lam), data)
    proposal = proposals.Gaussian(1, params.get('scale', .5), variates)
    sampler = DefaultMetropolis(1, target, proposal,
                                bounds=params.get('bounds'),
                                variates=variates)
    sample = sampler.sample(config['size'], params.get('initial', 1.),
                            log_every=-1)
    chain = sample.burn(params.get('burn', 0))
    return {'mean': chain.mean, 'variance': chain.variance,
            'accept_rate': sample.accept_ratio}


def run_gibbs(config, variates):
    params = config['params']
    data = params.get('data')
    if data is None:
        zip_dist = densities.ZeroInflatedPoisson(
            params['lam'], params['p'], variates)
        data = zip_dist.simulate(params['observations'])
    sampler = ZeroInflatedPoissonGibbs(
        data, params.get('a', 1.), params.get('b', 1.), variates)
    sample = sampler.sample(config['size'], params.get('initial', [.5, .5]),
                            log_every=-1)
    chain = sample.burn(params.get('burn', 0))
    return {'mean': chain.mean, 'variance': chain.variance}


METHODS = {
    'integration': run_integration,
    'importance': run_importance,
    'metropolis': run_metropolis,
    'gibbs': run_gibbs,
}


def make_sample(config, seed=None):
    print("START SAMPLING %s %s" % (config['name'], config['params']),
          flush=True)
    try:
        method = METHODS[config['method']]
    except KeyError:
        raise ConfigurationError("Unknown method %r." % config.get('method'))
    info = method(config, Variates(seed))
    print("FINISHED SAMPLING %s: %s" % (config['name'], info), flush=True)
    return info


def _run_repeat(args):
    return make_sample(*args)


def run(config, pool=None):
    repeats = config.get('repeats', 1)
    seeds = np.random.SeedSequence(config.get('seed')).spawn(repeats)
    jobs = [(config, seed) for seed in seeds]
    if pool is None or repeats == 1:
        infos = [_run_repeat(job) for job in jobs]
    else:
        infos = pool.map(_run_repeat, jobs)

    results = {'name': config['name'], 'method': config['method'],
               'params': config['params'], 'size': config['size'],
               'runs': infos}
    if repeats > 1:
        for key in infos[0]:
            values = np.array([info[key] for info in infos], dtype=float)
            results[key] = np.mean(values, axis=0)
            results[key + '_var'] = np.var(values, axis=0)

    if dir_base is not None:
        save_base = os.path.join(dir_base, config['name'])
        with open(save_base + '.json', 'w') as out_file:
            json.dump(results, out_file, indent=2, cls=NumpyEncoder)
    print('CONFIG %s DONE' % config['name'], flush=True)
    return results


if __name__ == '__main__':
    config_file = sys.argv[1]
    base = os.path.split(config_file)[0]
    dir_base = join_dir_safe(base, 'out')

    with open(config_file) as in_file:
        configs = json.load(in_file)

    try:
        begin = int(sys.argv[2])
        try:
            end = int(sys.argv[3])
            configs = configs[begin:end]  # run a subset of configs
        except IndexError:
            configs = [configs[begin]]  # run only one config
    except IndexError:
        pass  # run all configs in config file

    with Pool() as pool:
        for run_config in configs:
            run(run_config, pool)

    print("SCRIPT DONE", flush=True)
