"""
Sample containers shared by the integration and Markov chain methods.

A sample holds the generated points as an array of shape (N, ndim) together
with summary statistics that are computed on first access.
"""

import os
import time
import json

import numpy as np

from .sample_plotting import plot1d, plot_nd


def _set(*args):
    return all(arg is not None for arg in args)


class Sample(object):
    def __init__(self, **kwargs):
        self.data = None
        self.target = None
        self.weights = None

        self._variance = None
        self._mean = None

        self._sample_info = [
            ('size', 'data (size)', '%s'),
            ('mean', 'mean', '%s'),
            ('variance', 'variance', '%s'),
        ]

        for key in kwargs:
            setattr(self, key, kwargs[key])

    def extend_array(self, key, array):
        current = getattr(self, key)
        if current is None:
            setattr(self, key, array)
        else:
            setattr(self, key, np.concatenate((current, array), axis=0))

    # PROPERTIES
    @property
    def size(self):
        try:
            return self.data.shape[0]
        except AttributeError:
            return None

    @property
    def ndim(self):
        try:
            return self.data.shape[1]
        except AttributeError:
            return None

    @property
    def mean(self):
        if self._mean is None and _set(self.data) and self.size:
            self._mean = np.mean(self.data, axis=0)
        return self._mean

    @property
    def variance(self):
        if self._variance is None and _set(self.data) and self.size:
            self._variance = np.var(self.data, axis=0)
        return self._variance

    def plot(self):
        if self.data is None:
            return None
        if self.ndim == 1:
            return plot1d(self, target=self.target)
        return plot_nd(self)

    def save(self, file_path=None):
        if file_path is None:
            file_path = type(self).__name__ + '-' + str(int(time.time()))
        path, name = os.path.split(file_path)

        info = {entry[0]: repr(getattr(self, entry[0]))
                for entry in self._sample_info}
        info['type'] = type(self).__name__
        info['target'] = repr(self.target)

        np.save(os.path.join(path, name + '-data.npy'), self.data)
        with open(os.path.join(path, name + '.json'), 'w') as fp:
            json.dump(info, fp, indent=2)

    def _data_table(self):
        titles = [entry[1] for entry in self._sample_info]
        entries = []
        for entry in self._sample_info:
            value = getattr(self, entry[0])
            try:
                entries.append(entry[2] % value)
            except TypeError:
                entries.append('N/A')

        return titles, entries

    def _repr_html_(self):
        titles, entries = self._data_table()
        info = ['<h3>' + type(self).__name__ + '</h3>',
                '<table><tr><th style="text-align:left;">' +
                '</th><th style="text-align:left;">'.join(titles) +
                '</th></tr><tr><td style="text-align:left;">' +
                '</td><td style="text-align:left;">'.join(entries) +
                '</td></tr></table>']
        return '\n'.join(info)

    def __repr__(self):
        return (type(self).__name__ + '\n\t' + '\n\t'.join(
            '%s: %s' % (t, e) for t, e in zip(*self._data_table())))
