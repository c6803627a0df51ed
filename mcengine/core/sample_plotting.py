import numpy as np
import matplotlib.pyplot as plt


def _bins(data):
    # Freedman Diaconis, at least one bin
    width = 2 * np.subtract(*np.percentile(data, [75, 25])) * len(data) ** (-1/3)
    if width <= 0:
        return 10
    return max(1, int(np.ceil((np.max(data) - np.min(data)) / width)))


def plot1d(sample, target=None):
    fig = plt.figure(figsize=(14, 7))

    # time series plot
    ax1 = plt.subplot2grid((3, 1), (0, 0))
    ax1.set_title('time series')
    ax1.plot(sample.data)
    ax1.grid(True)

    ax2 = plt.subplot2grid((3, 1), (1, 0), rowspan=2)
    ax2.set_title('distribution')
    values = sample.data[:, 0]
    bins = _bins(values)
    ax2.hist(values, bins=bins, density=True)
    if target is not None:
        x = np.linspace(np.min(values), np.max(values), 1000)
        # targets take one state of shape (1,)
        pdf = np.asanyarray([float(np.squeeze(target(np.atleast_1d(xi))))
                             for xi in x])
        norm = np.sum(pdf) * (x[1] - x[0])
        if norm > 0:
            ax2.plot(x, pdf / norm, label='target distribution')
            ax2.legend()

    fig.tight_layout()
    return fig


def plot_nd(sample, labels=None):
    ndim = sample.ndim
    if labels is None:
        labels = ['x%d' % i for i in range(ndim)]

    fig, axes = plt.subplots(ndim, 2, figsize=(14, 3 * ndim), squeeze=False)
    for dim in range(ndim):
        values = sample.data[:, dim]
        axes[dim, 0].set_title('time series ' + labels[dim])
        axes[dim, 0].plot(values)
        axes[dim, 0].grid(True)
        axes[dim, 1].set_title('distribution ' + labels[dim])
        axes[dim, 1].hist(values, bins=_bins(values))

    fig.tight_layout()
    return fig
