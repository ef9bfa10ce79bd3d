import io
import logging
import math
from typing import Callable, Iterable

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .config import get_settings
from .distributions import (
    binomial_pmf, binomial_cdf, negbin_pmf, hypergeom_pmf,
    poisson_pmf, poisson_cdf, uniform_cdf, exponential_cdf,
)

logger = logging.getLogger(__name__)

MAX_POINTS = 10000
MAX_DRAWS = 1000000


def _png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight", dpi=get_settings().plot_dpi)
    plt.close(fig)
    return buf.getvalue()


def _evaluate(func: Callable[[float], float], xs: Iterable[float]) -> np.ndarray:
    # rejected / nan / inf points are drawn at 0
    out = []
    for x in xs:
        y = func(float(x))
        out.append(y if y is not False and math.isfinite(y) else 0.0)
    return np.asarray(out, dtype=float)


def _support(kmax: int) -> np.ndarray:
    if kmax < 0:
        raise ValueError("kmax must be >= 0")
    if kmax > MAX_POINTS:
        raise ValueError(f"kmax must be <= {MAX_POINTS}")
    return np.arange(0, kmax + 1)


def _default_kmax(mean: float, sd: float) -> int:
    # cover most mass (mean + ~4 sd), min 10
    return int(max(10, min(MAX_POINTS, math.ceil(mean + 4 * sd))))


def _stem(ks, pmf, title: str, xlabel: str = "k") -> bytes:
    fig, ax = plt.subplots(figsize=(6, 3))
    ax.stem(ks, pmf, basefmt=" ")
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("P(X=k)")
    ax.grid(True, alpha=0.2)
    return _png_bytes(fig)


def _step(ks, cdf, title: str) -> bytes:
    fig, ax = plt.subplots(figsize=(6, 3))
    ax.step(ks, cdf, where="post")
    ax.set_title(title)
    ax.set_xlabel("k")
    ax.set_ylabel("P(X≤k)")
    ax.set_ylim(-0.02, 1.02)
    ax.grid(True, alpha=0.2)
    return _png_bytes(fig)


def _line_cdf(xs, ys, title: str) -> bytes:
    fig, ax = plt.subplots(figsize=(6, 3))
    ax.plot(xs, ys, linewidth=2)
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("F(x)")
    ax.set_ylim(-0.02, 1.02)
    ax.grid(True, alpha=0.2)
    return _png_bytes(fig)


def plot_pmf_binom(n: int, p: float) -> bytes:
    ks = _support(n)
    pmf = _evaluate(lambda k: binomial_pmf(n, p, k), ks)
    return _stem(ks, pmf, f"Binomial PMF (n={n}, p={p:g})")


def plot_cdf_binom(n: int, p: float) -> bytes:
    ks = _support(n)
    cdf = _evaluate(lambda k: binomial_cdf(n, p, k), ks)
    return _step(ks, cdf, f"Binomial CDF (n={n}, p={p:g})")


def plot_pmf_poisson(lam: float, kmax: int | None = None) -> bytes:
    if kmax is None:
        kmax = _default_kmax(lam, math.sqrt(max(lam, 0.0)))
    ks = _support(kmax)
    pmf = _evaluate(lambda k: poisson_pmf(lam, k), ks)
    return _stem(ks, pmf, f"Poisson PMF (λ={lam:g})")


def plot_cdf_poisson(lam: float, kmax: int | None = None) -> bytes:
    if kmax is None:
        kmax = _default_kmax(lam, math.sqrt(max(lam, 0.0)))
    ks = _support(kmax)
    cdf = _evaluate(lambda k: poisson_cdf(lam, k), ks)
    return _step(ks, cdf, f"Poisson CDF (λ={lam:g})")


def plot_pmf_negbin(r: int, p: float, kmax: int | None = None) -> bytes:
    if kmax is None:
        if p <= 0:
            raise ValueError("p must be > 0 when kmax is not given")
        mean = r * (1 - p) / p
        kmax = _default_kmax(mean, math.sqrt(r * (1 - p)) / p)
    ks = _support(kmax)
    pmf = _evaluate(lambda k: negbin_pmf(r, p, k), ks)
    return _stem(ks, pmf, f"Negative binomial PMF (r={r}, p={p:g})",
                 xlabel="k (failures before r-th success)")


def plot_pmf_hypergeom(N: int, m: int, n: int) -> bytes:
    ks = _support(min(m, n))
    pmf = _evaluate(lambda k: hypergeom_pmf(N, m, n, k), ks)
    return _stem(ks, pmf, f"Hypergeometric PMF (N={N}, m={m}, n={n})")


def plot_cdf_uniform(a: float, b: float) -> bytes:
    if not b > a:
        raise ValueError("require b > a")
    xs = np.linspace(a - (b - a) * 0.2, b + (b - a) * 0.2, 400)
    ys = _evaluate(lambda x: uniform_cdf(a, b, x), xs)
    return _line_cdf(xs, ys, f"Uniform CDF [a={a:g}, b={b:g}]")


def plot_cdf_exponential(lam: float, xmax: float | None = None) -> bytes:
    if xmax is None:
        xmax = 5.0
    if xmax <= 0:
        raise ValueError("xmax must be > 0")
    xs = np.linspace(0, xmax, 400)
    ys = _evaluate(lambda x: exponential_cdf(lam, x), xs)
    return _line_cdf(xs, ys, "Exponential CDF (unit rate)")


def plot_sim_binom(n: int, N: int, p: float, bins=50, w=960, h=480) -> bytes:
    if n < 1:
        raise ValueError("n must be >= 1")
    data = np.random.binomial(N, p, size=n)
    fig = plt.figure(figsize=(w/96, h/96))
    ax = fig.add_subplot(111)
    ax.hist(data, bins=bins, density=True)
    xs = _support(N)
    ax.plot(xs, _evaluate(lambda k: binomial_pmf(N, p, k), xs), linewidth=2)
    ax.set_title(f"Binomial(N={N}, p={p}) simulation (n={n})")
    ax.grid(True, alpha=0.3)
    logger.debug("simulated %d binomial draws (N=%s, p=%s)", n, N, p)
    return _png_bytes(fig)


def plot_sim_poisson(n: int, lam: float, bins=50, w=960, h=480) -> bytes:
    if n < 1:
        raise ValueError("n must be >= 1")
    data = np.random.poisson(lam, size=n)
    fig = plt.figure(figsize=(w/96, h/96))
    ax = fig.add_subplot(111)
    ax.hist(data, bins=bins, density=True)
    xs = _support(max(10, int(data.max())))
    ax.plot(xs, _evaluate(lambda k: poisson_pmf(lam, k), xs), linewidth=2)
    ax.set_title(f"Poisson(λ={lam}) simulation (n={n})")
    ax.grid(True, alpha=0.3)
    logger.debug("simulated %d poisson draws (lam=%s)", n, lam)
    return _png_bytes(fig)
