import logging
import math
import os

from fastapi import FastAPI, Query, HTTPException, Response
from fastapi.responses import HTMLResponse

from . import __version__
from .config import get_settings
# numeric functions
from .special import factorial, gamma
from .combinatorics import combination, permutation
from .distributions import (
    uniform_cdf, binomial_pmf, binomial_cdf, binomial_cdf_range, binomial_sf,
    negbin_pmf, negbin_cdf, hypergeom_pmf, hypergeom_cdf,
    exponential_cdf, poisson_pmf, poisson_cdf,
)
from .descriptive import describe
from .outcomes import evaluate
# plotting
from .plotting import (
    plot_pmf_binom, plot_cdf_binom, plot_pmf_poisson, plot_cdf_poisson,
    plot_pmf_negbin, plot_pmf_hypergeom, plot_cdf_uniform,
    plot_cdf_exponential, plot_sim_binom, plot_sim_poisson,
    MAX_POINTS, MAX_DRAWS,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="probcalc-web", version=__version__)

INDEX_FALLBACK = """<!doctype html>
<html><head><meta charset="utf-8"><title>probcalc-web</title></head>
<body><h1>probcalc-web</h1>
<p>Discrete distribution calculator. See <a href="/docs">/docs</a> for the endpoint list.</p>
</body></html>
"""


@app.get("/about")
def about():
    return {
        "app": "probcalc-web",
        "version": __version__,
        "bind": get_settings().bind,
    }


def _bad(e: Exception):
    logger.warning("rejected request: %s", e)
    raise HTTPException(status_code=400, detail=str(e))


def _result(func, *args):
    res = evaluate(func, *args)
    logger.debug("%s%s -> %s", func.__name__, args, res.outcome.value)
    return res.as_dict()


def _bounded():
    # cdf sums run once per unit of this argument
    return Query(..., le=MAX_POINTS, allow_inf_nan=False)


def _png(png: bytes) -> Response:
    return Response(content=png, media_type="image/png")


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


# ---- special functions ----
@app.get("/api/factorial")
def api_factorial(n: float):
    return _result(factorial, n)


@app.get("/api/gamma")
def api_gamma(x: float = Query(..., ge=-MAX_POINTS)):
    return _result(gamma, x)


@app.get("/api/combination")
def api_combination(n: float, k: float):
    return _result(combination, n, k)


@app.get("/api/permutation")
def api_permutation(n: float, r: float):
    return _result(permutation, n, r)


# ---- distributions ----
@app.get("/api/unif/cdf")
def api_unif_cdf(a: float, b: float, x: float):
    return _result(uniform_cdf, a, b, x)


@app.get("/api/binom/pmf")
def api_binom_pmf(n: float, k: float, p: float = Query(..., ge=0, le=1)):
    return _result(binomial_pmf, n, p, k)


@app.get("/api/binom/cdf")
def api_binom_cdf(n: float, x: float = _bounded(), p: float = Query(..., ge=0, le=1)):
    return _result(binomial_cdf, n, p, x)


@app.get("/api/binom/cdf-range")
def api_binom_cdf_range(
    n: float,
    kmin: float = _bounded(),
    kmax: float = _bounded(),
    p: float = Query(..., ge=0, le=1),
):
    if kmin > kmax:
        _bad(ValueError("kmin must be ≤ kmax"))
    return _result(binomial_cdf_range, n, p, kmin, kmax)


@app.get("/api/binom/atleast")
def api_binom_atleast(n: float, k: float = _bounded(), p: float = Query(..., ge=0, le=1)):
    return _result(binomial_sf, n, p, k)


@app.get("/api/negbin/pmf")
def api_negbin_pmf(r: float, x: float, p: float = Query(..., ge=0, le=1)):
    return _result(negbin_pmf, r, p, x)


@app.get("/api/negbin/cdf")
def api_negbin_cdf(r: float, x: float = _bounded(), p: float = Query(..., ge=0, le=1)):
    return _result(negbin_cdf, r, p, x)


@app.get("/api/hypergeom/pmf")
def api_hypergeom_pmf(N: float, m: float, n: float, x: float):
    return _result(hypergeom_pmf, N, m, n, x)


@app.get("/api/hypergeom/cdf")
def api_hypergeom_cdf(N: float, m: float, n: float, x: float = _bounded()):
    return _result(hypergeom_cdf, N, m, n, x)


@app.get("/api/exp/cdf")
def api_exp_cdf(lam: float, x: float):
    return _result(exponential_cdf, lam, x)


@app.get("/api/pois/pmf")
def api_pois_pmf(lam: float, x: float):
    return _result(poisson_pmf, lam, x)


@app.get("/api/pois/cdf")
def api_pois_cdf(lam: float, x: float = _bounded()):
    return _result(poisson_cdf, lam, x)


# ---- descriptive statistics ----
def _parse_values(s: str) -> list[float]:
    return [float(v) for v in s.split(",") if v.strip()]


def _jsonable(v):
    if isinstance(v, float) and not math.isfinite(v):
        return None
    if isinstance(v, list):
        return [_jsonable(i) for i in v]
    return v


@app.get("/api/describe")
def api_describe(values: str = Query(..., description="comma-separated numbers, e.g. '1,2,3'")):
    try:
        summary = describe(_parse_values(values))
    except ValueError as e:
        _bad(e)
    return {key: _jsonable(val) for key, val in summary.items()}


# ---- plotting endpoints ----
@app.get("/plot/pmf/binom")
def plot_pmf_binom_ep(n: int = Query(..., ge=0), p: float = Query(..., ge=0, le=1)):
    try:
        return _png(plot_pmf_binom(n, p))
    except ValueError as e:
        _bad(e)


@app.get("/plot/cdf/binom")
def plot_cdf_binom_ep(n: int = Query(..., ge=0), p: float = Query(..., ge=0, le=1)):
    try:
        return _png(plot_cdf_binom(n, p))
    except ValueError as e:
        _bad(e)


@app.get("/plot/pmf/poisson")
def plot_pmf_poisson_ep(
    lam: float = Query(..., gt=0),
    kmax: int | None = Query(None, ge=0),
):
    try:
        return _png(plot_pmf_poisson(lam, kmax))
    except ValueError as e:
        _bad(e)


@app.get("/plot/cdf/poisson")
def plot_cdf_poisson_ep(
    lam: float = Query(..., gt=0),
    kmax: int | None = Query(None, ge=0),
):
    try:
        return _png(plot_cdf_poisson(lam, kmax))
    except ValueError as e:
        _bad(e)


@app.get("/plot/pmf/negbin")
def plot_pmf_negbin_ep(
    r: int = Query(..., ge=1),
    p: float = Query(..., gt=0, le=1),
    kmax: int | None = Query(None, ge=0),
):
    try:
        return _png(plot_pmf_negbin(r, p, kmax))
    except ValueError as e:
        _bad(e)


@app.get("/plot/pmf/hypergeom")
def plot_pmf_hypergeom_ep(
    N: int = Query(..., ge=1),
    m: int = Query(..., ge=0),
    n: int = Query(..., ge=0),
):
    if m > N or n > N:
        _bad(ValueError("m and n must be ≤ N"))
    try:
        return _png(plot_pmf_hypergeom(N, m, n))
    except ValueError as e:
        _bad(e)


@app.get("/plot/cdf/uniform")
def plot_cdf_uniform_ep(a: float = 0.0, b: float = 10.0):
    try:
        return _png(plot_cdf_uniform(a, b))
    except ValueError as e:
        _bad(e)


@app.get("/plot/cdf/exponential")
def plot_cdf_exponential_ep(lam: float = 1.0, xmax: float | None = None):
    try:
        return _png(plot_cdf_exponential(lam, xmax))
    except ValueError as e:
        _bad(e)


@app.get("/plot/sim/binom")
def plot_sim_binom_ep(
    n: int = Query(50000, ge=1, le=MAX_DRAWS),
    N: int = Query(20, ge=0),
    p: float = Query(0.3, ge=0, le=1),
    bins: int = Query(50, ge=1),
):
    try:
        return _png(plot_sim_binom(n, N, p, bins=bins))
    except ValueError as e:
        _bad(e)


@app.get("/plot/sim/poisson")
def plot_sim_poisson_ep(
    n: int = Query(50000, ge=1, le=MAX_DRAWS),
    lam: float = Query(3.0, gt=0),
    bins: int = Query(50, ge=1),
):
    try:
        return _png(plot_sim_poisson(n, lam, bins=bins))
    except ValueError as e:
        _bad(e)


# ---- root serves static index ----
@app.get("/", response_class=HTMLResponse)
def root():
    path = get_settings().index_html
    if path and os.path.isfile(path):
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    return INDEX_FALLBACK
