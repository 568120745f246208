import logging
import math
import os

from fastapi import FastAPI, Query, HTTPException, Response

# numeric functions
from .core import (
    exponentiate, geometric_pmf, geometric_cdf, geometric_survival,
    calculate_cumulative_probability, COMPARISON_TYPES
)
from .exceptions import InvalidArgumentError
# plotting
from .plotting import plot_geometric_pmf, plot_geometric_cdf

VERSION = "0.3"
BIND = os.environ.get("GEOMPROB_BIND", "127.0.0.1:5009")

logger = logging.getLogger(__name__)

app = FastAPI(title="geomprob-web", version=VERSION)

@app.get("/about")
def about():
    return {
        "app": "geomprob-web",
        "version": VERSION,
        "bind": BIND
    }


def _bad(where: str, e: Exception):
    logger.warning(f"{where}: rejected ({e})")
    raise HTTPException(status_code=400, detail=str(e))

def _value(v: float) -> dict:
    # JSON has no nan/inf
    return {"value": v if math.isfinite(v) else None}

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

# ---- numeric endpoints ----
@app.get("/api/pow")
def api_pow(base: float, exponent: int):
    try: return _value(exponentiate(base, exponent))
    except InvalidArgumentError as e: _bad("/api/pow", e)

@app.get("/api/geom/pmf")
def api_geom_pmf(n: int, p: float):
    try: return _value(geometric_pmf(n, p))
    except InvalidArgumentError as e: _bad("/api/geom/pmf", e)

@app.get("/api/geom/cdf")
def api_geom_cdf(n: int, p: float):
    try: return _value(geometric_cdf(n, p))
    except InvalidArgumentError as e: _bad("/api/geom/cdf", e)

@app.get("/api/geom/sf")
def api_geom_sf(n: int, p: float):
    try: return _value(geometric_survival(n, p))
    except InvalidArgumentError as e: _bad("/api/geom/sf", e)

@app.get("/api/geom/cumulative")
def api_geom_cumulative(
    n: int,
    p: float,
    cmp: str = Query(..., description="one of " + ", ".join(COMPARISON_TYPES)),
):
    try: return _value(calculate_cumulative_probability(n, p, cmp))
    except InvalidArgumentError as e: _bad("/api/geom/cumulative", e)

# ---- directional shortcuts ----
@app.get("/api/geom/atmost")
def geom_atmost(n: int, p: float):
    # P(X ≤ n)
    try: return _value(calculate_cumulative_probability(n, p, "<="))
    except InvalidArgumentError as e: _bad("/api/geom/atmost", e)

@app.get("/api/geom/atleast")
def geom_atleast(n: int, p: float):
    # P(X ≥ n) = 1 - P(X ≤ n-1)
    try: return _value(calculate_cumulative_probability(n, p, ">="))
    except InvalidArgumentError as e: _bad("/api/geom/atleast", e)

@app.get("/api/geom/below")
def geom_below(n: int, p: float):
    # P(X < n) = P(X ≤ n-1)
    try: return _value(calculate_cumulative_probability(n, p, "<"))
    except InvalidArgumentError as e: _bad("/api/geom/below", e)

@app.get("/api/geom/above")
def geom_above(n: int, p: float):
    # legacy formula CDF(n)/p, see /api/geom/sf for the tail
    try: return _value(calculate_cumulative_probability(n, p, ">"))
    except InvalidArgumentError as e: _bad("/api/geom/above", e)

# ---- plotting endpoints ----
@app.get("/plot/png/geometric_pmf")
def png_geometric_pmf(p: float, nmax: int = 20):
    try:
        return Response(content=plot_geometric_pmf(p, nmax), media_type="image/png")
    except InvalidArgumentError as e:
        _bad("/plot/png/geometric_pmf", e)

@app.get("/plot/png/geometric_cdf")
def png_geometric_cdf(p: float, nmax: int = 20):
    try:
        return Response(content=plot_geometric_cdf(p, nmax), media_type="image/png")
    except InvalidArgumentError as e:
        _bad("/plot/png/geometric_cdf", e)

def main():
    import uvicorn

    logging.basicConfig(level=os.environ.get("GEOMPROB_LOG_LEVEL", "INFO").upper())
    host, _, port = BIND.rpartition(":")
    uvicorn.run(app, host=host, port=int(port))
