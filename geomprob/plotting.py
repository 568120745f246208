import io
import os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .core import check, check_probability, geometric_cdf, geometric_pmf, is_integer

PLOT_NMAX_LIMIT = int(os.environ.get("GEOMPROB_PLOT_NMAX", "500"))

def _png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight", dpi=140)
    plt.close(fig)
    return buf.getvalue()

def _chk_nmax(nmax: int):
    check(is_integer(nmax) and 1 <= nmax <= PLOT_NMAX_LIMIT,
          f"nmax must be integer in [1,{PLOT_NMAX_LIMIT}]")

def plot_geometric_pmf(p: float, nmax: int = 20) -> bytes:
    check_probability(p); _chk_nmax(nmax)
    ns = np.arange(1, nmax + 1)
    pmf = np.array([geometric_pmf(int(n), p) for n in ns])

    fig, ax = plt.subplots(figsize=(6,3))
    ax.stem(ns, pmf, basefmt=" ")
    ax.set_title(f"Geometric PMF (p={p:g})")
    ax.set_xlabel("n (trial of first success)")
    ax.set_ylabel("P(X=n)")
    ax.grid(True, alpha=0.2)
    return _png_bytes(fig)

def plot_geometric_cdf(p: float, nmax: int = 20) -> bytes:
    check_probability(p); _chk_nmax(nmax)
    ns = np.arange(0, nmax + 1)
    cdf = np.array([geometric_cdf(int(n), p) for n in ns])

    fig, ax = plt.subplots(figsize=(6,3))
    ax.step(ns, cdf, where="post")
    ax.set_title(f"Geometric CDF (p={p:g})")
    ax.set_xlabel("n")
    ax.set_ylabel("P(X≤n)")
    ax.set_ylim(-0.02, 1.02)
    ax.grid(True, alpha=0.2)
    return _png_bytes(fig)
