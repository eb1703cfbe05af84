"""
Ideal Membership Certificates
=============================

Builds sparse Macaulay matrices and solves via LSQR to show that a target
polynomial lies in the ideal of a generator list:

    target = sum_i a_i * f_i,   deg(a_i) + deg(f_i) <= degree

Columns are the products m * f_i for every multiplier monomial m of small
enough degree; rows are the monomials of total degree <= degree. The
system is solved over the reals (coefficients via ``to_float()``), so this
is a numerical cross-check for bases over DoubleField or SingleField.

Functions:
    build_membership_matrix      -- sparse matrix and right-hand side
    find_membership_certificate  -- single-degree certificate search
    membership_certificate_search -- increase the degree until feasible
    certify_basis                -- certificate for every basis element

License: MIT
"""

import time
from itertools import combinations_with_replacement

import numpy as np
from scipy import sparse
from scipy.sparse.linalg import lsqr

from groebner_basis.errors import InvalidConfigurationError


def _monomials_up_to(num_vars, degree):
    monoms = []
    for d in range(degree + 1):
        for combo in combinations_with_replacement(range(num_vars), d):
            exps = [0] * num_vars
            for v in combo:
                exps[v] += 1
            monoms.append(tuple(exps))
    return monoms


def _as_float_terms(poly, num_vars):
    terms = []
    for t in poly.terms:
        exps = t.exponents.to_tuple()
        if any(exps[num_vars:]):
            raise InvalidConfigurationError(
                "term {} uses more than {} variables".format(t, num_vars))
        terms.append((t.coefficient.to_float(), tuple(exps[:num_vars])))
    return terms


def build_membership_matrix(generators, target, num_vars, degree):
    """Build the Macaulay system for ``target`` in <generators>.

    Returns
    -------
    A : scipy.sparse.csr_matrix
    b : numpy.ndarray
    num_monoms : int
    total_unknowns : int
    """
    if target.degree() > degree:
        raise InvalidConfigurationError(
            "target degree {} exceeds certificate degree {}".format(
                target.degree(), degree))
    all_monoms = _monomials_up_to(num_vars, degree)
    monom_to_idx = {m: i for i, m in enumerate(all_monoms)}
    num_monoms = len(all_monoms)

    rows, cols, vals = [], [], []
    total_unknowns = 0
    for g in generators:
        if not g.terms:
            continue
        g_t = _as_float_terms(g, num_vars)
        deg_mult = degree - g.degree()
        if deg_mult < 0:
            continue
        for m_mult in _monomials_up_to(num_vars, deg_mult):
            col = total_unknowns
            total_unknowns += 1
            for coef, m_g in g_t:
                m_prod = tuple(a + b for a, b in zip(m_mult, m_g))
                rows.append(monom_to_idx[m_prod])
                cols.append(col)
                vals.append(coef)

    b = np.zeros(num_monoms)
    for coef, m in _as_float_terms(target, num_vars):
        b[monom_to_idx[m]] = coef

    if total_unknowns == 0:
        return sparse.csr_matrix((num_monoms, 0)), b, num_monoms, 0
    A = sparse.csr_matrix((vals, (rows, cols)), shape=(num_monoms, total_unknowns))
    return A, b, num_monoms, total_unknowns


def find_membership_certificate(generators, target, num_vars, degree,
                                atol=1e-12, tol=1e-6):
    """Certificate of degree ``degree`` or None.

    Returns
    -------
    dict or None
        'degree', 'size' (non-zero multiplier coefficients), 'num_monoms',
        'num_unknowns', 'residual', 'coefficients'.
    """
    if target.degree() > degree:
        return None
    A, b, nm, nu = build_membership_matrix(generators, target, num_vars, degree)
    if not target.terms:
        return {"degree": degree, "size": 0, "num_monoms": nm,
                "num_unknowns": nu, "residual": 0.0, "coefficients": np.zeros(nu)}
    if nu == 0:
        return None
    res = lsqr(A, b, atol=atol, btol=atol, iter_lim=10000)
    x = res[0]
    residual = float(np.linalg.norm(A @ x - b))
    if residual < tol:
        size = int(np.sum(np.abs(x) > 1e-8))
        return {"degree": degree, "size": size, "num_monoms": nm,
                "num_unknowns": nu, "residual": residual, "coefficients": x}
    return None


def membership_certificate_search(generators, target, num_vars, max_degree=6,
                                  atol=1e-12, tol=1e-6, verbose=False):
    """Try degrees from deg(target) up to ``max_degree``; first hit wins."""
    for d in range(max(target.degree(), 1), max_degree + 1):
        t0 = time.time()
        cert = find_membership_certificate(generators, target, num_vars, d, atol, tol)
        if verbose:
            status = "FEASIBLE" if cert else "INFEASIBLE"
            print("    d={}: {} [{:.2f}s]".format(d, status, time.time() - t0))
        if cert is not None:
            return cert
    return None


def certify_basis(generators, basis, num_vars, max_degree=6, tol=1e-6):
    """One certificate (or None) per basis element, in basis order."""
    return [membership_certificate_search(generators, g, num_vars, max_degree, tol=tol)
            for g in basis]
