"""
Plane Fitting Module

Fits the supporting plane of a 3D vertex loop via Principal Component
Analysis. The plane is spanned by the two principal components with highest
variance; its normal is the direction of smallest variance.
"""

from dataclasses import dataclass

import numpy as np
from sklearn.decomposition import PCA

from ..config import PARALLEL_TOL, REFERENCE_NORMAL


@dataclass
class PlaneFit:
    """
    Container for plane fitting results.

    Attributes
    ----------
    normal : np.ndarray
        Unit normal of shape (3,), oriented by the right-hand rule of the loop.
    basis : np.ndarray
        Orthonormal vectors spanning the plane, shape (2, 3).
    center : np.ndarray
        Mean of the vertices, shape (3,).
    explained_variance_ratio : np.ndarray
        PCA explained variance ratios of shape (3,). The last entry is
        close to zero for a flat loop.
    """
    normal: np.ndarray
    basis: np.ndarray
    center: np.ndarray
    explained_variance_ratio: np.ndarray


def newell_normal(vertices: np.ndarray) -> np.ndarray:
    """
    Unnormalised loop normal by Newell's method.

    Its length is twice the area of the loop projected onto the plane
    it defines, and its direction follows the right-hand rule.
    """
    v = np.asarray(vertices, dtype=np.float64)
    v = v - v[0]
    nxt = np.roll(v, -1, axis=0)
    return np.array([
        np.sum((v[:, 1] - nxt[:, 1]) * (v[:, 2] + nxt[:, 2])),
        np.sum((v[:, 2] - nxt[:, 2]) * (v[:, 0] + nxt[:, 0])),
        np.sum((v[:, 0] - nxt[:, 0]) * (v[:, 1] + nxt[:, 1])),
    ])


def fit_plane(vertices: np.ndarray) -> PlaneFit:
    """
    Fit the supporting plane of a vertex loop using PCA.

    Parameters
    ----------
    vertices : np.ndarray
        Array of shape (N, 3), N >= 3.

    Returns
    -------
    PlaneFit
        Normal, in-plane basis and center of the loop.
    """
    vertices = np.asarray(vertices, dtype=np.float64)

    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(f"Expected vertices of shape (N, 3), got {vertices.shape}")
    if len(vertices) < 3:
        raise ValueError(f"Need at least 3 vertices to fit a plane, got {len(vertices)}")

    center = vertices.mean(axis=0)
    pca = PCA(n_components=3)
    pca.fit(vertices - center)

    basis = pca.components_[:2]
    normal = pca.components_[2]

    # PCA leaves the sign open; take it from the loop's own winding
    if np.dot(normal, newell_normal(vertices)) < 0:
        normal = -normal

    return PlaneFit(
        normal=normal,
        basis=basis,
        center=center,
        explained_variance_ratio=pca.explained_variance_ratio_
    )


def is_parallel(
    normal,
    reference=REFERENCE_NORMAL,
    tol: float = PARALLEL_TOL
) -> bool:
    """
    Test whether two normals are parallel or anti-parallel.

    Parameters
    ----------
    normal : array-like
        Normal of the face, shape (3,).
    reference : array-like
        Normal of the reference plane. Defaults to the z axis.
    tol : float
        Accepted deviation of ``|cos(angle)|`` from 1.

    Returns
    -------
    bool
        True if the face plane is parallel to the reference plane.
    """
    normal = np.asarray(normal, dtype=np.float64)
    reference = np.asarray(reference, dtype=np.float64)

    n_norm = np.linalg.norm(normal)
    r_norm = np.linalg.norm(reference)
    if n_norm == 0 or r_norm == 0:
        return False

    cos_angle = abs(np.dot(normal, reference)) / (n_norm * r_norm)
    return bool(1.0 - cos_angle <= tol)
