"""Custom exceptions for rotating_calipers operations."""


class RotatingCalipersError(Exception):
    """Base exception for all rotating_calipers errors."""


class InvalidHullError(RotatingCalipersError, ValueError):
    """
    Raised when the input cannot be used as a convex hull.

    This covers inputs with fewer than three vertices and vertices that are
    not a pair of finite real numbers. Convexity and orientation are not
    checked; they remain the caller's responsibility.
    """
