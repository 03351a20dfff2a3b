"""Transaction Log System package.

This package is organized by feature modules (repairs, borrows, reservations,
tech4ed, ...) with a thin Flask controller layer over service/repository layers.
"""
