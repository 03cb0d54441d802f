"""
Boundary layer: adapters for S3 and cache backends.
"""
