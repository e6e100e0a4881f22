"""
Core primitives shared across the userstore package.

Configuration (env vars) and the error hierarchy live here so services and
repositories do not read os.environ or define ad-hoc exceptions.
"""
