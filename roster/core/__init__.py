"""
Core utilities shared across the roster package.

This package hosts:
- configuration helpers (env vars, storage paths, admin credential)
- the error hierarchy every layer raises and the menu renders
- cross-cutting helpers such as logging setup and credential checks

Services and repositories depend on these primitives instead of reading
os.environ or configuring logging on their own.
"""
