"""
Repositories wrapping the SQLAlchemy session.

Services depend on repositories rather than on sessions directly, so
tests can replace the store with a mock.
"""
