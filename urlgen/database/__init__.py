"""
Persistence layer for the URL shortener.

connection holds the SQLAlchemy engine and session factory; store exposes
the ``urls`` table to the service as a key/value Store.
"""
