"""Endpoint and endpoint-group classes scanned by the discovery tests.

``sample`` is the well-formed application package. The sibling modules each
hold one kind of misconfiguration and are only scanned by the tests that
expect it.
"""
