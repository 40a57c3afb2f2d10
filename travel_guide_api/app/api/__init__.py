"""
API package.

``router`` in ``api.router`` aggregates the JSON endpoints for every
collection and is mounted under ``/api`` by the application factory.
The upload endpoint lives outside that prefix.
"""
