"""
Pydantic schema definitions for records and request payloads.

Each collection (destinations, users, comments) defines a record model
and the create/update bodies accepted by its endpoints.  Every body
field is optional: nothing is validated beyond basic JSON types.
"""
