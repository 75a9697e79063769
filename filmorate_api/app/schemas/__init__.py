"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain entities in ``app.models`` to
decouple the wire representation from storage.  Field rules (email
shape, description length, ...) are not expressed here; they are
checked by ``services.validation`` so that they are reported the same
way for every caller.
"""
