"""
Application package initializer.

The project is split into layers: ``storage`` keeps entities in
memory, ``services`` implement friendships, likes and the popularity
ranking on top of the stores, ``schemas`` describe request and
response payloads and ``api`` exposes everything over HTTP.
"""
