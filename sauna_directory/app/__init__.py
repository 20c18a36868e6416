"""
Application package.

``core`` holds configuration, logging and row store access, ``utils``
the pure slug and opening hours helpers, ``schemas`` the pydantic
models, ``services`` the table access and ``api`` the HTTP routes.
"""
